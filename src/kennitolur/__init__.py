from __future__ import annotations

from importlib import metadata

from kennitolur.domain import (
    InvalidCenturyError,
    InvalidChecksumError,
    InvalidDayError,
    InvalidLengthError,
    InvalidMonthError,
    InvalidNumberError,
    InvalidRandomDigitsError,
    Kennitala,
    KennitalaError,
    KennitalaErrorKind,
    days_in_month,
    is_leap_year,
    is_valid,
    parse,
)

try:
    __version__ = metadata.version("kennitolur")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "InvalidCenturyError",
    "InvalidChecksumError",
    "InvalidDayError",
    "InvalidLengthError",
    "InvalidMonthError",
    "InvalidNumberError",
    "InvalidRandomDigitsError",
    "Kennitala",
    "KennitalaError",
    "KennitalaErrorKind",
    "__version__",
    "days_in_month",
    "is_leap_year",
    "is_valid",
    "parse",
]
