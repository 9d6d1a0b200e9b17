"""Public domain surface: the kennitala value type and its collaborators."""

from __future__ import annotations

from kennitolur.domain.dates import days_in_month, is_leap_year
from kennitolur.domain.errors import (
    InvalidCenturyError,
    InvalidChecksumError,
    InvalidDayError,
    InvalidLengthError,
    InvalidMonthError,
    InvalidNumberError,
    InvalidRandomDigitsError,
    KennitalaError,
    KennitalaErrorKind,
)
from kennitolur.domain.kennitala import Kennitala, calculate_checksum_digit, is_valid, parse

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
    "calculate_checksum_digit",
    "days_in_month",
    "is_leap_year",
    "is_valid",
    "parse",
]
