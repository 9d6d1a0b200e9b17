"""Validation failures raised (or returned) when a kennitala is rejected.

Each rule has its own exception class so callers can catch precisely, and a
``KennitalaErrorKind`` so the failure can be reported without inspecting types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class KennitalaErrorKind(StrEnum):
    INVALID_LENGTH = "invalid_length"
    INVALID_NUMBER = "invalid_number"
    INVALID_DAY = "invalid_day"
    INVALID_MONTH = "invalid_month"
    INVALID_RANDOM_DIGITS = "invalid_random_digits"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_CENTURY = "invalid_century"


class KennitalaError(ValueError):
    """Base class for every rule a kennitala can violate."""

    kind: ClassVar[KennitalaErrorKind]
    message: ClassVar[str]

    def __init__(self) -> None:
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KennitalaError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidLengthError(KennitalaError):
    """The kennitala does not have exactly 10 digits."""

    kind = KennitalaErrorKind.INVALID_LENGTH
    message = "Length {length} is invalid"

    def __init__(self, length: int) -> None:
        self.length = length
        ValueError.__init__(self, self.message.format(length=length))


class InvalidNumberError(KennitalaError):
    """The input contains something other than the ASCII digits 0-9."""

    kind = KennitalaErrorKind.INVALID_NUMBER
    message = "Invalid number"


class InvalidDayError(KennitalaError):
    """The 1st and 2nd digits are not a valid day for the given month and year."""

    kind = KennitalaErrorKind.INVALID_DAY
    message = "Day of birth is invalid"


class InvalidMonthError(KennitalaError):
    """The 3rd and 4th digits are not a month between 01 and 12."""

    kind = KennitalaErrorKind.INVALID_MONTH
    message = "Month of birth is invalid"


class InvalidRandomDigitsError(KennitalaError):
    """The 7th and 8th digits, read together, are below 20."""

    kind = KennitalaErrorKind.INVALID_RANDOM_DIGITS
    message = "The random digits are invalid"


class InvalidChecksumError(KennitalaError):
    """The 9th digit does not match the checksum of the first eight."""

    kind = KennitalaErrorKind.INVALID_CHECKSUM
    message = "The kennitala's checksum is invalid"


class InvalidCenturyError(KennitalaError):
    """The 10th digit is neither 9 (1900s) nor 0 (2000s)."""

    kind = KennitalaErrorKind.INVALID_CENTURY
    message = "Century of birth is invalid"


__all__ = [
    "InvalidCenturyError",
    "InvalidChecksumError",
    "InvalidDayError",
    "InvalidLengthError",
    "InvalidMonthError",
    "InvalidNumberError",
    "InvalidRandomDigitsError",
    "KennitalaError",
    "KennitalaErrorKind",
]
