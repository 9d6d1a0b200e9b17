"""The kennitala value type.

A kennitala is a 10 digit national identification number assigned to
individuals and organizations in Iceland. Layout, by digit position:

* 1-2: day of birth
* 3-4: month of birth
* 5-6: two-digit year of birth
* 7-8: digits chosen at allocation, 20 to 99
* 9: checksum digit
* 10: century of birth, ``9`` for the 1900s and ``0`` for the 2000s

The checksum digit is derived from the dot product of the first eight digits
with ``(3, 2, 7, 6, 5, 4, 3, 2)``. With ``r`` being that sum modulo 11, the
digit is 0 when ``r`` is 0 and ``11 - r`` otherwise.

Validated fields are packed into a single integer, so equality and hashing
never have to look at more than one number.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Final, Self

from kennitolur.domain.dates import days_in_month
from kennitolur.domain.errors import (
    InvalidCenturyError,
    InvalidChecksumError,
    InvalidDayError,
    InvalidLengthError,
    InvalidMonthError,
    InvalidNumberError,
    InvalidRandomDigitsError,
    KennitalaError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)

KENNITALA_LENGTH: Final = 10
VALIDATION_WEIGHTS: Final[tuple[int, ...]] = (3, 2, 7, 6, 5, 4, 3, 2)
MIN_RANDOM_DIGITS: Final = 20

_ASCII_DIGITS: Final = frozenset("0123456789")
_CENTURY_BASES: Final[dict[int, int]] = {0: 2000, 9: 1900}

# Packed layout, least significant bits first.
_MONTH_SHIFT: Final = 5
_SHORT_YEAR_SHIFT: Final = 9
_RANDOMS_SHIFT: Final = 16
_CENTURY_SHIFT: Final = 26

_DAY_MASK: Final = 0x1F
_MONTH_MASK: Final = 0x0F
_SHORT_YEAR_MASK: Final = 0x7F
_RANDOMS_MASK: Final = 0x3FF


def calculate_checksum_digit(digits: Sequence[int]) -> int:
    """Return the checksum digit for the first eight ``digits``.

    The result is 10 when no digit can satisfy the checksum; it never matches a
    real digit, so such numbers are always rejected.
    """

    weighted = zip(digits[:8], VALIDATION_WEIGHTS, strict=True)
    total = sum(digit * weight for digit, weight in weighted)
    remainder = total % 11
    return 0 if remainder == 0 else 11 - remainder


def _digits_from_text(text: object) -> tuple[int, ...]:
    if not isinstance(text, str):
        raise InvalidNumberError
    # Length is checked before the character class, so "01011413300" is a
    # length error rather than a number error.
    if len(text) != KENNITALA_LENGTH:
        raise InvalidLengthError(len(text))
    if not _ASCII_DIGITS.issuperset(text):
        raise InvalidNumberError
    return tuple(int(char) for char in text)


def _decimal_length(number: int) -> int:
    length = 1
    while number >= 10:  # noqa: PLR2004
        number //= 10
        length += 1
    return length


def _digits_from_int(number: object) -> tuple[int, ...]:
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise InvalidNumberError
    if number >= 10**KENNITALA_LENGTH:
        raise InvalidLengthError(_decimal_length(number))
    return _digits_from_text(f"{number:0{KENNITALA_LENGTH}d}")


def _validate_and_pack(digits: Sequence[int]) -> int:
    if calculate_checksum_digit(digits) != digits[8]:
        raise InvalidChecksumError

    if digits[6] * 10 + digits[7] < MIN_RANDOM_DIGITS:
        raise InvalidRandomDigitsError

    century_base = _CENTURY_BASES.get(digits[9])
    if century_base is None:
        raise InvalidCenturyError

    month = digits[2] * 10 + digits[3]
    if not 1 <= month <= 12:  # noqa: PLR2004
        raise InvalidMonthError

    short_year = digits[4] * 10 + digits[5]

    day = digits[0] * 10 + digits[1]
    if not 1 <= day <= days_in_month(month, century_base + short_year):
        raise InvalidDayError

    randoms = digits[6] * 100 + digits[7] * 10 + digits[8]
    century_bit = 1 if century_base == 1900 else 0  # noqa: PLR2004
    return (
        day
        | month << _MONTH_SHIFT
        | short_year << _SHORT_YEAR_SHIFT
        | randoms << _RANDOMS_SHIFT
        | century_bit << _CENTURY_SHIFT
    )


def _pack_or_reject(read_digits: Callable[[object], Sequence[int]], value: object) -> int:
    try:
        return _validate_and_pack(read_digits(value))
    except KennitalaError as exc:
        log.debug("Rejected kennitala input: %s", exc.kind)
        raise


@dataclass(frozen=True, init=False, repr=False)
class Kennitala:
    """A validated kennitala.

    Construct from the 10 character string or from the equivalent integer
    (leading zeros are implied). Invalid input raises a ``KennitalaError``
    subclass describing the first rule that failed; checks run in the order
    checksum, random digits, century, month, day.

    >>> kt = Kennitala("3110002920")
    >>> kt.birthday
    datetime.date(2000, 10, 31)
    >>> str(kt)
    '3110002920'
    """

    _packed: int

    def __init__(self, value: str | int) -> None:
        is_number = isinstance(value, int) and not isinstance(value, bool)
        read_digits = _digits_from_int if is_number else _digits_from_text
        object.__setattr__(self, "_packed", _pack_or_reject(read_digits, value))

    @classmethod
    def parse(cls, text: str) -> Self:
        """Validate ``text``, which must be exactly 10 ASCII digits."""

        instance = object.__new__(cls)
        object.__setattr__(instance, "_packed", _pack_or_reject(_digits_from_text, text))
        return instance

    @classmethod
    def from_int(cls, number: int) -> Self:
        """Validate ``number`` as the decimal digits of a kennitala.

        Numbers with fewer than 10 digits are padded with leading zeros, so
        ``311203149`` is read as ``"0311203149"``.
        """

        instance = object.__new__(cls)
        object.__setattr__(instance, "_packed", _pack_or_reject(_digits_from_int, number))
        return instance

    @property
    def day(self) -> int:
        """Day of birth, 1-31."""
        return self._packed & _DAY_MASK

    @property
    def month(self) -> int:
        """Month of birth, 1-12."""
        return (self._packed >> _MONTH_SHIFT) & _MONTH_MASK

    @property
    def short_year(self) -> int:
        """Year of birth as printed, 0-99."""
        return (self._packed >> _SHORT_YEAR_SHIFT) & _SHORT_YEAR_MASK

    @property
    def short_century_digit(self) -> int:
        """The printed century digit: 9 for the 1900s, 0 for the 2000s."""
        return 9 if self._born_in_1900s else 0

    @property
    def year(self) -> int:
        """Full year of birth, 1900-2099."""
        return self.short_year + (1900 if self._born_in_1900s else 2000)

    @property
    def randoms(self) -> int:
        """The 7th to 9th digits as one number, 20-999.

        Covers the two allocated digits followed by the checksum digit.
        """
        return (self._packed >> _RANDOMS_SHIFT) & _RANDOMS_MASK

    @property
    def checksum_digit(self) -> int:
        return self.randoms % 10

    @property
    def birthday(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def _born_in_1900s(self) -> bool:
        return bool(self._packed >> _CENTURY_SHIFT & 1)

    def __str__(self) -> str:
        return (
            f"{self.day:02d}{self.month:02d}{self.short_year:02d}"
            f"{self.randoms:03d}{self.short_century_digit}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __int__(self) -> int:
        return int(str(self))

    def __format__(self, format_spec: str) -> str:
        text = str(self)
        if not format_spec:
            return text
        if format_spec == "-":
            return f"{text[:6]}-{text[6:]}"
        raise ValueError(f"Invalid format specifier {format_spec!r} for Kennitala")


def parse(text: str) -> Kennitala | KennitalaError:
    """Validate ``text`` and return either the kennitala or the error.

    Only validation failures are returned; anything else propagates.
    """

    try:
        return Kennitala.parse(text)
    except KennitalaError as exc:
        return exc


def is_valid(value: str | int) -> bool:
    try:
        Kennitala(value)
    except KennitalaError:
        return False
    return True


__all__ = [
    "KENNITALA_LENGTH",
    "MIN_RANDOM_DIGITS",
    "VALIDATION_WEIGHTS",
    "Kennitala",
    "calculate_checksum_digit",
    "is_valid",
    "parse",
]
