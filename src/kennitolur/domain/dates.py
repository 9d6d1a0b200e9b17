"""Calendar arithmetic needed to validate a date of birth."""

from __future__ import annotations

from typing import Final

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (
    31,  # January
    28,  # February
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``.

    ``month`` must already be validated; other values are not supported.
    """

    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]
