"""Build well-formed kennitala strings for tests."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from kennitolur.domain import calculate_checksum_digit

if TYPE_CHECKING:
    from collections.abc import Iterator


def build_kennitala(birthday: date, randoms: int = 20) -> str | None:
    """Return the kennitala for ``birthday`` and two allocated digits, if one exists."""

    prefix = f"{birthday:%d%m%y}{randoms:02d}"
    checksum = calculate_checksum_digit([int(char) for char in prefix])
    if checksum > 9:
        return None
    century = "9" if birthday.year < 2000 else "0"
    return f"{prefix}{checksum}{century}"


def sample_kennitolur(start: date, end: date, step_days: int = 37) -> Iterator[str]:
    current = start
    randoms = 20
    while current <= end:
        text = build_kennitala(current, randoms)
        if text is not None:
            yield text
        current += timedelta(days=step_days)
        randoms = randoms + 7 if randoms + 7 <= 99 else 20
