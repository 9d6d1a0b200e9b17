from __future__ import annotations

import pytest

from kennitolur.domain import (
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


@pytest.mark.parametrize(
    ("error", "kind", "message"),
    [
        (InvalidLengthError(4), KennitalaErrorKind.INVALID_LENGTH, "Length 4 is invalid"),
        (InvalidNumberError(), KennitalaErrorKind.INVALID_NUMBER, "Invalid number"),
        (InvalidDayError(), KennitalaErrorKind.INVALID_DAY, "Day of birth is invalid"),
        (InvalidMonthError(), KennitalaErrorKind.INVALID_MONTH, "Month of birth is invalid"),
        (
            InvalidRandomDigitsError(),
            KennitalaErrorKind.INVALID_RANDOM_DIGITS,
            "The random digits are invalid",
        ),
        (
            InvalidChecksumError(),
            KennitalaErrorKind.INVALID_CHECKSUM,
            "The kennitala's checksum is invalid",
        ),
        (InvalidCenturyError(), KennitalaErrorKind.INVALID_CENTURY, "Century of birth is invalid"),
    ],
)
def test_error_kind_and_message(
    error: KennitalaError, kind: KennitalaErrorKind, message: str
) -> None:
    assert error.kind is kind
    assert str(error) == message
    assert isinstance(error, ValueError)


def test_every_kind_has_exactly_one_error_class() -> None:
    kinds = [cls.kind for cls in KennitalaError.__subclasses__()]

    assert sorted(kinds) == sorted(KennitalaErrorKind)


def test_invalid_length_keeps_observed_length() -> None:
    error = InvalidLengthError(11)

    assert error.length == 11


def test_errors_compare_by_kind_and_payload() -> None:
    assert InvalidLengthError(4) == InvalidLengthError(4)
    assert InvalidLengthError(4) != InvalidLengthError(5)
    assert InvalidDayError() == InvalidDayError()
    assert InvalidDayError() != InvalidMonthError()
    assert len({InvalidChecksumError(), InvalidChecksumError()}) == 1
