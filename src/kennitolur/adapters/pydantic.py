"""Pydantic field type for models that carry a kennitala."""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from kennitolur.domain.kennitala import Kennitala


def _coerce_kennitala(value: object) -> Kennitala:
    if isinstance(value, Kennitala):
        return value
    if isinstance(value, str | int):
        # KennitalaError is a ValueError, which pydantic reports as a validation error.
        return Kennitala(value)
    raise ValueError(f"Expected a kennitala string or integer, got {type(value).__name__}")


def _serialize_kennitala(value: Kennitala) -> str:
    return str(value)


KennitalaField = Annotated[
    Kennitala,
    PlainValidator(_coerce_kennitala),
    PlainSerializer(_serialize_kennitala, return_type=str),
    WithJsonSchema({"type": "string", "pattern": "^[0-9]{10}$"}),
]

__all__ = ["KennitalaField"]
