"""Pydantic field types for ULID values."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema
from ulid import ULID

from .codec import ULIDValue, decode_bytes, decode_string, encode_string


def _coerce_ulid_value(value: Any) -> ULIDValue:
    """Accept a ULIDValue, canonical string, 16-byte buffer or python-ulid ULID."""
    if isinstance(value, ULIDValue):
        return value
    if isinstance(value, str):
        return decode_string(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return decode_bytes(value)
    if isinstance(value, ULID):
        return decode_bytes(bytes(value))
    # pydantic only wraps ValueError/AssertionError into ValidationError
    raise ValueError(f"Cannot interpret {type(value).__name__} as a ULID")


ULIDField = Annotated[
    ULIDValue,
    PlainValidator(_coerce_ulid_value),
    PlainSerializer(encode_string, return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "minLength": 26,
            "maxLength": 26,
            "pattern": "^[0-7][0-9A-HJKMNP-TV-Za-hjkmnp-tv-z]{25}$",
        }
    ),
]
"""Pydantic type for ULID values.

Validation accepts:
- ULIDValue instances (passed through)
- 26-character strings in either case
- 16-byte big-endian buffers
- ``ulid.ULID`` instances from python-ulid

Serialization always produces the canonical uppercase string, in both
``model_dump()`` and ``model_dump_json()``.

Usage:
    class Record(BaseModel):
        id: ULIDField
"""
