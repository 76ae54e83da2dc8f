"""Core ULID codec - value type, conversions, errors, logging and field types."""

from .codec import (
    ALPHABET,
    BYTES_LENGTH,
    STRING_LENGTH,
    ULIDValue,
    decode_bytes,
    decode_string,
    encode_bytes,
    encode_string,
    identity,
)
from .errors import FormatError, FormatErrorReason, ULIDKitError, UnsupportedKindError
from .logging import add_context, clear_context, configure_logging, get_logger
from .types import ULIDField

__all__ = [
    # Codec
    "ALPHABET",
    "BYTES_LENGTH",
    "STRING_LENGTH",
    "ULIDValue",
    "encode_string",
    "decode_string",
    "encode_bytes",
    "decode_bytes",
    "identity",
    # Errors
    "ULIDKitError",
    "FormatError",
    "FormatErrorReason",
    "UnsupportedKindError",
    # Logging
    "configure_logging",
    "get_logger",
    "add_context",
    "clear_context",
    # Types
    "ULIDField",
]
