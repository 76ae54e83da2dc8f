"""Error taxonomy for ULID decoding and representation configuration."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class FormatErrorReason(StrEnum):
    """Why a serialized ULID could not be decoded."""

    bad_length = "bad_length"
    bad_character = "bad_character"


class ULIDKitError(Exception):
    """Base exception for all ulidkit errors."""


class FormatError(ULIDKitError, ValueError):
    """Raised when a string or byte buffer is not a valid ULID representation.

    Attributes:
        reason: Which check failed
        input: The offending input, unchanged
    """

    def __init__(self, reason: FormatErrorReason, input: Any, detail: str | None = None) -> None:
        self.reason = reason
        self.input = input
        message = f"Invalid ULID representation ({reason}): {input!r}"
        if detail:
            message = f"{message} - {detail}"
        super().__init__(message)


class UnsupportedKindError(ULIDKitError, ValueError):
    """Raised at configuration time for an unrecognized representation kind."""

    def __init__(self, requested_kind: Any) -> None:
        self.requested_kind = requested_kind
        super().__init__(f"Unsupported ULID representation kind: {requested_kind!r}")
