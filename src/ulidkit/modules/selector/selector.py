"""Bind a representation kind to its encode/decode pair once, then apply it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ulidkit.core.codec import (
    ULIDValue,
    decode_bytes,
    decode_string,
    encode_bytes,
    encode_string,
    identity,
)
from ulidkit.core.errors import UnsupportedKindError
from ulidkit.core.logging import get_logger

from .schemas import RepresentationKind, SelectorConfig

type Encoder = Callable[[ULIDValue], Any]
type Decoder = Callable[[Any], ULIDValue]

logger = get_logger(__name__)


def _parse_native(value: Any) -> ULIDValue:
    """Decode for the native kind: the stored value must already be a ULIDValue."""
    if not isinstance(value, ULIDValue):
        raise TypeError(f"Expected ULIDValue for native representation, got {type(value).__name__}")
    return identity(value)


_BINDINGS: dict[RepresentationKind, tuple[Encoder, Decoder]] = {
    RepresentationKind.native: (identity, _parse_native),
    RepresentationKind.string: (encode_string, decode_string),
    RepresentationKind.bytes: (encode_bytes, decode_bytes),
}
_KIND_NAMES = frozenset(kind.value for kind in RepresentationKind)


@dataclass(frozen=True, slots=True)
class SelectorHandle:
    """Immutable encode/decode pair bound to one representation kind.

    Safe to share between threads; holds no mutable state.
    """

    kind: RepresentationKind
    encode: Encoder
    decode: Decoder

    def transform(self, value: ULIDValue) -> Any:
        """Convert a ULID value into the bound representation."""
        return self.encode(value)

    def parse(self, representation: Any) -> ULIDValue:
        """Convert a stored representation back into a ULID value."""
        return self.decode(representation)


def _resolve_kind(kind: Any) -> RepresentationKind:
    if isinstance(kind, RepresentationKind):
        return kind
    if isinstance(kind, str):
        normalized = kind.strip().lower()
        if normalized in _KIND_NAMES:
            return RepresentationKind(normalized)
    logger.warning("selector.unsupported_kind", requested_kind=repr(kind))
    raise UnsupportedKindError(kind)


def configure(kind: RepresentationKind | str) -> SelectorHandle:
    """Build a handle for ``kind``; unrecognized kinds fail here, before any use."""
    resolved = _resolve_kind(kind)
    encode, decode = _BINDINGS[resolved]
    logger.debug("selector.configured", kind=str(resolved))
    return SelectorHandle(kind=resolved, encode=encode, decode=decode)


def configure_from(config: SelectorConfig) -> SelectorHandle:
    """Build a handle from a validated selector configuration."""
    return configure(config.kind)


def transform(handle: SelectorHandle, value: ULIDValue) -> Any:
    """Apply the handle's bound encoder."""
    return handle.transform(value)


def parse(handle: SelectorHandle, representation: Any) -> ULIDValue:
    """Apply the handle's bound decoder; FormatError propagates unchanged."""
    return handle.parse(representation)
