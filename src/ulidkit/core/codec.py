"""ULID value type and lossless conversions to its string and byte representations.

A ULID is a 128-bit unsigned integer, held here as two 64-bit halves. It has two
serialized forms:

- Canonical string: 26 Crockford base32 symbols, uppercase, zero-padded.
  The first symbol carries only 3 bits, so it is always in ``0``-``7``.
- Bytes: 16 bytes, ``high`` big-endian followed by ``low`` big-endian.

All functions are pure; the alphabet and reverse lookup table are built once
at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from .errors import FormatError, FormatErrorReason

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
STRING_LENGTH = 26
BYTES_LENGTH = 16

_HALF_BITS = 64
_HALF_MASK = (1 << _HALF_BITS) - 1
_MAX_VALUE = (1 << 128) - 1
_TIMESTAMP_SHIFT = 80

# Symbol -> 5-bit value, keyed on both ASCII cases so no Unicode case folding applies.
_DECODE_TABLE: dict[str, int] = {
    **{symbol: index for index, symbol in enumerate(ALPHABET)},
    **{symbol.lower(): index for index, symbol in enumerate(ALPHABET)},
}
# 26 * 5 = 130 bits, so the leading symbol may only use the low 3 bits.
_MAX_LEADING_VALUE = 7


@dataclass(frozen=True, slots=True, order=True)
class ULIDValue:
    """Immutable 128-bit ULID split into two unsigned 64-bit halves."""

    high: int
    low: int

    def __post_init__(self) -> None:
        """Validate that both halves are ints that fit in 64 unsigned bits."""
        for name, half in (("high", self.high), ("low", self.low)):
            if not isinstance(half, int) or isinstance(half, bool):
                raise TypeError(f"ULID {name} half must be int, got {type(half).__name__}")
            if not 0 <= half <= _HALF_MASK:
                raise ValueError(f"ULID {name} half must be in [0, 2**64), got {half}")

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Build a ULID value from a single 128-bit integer."""
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"ULID integer must be in [0, 2**128), got {value}")
        return cls(high=value >> _HALF_BITS, low=value & _HALF_MASK)

    @classmethod
    def from_str(cls, text: str) -> ULIDValue:
        """Decode a canonical (case-insensitive) 26-character ULID string."""
        return decode_string(text)

    @classmethod
    def from_bytes(cls, buffer: bytes | bytearray | memoryview) -> ULIDValue:
        """Decode a 16-byte big-endian ULID buffer."""
        return decode_bytes(buffer)

    @property
    def timestamp_ms(self) -> int:
        """Milliseconds since the Unix epoch stored in the top 48 bits."""
        return int(self) >> _TIMESTAMP_SHIFT

    def __int__(self) -> int:
        return (self.high << _HALF_BITS) | self.low

    def __str__(self) -> str:
        return encode_string(self)

    def __bytes__(self) -> bytes:
        return encode_bytes(self)


def encode_string(value: ULIDValue) -> str:
    """Encode a ULID value as its 26-character uppercase canonical string."""
    number = int(value)
    symbols = [""] * STRING_LENGTH
    for position in range(STRING_LENGTH - 1, -1, -1):
        symbols[position] = ALPHABET[number & 0x1F]
        number >>= 5
    return "".join(symbols)


def decode_string(text: str) -> ULIDValue:
    """Decode a 26-character ULID string; lowercase input is accepted."""
    if not isinstance(text, str):
        raise TypeError(f"ULID string must be str, got {type(text).__name__}")
    if len(text) != STRING_LENGTH:
        raise FormatError(
            FormatErrorReason.bad_length,
            text,
            f"expected {STRING_LENGTH} characters, got {len(text)}",
        )

    number = 0
    for position, symbol in enumerate(text):
        digit = _DECODE_TABLE.get(symbol)
        if digit is None:
            raise FormatError(
                FormatErrorReason.bad_character,
                text,
                f"character {symbol!r} at position {position} is not in the ULID alphabet",
            )
        if position == 0 and digit > _MAX_LEADING_VALUE:
            raise FormatError(
                FormatErrorReason.bad_character,
                text,
                f"leading character {text[0]!r} overflows 128 bits",
            )
        number = (number << 5) | digit

    return ULIDValue.from_int(number)


def encode_bytes(value: ULIDValue) -> bytes:
    """Encode a ULID value as 16 bytes: ``high`` then ``low``, both big-endian."""
    return value.high.to_bytes(8, "big") + value.low.to_bytes(8, "big")


def decode_bytes(buffer: bytes | bytearray | memoryview) -> ULIDValue:
    """Decode a 16-byte big-endian buffer into a ULID value."""
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError(f"ULID buffer must be bytes-like, got {type(buffer).__name__}")
    data = bytes(buffer)
    if len(data) != BYTES_LENGTH:
        raise FormatError(
            FormatErrorReason.bad_length,
            buffer,
            f"expected {BYTES_LENGTH} bytes, got {len(data)}",
        )
    return ULIDValue(high=int.from_bytes(data[:8], "big"), low=int.from_bytes(data[8:], "big"))


def identity(value: ULIDValue) -> ULIDValue:
    """Return the ULID value unchanged (native representation)."""
    return value
