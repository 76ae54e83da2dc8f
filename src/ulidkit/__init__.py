"""ulidkit - ULID codec with configuration-time representation selection."""

# Core codec
from ulidkit.core import (
    ALPHABET,
    BYTES_LENGTH,
    STRING_LENGTH,
    FormatError,
    FormatErrorReason,
    ULIDField,
    ULIDKitError,
    ULIDValue,
    UnsupportedKindError,
    configure_logging,
    decode_bytes,
    decode_string,
    encode_bytes,
    encode_string,
    get_logger,
    identity,
)

# Generator feature
from ulidkit.modules.generator import (
    GeneratorConfig,
    IdentifierGenerator,
    IdentifierGeneratorBuilder,
    SupplierRegistry,
    ULIDSupplier,
    from_ulid,
    python_ulid_supplier,
    to_ulid,
)

# Selector feature
from ulidkit.modules.selector import (
    RepresentationKind,
    SelectorConfig,
    SelectorHandle,
    configure,
    configure_from,
    parse,
    transform,
)

__all__ = [
    # Core codec
    "ALPHABET",
    "BYTES_LENGTH",
    "STRING_LENGTH",
    "ULIDValue",
    "ULIDField",
    "encode_string",
    "decode_string",
    "encode_bytes",
    "decode_bytes",
    "identity",
    "ULIDKitError",
    "FormatError",
    "FormatErrorReason",
    "UnsupportedKindError",
    "configure_logging",
    "get_logger",
    # Selector feature
    "RepresentationKind",
    "SelectorConfig",
    "SelectorHandle",
    "configure",
    "configure_from",
    "transform",
    "parse",
    # Generator feature
    "GeneratorConfig",
    "IdentifierGenerator",
    "IdentifierGeneratorBuilder",
    "SupplierRegistry",
    "ULIDSupplier",
    "from_ulid",
    "to_ulid",
    "python_ulid_supplier",
]
