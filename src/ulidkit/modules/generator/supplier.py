"""External ULID value suppliers and a global registry of them."""

from __future__ import annotations

from collections.abc import Callable

from ulid import ULID

from ulidkit.core.codec import ULIDValue, decode_bytes, encode_bytes
from ulidkit.core.logging import get_logger

type ULIDSupplier = Callable[[], ULIDValue]

DEFAULT_SUPPLIER_NAME = "python-ulid"

logger = get_logger(__name__)


def from_ulid(ulid: ULID) -> ULIDValue:
    """Convert a python-ulid ``ULID`` into a ULID value."""
    return decode_bytes(bytes(ulid))


def to_ulid(value: ULIDValue) -> ULID:
    """Convert a ULID value into a python-ulid ``ULID``."""
    return ULID.from_bytes(encode_bytes(value))


def python_ulid_supplier() -> ULIDValue:
    """Draw a fresh ULID from python-ulid (millisecond timestamp + 80 random bits)."""
    return from_ulid(ULID())


class SupplierRegistry:
    """Global registry of named ULID value suppliers."""

    _registry: dict[str, ULIDSupplier] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[ULIDSupplier], ULIDSupplier]:
        """Decorator to register a supplier under ``name``.

        Usage:
            @SupplierRegistry.register("fixed-clock")
            def fixed_clock_supplier() -> ULIDValue:
                return from_ulid(ULID.from_timestamp(1_700_000_000))
        """

        def decorator(func: ULIDSupplier) -> ULIDSupplier:
            cls.register_function(name, func)
            return func

        return decorator

    @classmethod
    def register_function(cls, name: str, func: ULIDSupplier) -> None:
        """Imperatively register a supplier."""
        if name in cls._registry:
            raise ValueError(f"Supplier '{name}' already registered")
        cls._registry[name] = func
        logger.debug("supplier.registered", name=name)

    @classmethod
    def get(cls, name: str) -> ULIDSupplier:
        """Retrieve a registered supplier."""
        if name not in cls._registry:
            raise KeyError(f"Supplier '{name}' not found in registry")
        return cls._registry[name]

    @classmethod
    def list_all(cls) -> list[str]:
        """List all registered supplier names."""
        return sorted(cls._registry.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registered suppliers, including the default (useful for testing)."""
        cls._registry.clear()

    @classmethod
    def register_defaults(cls) -> None:
        """Register the built-in python-ulid supplier if it is missing."""
        if DEFAULT_SUPPLIER_NAME not in cls._registry:
            cls.register_function(DEFAULT_SUPPLIER_NAME, python_ulid_supplier)


SupplierRegistry.register_defaults()
