"""Identifier generator feature - supplier registry and caller-side id generation."""

from .generator import IdentifierGenerator, IdentifierGeneratorBuilder
from .schemas import GeneratorConfig
from .supplier import (
    DEFAULT_SUPPLIER_NAME,
    SupplierRegistry,
    ULIDSupplier,
    from_ulid,
    python_ulid_supplier,
    to_ulid,
)

__all__ = [
    "IdentifierGenerator",
    "IdentifierGeneratorBuilder",
    "GeneratorConfig",
    "SupplierRegistry",
    "ULIDSupplier",
    "DEFAULT_SUPPLIER_NAME",
    "from_ulid",
    "to_ulid",
    "python_ulid_supplier",
]
