"""Identifier generation: defer to an assigned id, otherwise supply and transform a new one."""

from __future__ import annotations

from typing import Any, Self

from ulidkit.core.codec import ULIDValue
from ulidkit.core.logging import get_logger
from ulidkit.modules.selector import RepresentationKind, SelectorHandle, configure

from .schemas import GeneratorConfig
from .supplier import DEFAULT_SUPPLIER_NAME, SupplierRegistry, ULIDSupplier, python_ulid_supplier

logger = get_logger(__name__)


class IdentifierGenerator:
    """Produce identifiers in a fixed representation from an external ULID supplier."""

    def __init__(self, handle: SelectorHandle, supplier: ULIDSupplier = python_ulid_supplier) -> None:
        """Initialize generator with a configured selector handle and a value supplier."""
        self._handle = handle
        self._supplier = supplier

    @property
    def kind(self) -> RepresentationKind:
        """Representation this generator produces."""
        return self._handle.kind

    def generate(self, existing: Any = None) -> Any:
        """Return ``existing`` when already assigned, else a freshly supplied identifier."""
        if existing is not None:
            return existing
        return self._handle.transform(self._supplier())

    def parse(self, representation: Any) -> ULIDValue:
        """Decode a stored identifier back into a ULID value."""
        return self._handle.parse(representation)


class IdentifierGeneratorBuilder:
    """Fluent builder for IdentifierGenerator.

    Usage:
        generator = IdentifierGeneratorBuilder().with_kind("bytes").build()
        new_id = generator.generate()
    """

    def __init__(self) -> None:
        """Initialize builder with the default python-ulid supplier and no kind."""
        self._handle: SelectorHandle | None = None
        self._supplier: ULIDSupplier = python_ulid_supplier
        self._supplier_name = DEFAULT_SUPPLIER_NAME

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> Self:
        """Create a builder pre-populated from a validated generator configuration."""
        return cls().with_kind(config.kind).with_supplier_name(config.supplier)

    def with_kind(self, kind: RepresentationKind | str) -> Self:
        """Bind the representation kind; unsupported kinds raise immediately."""
        self._handle = configure(kind)
        return self

    def with_supplier(self, supplier: ULIDSupplier) -> Self:
        """Use a custom supplier callable."""
        self._supplier = supplier
        self._supplier_name = getattr(supplier, "__name__", repr(supplier))
        return self

    def with_supplier_name(self, name: str) -> Self:
        """Use a supplier registered in SupplierRegistry."""
        self._supplier = SupplierRegistry.get(name)
        self._supplier_name = name
        return self

    def build(self) -> IdentifierGenerator:
        """Build the generator."""
        if self._handle is None:
            raise ValueError("Representation kind must be set with with_kind() before build()")
        logger.debug("generator.built", kind=str(self._handle.kind), supplier=self._supplier_name)
        return IdentifierGenerator(self._handle, self._supplier)
