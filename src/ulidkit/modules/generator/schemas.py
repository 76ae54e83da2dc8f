"""Generator configuration schema."""

from __future__ import annotations

from pydantic import Field

from ulidkit.modules.selector.schemas import SelectorConfig

from .supplier import DEFAULT_SUPPLIER_NAME


class GeneratorConfig(SelectorConfig):
    """Representation kind plus the name of a registered value supplier."""

    supplier: str = Field(default=DEFAULT_SUPPLIER_NAME, description="Name in SupplierRegistry")
