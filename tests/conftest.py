"""Test configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from ulidkit import SupplierRegistry, ULIDValue

# (high, low) -> canonical string -> bytes, computed independently of the codec
SAMPLE_VALUE = ULIDValue(high=0x0123456789ABCDEF, low=0xFEDCBA9876543210)
SAMPLE_STRING = "014D2PF2DBSQQZXQ5TK1V58CGG"
SAMPLE_BYTES = bytes.fromhex("0123456789abcdeffedcba9876543210")

# Example identifier from the ULID reference documentation
KNOWN_STRING = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
KNOWN_VALUE = ULIDValue(high=0x01563E3AB5D3D676, low=0x4C61EFB99302BD5B)
KNOWN_TIMESTAMP_MS = 1469922850259

MAX_VALUE = ULIDValue(high=2**64 - 1, low=2**64 - 1)
MAX_STRING = "7" + "Z" * 25


class FixedSupplier:
    """Supplier returning a fixed sequence of values and counting calls."""

    def __init__(self, *values: ULIDValue) -> None:
        self._values = list(values)
        self.calls = 0

    def __call__(self) -> ULIDValue:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_supplier() -> FixedSupplier:
    """Supplier that always yields the sample value."""
    return FixedSupplier(SAMPLE_VALUE)


@pytest.fixture
def clean_supplier_registry() -> Iterator[None]:
    """Snapshot and restore the global supplier registry around a test."""
    saved = dict(SupplierRegistry._registry)
    try:
        yield
    finally:
        SupplierRegistry._registry.clear()
        SupplierRegistry._registry.update(saved)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root logger handlers/level and structlog defaults after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers.clear()
        root.handlers.extend(handlers)
        root.setLevel(level)
        structlog.reset_defaults()
