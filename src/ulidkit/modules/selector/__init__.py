"""Representation selector feature - configuration-time binding of codec functions."""

from .schemas import RepresentationKind, SelectorConfig
from .selector import SelectorHandle, configure, configure_from, parse, transform

__all__ = [
    "RepresentationKind",
    "SelectorConfig",
    "SelectorHandle",
    "configure",
    "configure_from",
    "transform",
    "parse",
]
