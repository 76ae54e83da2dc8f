"""Representation kinds and selector configuration schema."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class RepresentationKind(StrEnum):
    """Target shape of an identifier field."""

    native = "native"  # ULIDValue itself
    string = "string"  # 26-character canonical string
    bytes = "bytes"  # 16-byte big-endian buffer


class SelectorConfig(BaseModel):
    """Configuration binding an identifier field to a representation kind."""

    model_config = {"frozen": True}

    kind: RepresentationKind = Field(description="Representation the identifier field stores")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: object) -> object:
        """Accept kind names in any case."""
        if isinstance(v, str) and not isinstance(v, RepresentationKind):
            return v.strip().lower()
        return v
