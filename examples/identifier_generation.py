"""Example: assign ULID identifiers to records stored as strings or 16-byte keys."""

from __future__ import annotations

from pydantic import BaseModel

from ulidkit import (
    GeneratorConfig,
    IdentifierGeneratorBuilder,
    ULIDField,
    ULIDValue,
    configure_logging,
    get_logger,
)

log = get_logger(__name__)

# Identifier already assigned to a record loaded from storage
KNOWN_RECORD_ID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"


class Record(BaseModel):
    """Record with a ULID primary key."""

    id: ULIDField
    name: str


def assign_ids(names: list[str], existing: dict[str, str] | None = None) -> dict[str, str]:
    """Give every name a string ULID, keeping identifiers that are already assigned."""
    existing = existing or {}
    generator = IdentifierGeneratorBuilder.from_config(GeneratorConfig(kind="string")).build()
    return {name: generator.generate(existing.get(name)) for name in names}


def binary_keys(count: int) -> list[bytes]:
    """Produce ``count`` identifiers in their 16-byte storage form."""
    generator = IdentifierGeneratorBuilder().with_kind("bytes").build()
    return [generator.generate() for _ in range(count)]


def main() -> None:
    """Demonstrate string and binary identifier generation."""
    configure_logging()

    ids = assign_ids(["alpha", "beta"], existing={"alpha": KNOWN_RECORD_ID})
    log.info("string_ids_assigned", ids=ids)

    keys = binary_keys(3)
    log.info("binary_keys_generated", keys=[key.hex() for key in keys])

    record = Record(id=keys[0], name="gamma")
    log.info("record_serialized", record=record.model_dump_json())
    assert isinstance(record.id, ULIDValue)


if __name__ == "__main__":
    main()
