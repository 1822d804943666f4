"""Entity-type to table bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TableEntityRef:
    """Binding of one logical entity type to its physical table.

    Value object produced once per entity type when a schema catalog is
    enumerated. Immutable and hashable (as long as entity_type is).

    Attributes:
        entity_type: Opaque handle for the logical entity type. For the
                     Django adapter this is the model class.
        table_name: Physical table name reported by the schema, or None
                    for entity types without a table mapping. Entries with
                    no table never match a statement.
    """

    entity_type: Any
    table_name: str | None

    @property
    def has_table(self) -> bool:
        """Return True if this entity type is mapped to a table."""
        return self.table_name is not None

    def __str__(self) -> str:
        return f"{self.entity_type}::{self.table_name}"


# Ordered, immutable collection of bindings for one schema context type.
SchemaCatalog = tuple[TableEntityRef, ...]
