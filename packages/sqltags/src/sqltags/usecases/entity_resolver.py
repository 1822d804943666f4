"""Entity resolution use case.

Maps the tables a statement references back to the entity types that own
them, which is what a cache layer tags its entries with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from sqltags.domain.table_entity import TableEntityRef
    from sqltags.usecases.statement_cache import StatementTableNameCache


class EntityResolver:
    """Intersects a statement's table names with a schema catalog.

    Dependencies:
        - StatementTableNameCache: Memoized table names of a statement
    """

    def __init__(self, statement_cache: StatementTableNameCache) -> None:
        self._statement_cache = statement_cache

    def affected_entity_types(
        self, text: str | None, catalog: Iterable[TableEntityRef]
    ) -> list[Any]:
        """Return the entity types whose table the statement references.

        Args:
            text: Statement text.
            catalog: Entity bindings to match against.

        Returns:
            Entity types in catalog order. Entries without a table name are
            never returned; an entity type appears twice only if the catalog
            lists its table twice.
        """
        return self.entity_types_for_tables(
            self._statement_cache.table_names_for(text), catalog
        )

    def entity_types_for_tables(
        self, table_names: frozenset[str], catalog: Iterable[TableEntityRef]
    ) -> list[Any]:
        """Return the entity types of catalog whose table is in table_names."""
        if not table_names:
            return []

        return [
            ref.entity_type
            for ref in catalog
            if ref.has_table and ref.table_name in table_names
        ]
