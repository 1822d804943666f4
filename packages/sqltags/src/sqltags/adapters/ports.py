"""Port interfaces for the sqltags core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqltags.domain.table_entity import SchemaCatalog, TableEntityRef


@runtime_checkable
class SchemaCatalogPort(Protocol):
    """Port interface for enumerating a schema context's entity bindings.

    Implementations know how a particular ORM describes its models and turn
    that description into TableEntityRef values. The core never inspects a
    schema context itself; it only hands it to this port.

    Contract:
        - list_table_bindings(context) yields one TableEntityRef per entity
          type known to the context, in a stable order
        - Entity types without a table mapping yield table_name=None
        - Enumeration may be expensive (schema reflection); callers cache
          the result per context type
        - May raise if the context is misconfigured or unavailable; the
          error is propagated to the caller unchanged
    """

    def list_table_bindings(self, context: Any) -> Iterable[TableEntityRef]:
        """List entity-to-table bindings for a schema context.

        Args:
            context: Schema context handle (e.g., a Django app registry).

        Returns:
            Iterable of TableEntityRef, one per entity type.

        Raises:
            Any exception from the ORM boundary if the schema cannot be read.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for structured logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases that need to report
    cache activity or detected content-hash collisions.

    Contract:
        - warning(message) logs a warning-level message
        - debug(message) logs a debug-level message
        - Both are fire-and-forget (no return value, no exceptions propagated)
        - Thread safety is implementation-defined
    """

    def warning(self, message: str) -> None:
        """Log a warning message.

        Args:
            message: The warning message to log.
        """
        ...

    def debug(self, message: str) -> None:
        """Log a debug message.

        Args:
            message: The debug message to log.
        """
        ...


@runtime_checkable
class SQLCommandsProcessorPort(Protocol):
    """Port interface for the statement analysis surface.

    Consumed by caching layers that decide whether a result may be cached
    and which entries to invalidate after a write.

    Contract:
        - is_mutating() never raises for any text
        - table_names_for() is memoized per statement text
        - catalog_for() is memoized per schema context type
        - affected_entity_types_for() combines both caches
    """

    def is_mutating(self, text: str | None) -> bool:
        """Return True if the statement inserts, updates, deletes or creates."""
        ...

    def table_names_for(self, text: str | None) -> frozenset[str]:
        """Return the table names referenced by a statement."""
        ...

    def catalog_for(self, context: Any) -> SchemaCatalog:
        """Return the entity/table catalog for a schema context."""
        ...

    def affected_entity_types(
        self, text: str | None, catalog: Iterable[TableEntityRef]
    ) -> list[Any]:
        """Return entity types from catalog whose table the statement references."""
        ...

    def entity_types_for_tables(
        self, table_names: frozenset[str], catalog: Iterable[TableEntityRef]
    ) -> list[Any]:
        """Return entity types from catalog owning one of table_names."""
        ...

    def affected_entity_types_for(self, text: str | None, context: Any) -> list[Any]:
        """Return entity types of context whose table the statement references."""
        ...
