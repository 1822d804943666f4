"""Fake schema catalog adapter for testing."""

from __future__ import annotations

import threading
from typing import Any, Iterable

from sqltags.domain.table_entity import TableEntityRef


class FakeSchemaCatalog:
    """In-memory implementation of SchemaCatalogPort.

    Bindings are registered per context type. Counts how many times each
    context type was enumerated so tests can verify caching.

    Example:
        >>> fake = FakeSchemaCatalog()
        >>> fake.register(ShopContext, [("Product", "Products")])
        >>> list(fake.list_table_bindings(ShopContext()))
        [TableEntityRef(entity_type='Product', table_name='Products')]
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bindings: dict[type, list[tuple[Any, str | None]]] = {}
        self._errors: dict[type, Exception] = {}
        self._calls: dict[type, int] = {}

    def register(
        self, context_type: type, bindings: Iterable[tuple[Any, str | None]]
    ) -> None:
        """Register (entity_type, table_name) pairs for a context type."""
        self._bindings[context_type] = list(bindings)

    def fail_with(self, context_type: type, error: Exception) -> None:
        """Make enumeration of context_type raise error."""
        self._errors[context_type] = error

    def clear_failure(self, context_type: type) -> None:
        """Undo fail_with() for context_type."""
        self._errors.pop(context_type, None)

    def call_count(self, context_type: type) -> int:
        """Return how many times context_type was enumerated."""
        with self._lock:
            return self._calls.get(context_type, 0)

    def list_table_bindings(self, context: Any) -> list[TableEntityRef]:
        """List the registered bindings for type(context).

        Raises:
            The error registered with fail_with(), if any.
            KeyError: If nothing was registered for the context type.
        """
        context_type = type(context)
        with self._lock:
            self._calls[context_type] = self._calls.get(context_type, 0) + 1

        if context_type in self._errors:
            raise self._errors[context_type]

        return [
            TableEntityRef(entity_type=entity_type, table_name=table_name)
            for entity_type, table_name in self._bindings[context_type]
        ]
