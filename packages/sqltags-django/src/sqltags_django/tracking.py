"""Statement tracking for Django database connections.

MutationTracker is installed as a Django execute wrapper. It lets every
statement run unchanged and, after a mutating statement succeeds, sends the
tables_mutated signal with the tables and models it touched.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from sqltags.adapters.ports import SQLCommandsProcessorPort
from sqltags_django.signals import tables_mutated

logger = logging.getLogger(__name__)


class MutationTracker:
    """Django execute wrapper reporting writes through tables_mutated.

    Usage as a scoped wrapper:

        with connection.execute_wrapper(MutationTracker(processor, apps)):
            Order.objects.filter(pk=1).update(paid=True)

    SQLTagsDjangoConfig installs one tracker per connection automatically
    when SQLTAGS.ENABLED is not False.

    Thread safety:
        Holds no per-statement state. The processor's caches are shared
        and thread-safe, so one tracker may serve several connections.
    """

    def __init__(self, processor: SQLCommandsProcessorPort, context: Any) -> None:
        """Initialize the tracker.

        Args:
            processor: Statement analysis facade (usually shared app-wide).
            context: Schema context handed to the processor, normally
                    ``django.apps.apps``.
        """
        self._processor = processor
        self._context = context

    def __call__(
        self,
        execute: Callable[..., Any],
        sql: Any,
        params: Any,
        many: bool,
        context: dict[str, Any],
    ) -> Any:
        """Execute the statement, then report it if it was mutating.

        Args:
            execute: Next callable in Django's execute wrapper chain.
            sql: Statement text.
            params: Statement parameters.
            many: True for executemany().
            context: Django execution context (connection and cursor).

        Returns:
            Whatever execute returns.

        Raises:
            Any database error from execute; no signal is sent in that case.
        """
        result = execute(sql, params, many, context)

        if isinstance(sql, str) and self._processor.is_mutating(sql):
            self._report(sql, context)

        return result

    def _report(self, sql: str, context: dict[str, Any]) -> None:
        connection = context.get("connection")
        alias = getattr(connection, "alias", None)

        tables = self._processor.table_names_for(sql)
        models = self._processor.entity_types_for_tables(
            tables, self._processor.catalog_for(self._context)
        )

        logger.debug(
            f"Mutating statement on {alias!r} touched tables {sorted(tables)}"
        )
        tables_mutated.send(
            sender=self.__class__,
            alias=alias,
            statement=sql,
            tables=tables,
            models=models,
        )


def install_tracker(connection: Any, tracker: Callable[..., Any]) -> bool:
    """Install tracker on a connection for the connection's lifetime.

    Args:
        connection: Django database connection wrapper.
        tracker: Execute wrapper to install.

    Returns:
        True if installed, False if this tracker was already present.
    """
    if tracker in connection.execute_wrappers:
        return False
    connection.execute_wrappers.append(tracker)
    return True
