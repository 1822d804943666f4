"""Schema catalog cache use case."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqltags.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from sqltags.usecases.once_cache import OnceCache

if TYPE_CHECKING:
    from sqltags.adapters.ports import LoggingPort, SchemaCatalogPort
    from sqltags.domain.table_entity import SchemaCatalog


class SchemaCatalogCache:
    """Memoizes the entity/table catalog per schema context type.

    Entity-to-table mappings of a context type do not change during the
    process lifetime, so the catalog is enumerated once per type and the
    same tuple is returned to every later caller, whichever instance of
    that type they pass.

    Dependencies:
        - SchemaCatalogPort: Enumerates the bindings of a context

    Thread safety:
        Safe for concurrent use; at most one enumeration per context type.
        An enumeration that raises publishes nothing and the error reaches
        the caller unchanged.
    """

    def __init__(
        self,
        port: SchemaCatalogPort,
        metrics: MetricsPort | None = None,
        logger: LoggingPort | None = None,
    ) -> None:
        """Initialize the catalog cache.

        Args:
            port: Implementation of SchemaCatalogPort for schema enumeration.
            metrics: Optional port for cache hit/miss metrics.
            logger: Optional port for debug output on enumeration.
        """
        self.port = port
        self._metrics = metrics or NoOpMetricsAdapter()
        self._logger = logger
        self._catalogs: OnceCache[type, SchemaCatalog] = OnceCache()

    def __len__(self) -> int:
        """Return the number of cached context types."""
        return len(self._catalogs)

    def catalog_for(self, context: Any) -> SchemaCatalog:
        """Return the catalog of a schema context.

        Args:
            context: Schema context handle. Keyed by type(context).

        Returns:
            Ordered tuple of TableEntityRef, one per entity type.

        Raises:
            May propagate exceptions from port if the schema cannot be read.
        """
        context_type = type(context)
        lookup = self._catalogs.get_or_compute(
            context_type, lambda: self._enumerate(context)
        )
        self._metrics.record_catalog_cache_lookup(hit=not lookup.computed)
        return lookup.value

    def _enumerate(self, context: Any) -> SchemaCatalog:
        catalog = tuple(self.port.list_table_bindings(context))
        if self._logger is not None:
            self._logger.debug(
                f"Cached {len(catalog)} entity bindings for "
                f"{type(context).__qualname__}"
            )
        return catalog
