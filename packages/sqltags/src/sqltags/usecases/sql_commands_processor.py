"""SQL commands processor: the statement analysis facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from sqltags.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from sqltags.domain.settings import SQLTagsSettings
from sqltags.usecases.entity_resolver import EntityResolver
from sqltags.usecases.schema_catalog_cache import SchemaCatalogCache
from sqltags.usecases.statement_cache import StatementTableNameCache
from sqltags.usecases.statement_classifier import StatementClassifier
from sqltags.usecases.table_name_extractor import TableNameExtractor

if TYPE_CHECKING:
    from sqltags.adapters.ports import LoggingPort, SchemaCatalogPort
    from sqltags.domain.table_entity import SchemaCatalog, TableEntityRef


class SQLCommandsProcessor:
    """Classifies statements and maps them to affected entity types.

    Owns one statement cache and one schema catalog cache for its whole
    lifetime. Create one long-lived instance per process (or per framework
    app) and share it between threads; create a fresh one per test.

    Implements SQLCommandsProcessorPort.

    Example:
        >>> processor = SQLCommandsProcessor(DjangoSchemaCatalogAdapter())
        >>> processor.is_mutating("UPDATE shop_order SET paid = 1")
        True
        >>> processor.affected_entity_types_for(
        ...     "SELECT * FROM shop_order", django_apps
        ... )
        [<class 'shop.models.Order'>]
    """

    def __init__(
        self,
        schema_catalog: SchemaCatalogPort,
        settings: SQLTagsSettings | None = None,
        metrics: MetricsPort | None = None,
        logger: LoggingPort | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            schema_catalog: Implementation of SchemaCatalogPort for the ORM in use.
            settings: Marker and cache settings. Defaults to SQLTagsSettings().
            metrics: Optional port for cache metrics. Defaults to no-op.
            logger: Optional port for cache diagnostics.
        """
        self._settings = settings or SQLTagsSettings()
        metrics = metrics or NoOpMetricsAdapter()

        self._classifier = StatementClassifier(self._settings.crud_markers)
        self._extractor = TableNameExtractor(self._settings.table_markers)
        self._statement_cache = StatementTableNameCache(
            self._extractor,
            verify_statement_text=self._settings.verify_statement_text,
            metrics=metrics,
            logger=logger,
        )
        self._catalog_cache = SchemaCatalogCache(
            schema_catalog, metrics=metrics, logger=logger
        )
        self._resolver = EntityResolver(self._statement_cache)

    @property
    def settings(self) -> SQLTagsSettings:
        return self._settings

    @property
    def statement_cache(self) -> StatementTableNameCache:
        return self._statement_cache

    @property
    def catalog_cache(self) -> SchemaCatalogCache:
        return self._catalog_cache

    def is_mutating(self, text: str | None) -> bool:
        """Return True if the statement inserts, updates, deletes or creates."""
        return self._classifier.is_mutating(text)

    def extract_table_names(self, text: str | None) -> frozenset[str]:
        """Extract table names without consulting the statement cache."""
        return self._extractor.extract_table_names(text)

    def table_names_for(self, text: str | None) -> frozenset[str]:
        """Return the table names referenced by a statement, memoized."""
        return self._statement_cache.table_names_for(text)

    def catalog_for(self, context: Any) -> SchemaCatalog:
        """Return the entity/table catalog of a schema context, memoized per type."""
        return self._catalog_cache.catalog_for(context)

    def affected_entity_types(
        self, text: str | None, catalog: Iterable[TableEntityRef]
    ) -> list[Any]:
        """Return entity types from catalog whose table the statement references."""
        return self._resolver.affected_entity_types(text, catalog)

    def entity_types_for_tables(
        self, table_names: frozenset[str], catalog: Iterable[TableEntityRef]
    ) -> list[Any]:
        """Return entity types from catalog owning one of table_names.

        Lets a caller that already holds a statement's table names resolve
        them without a second statement cache lookup.
        """
        return self._resolver.entity_types_for_tables(table_names, catalog)

    def affected_entity_types_for(self, text: str | None, context: Any) -> list[Any]:
        """Return entity types of a schema context affected by a statement.

        Args:
            text: Statement text.
            context: Schema context handle passed to the SchemaCatalogPort.

        Returns:
            Entity types in catalog order.

        Raises:
            May propagate exceptions from the SchemaCatalogPort.
        """
        return self.affected_entity_types(text, self.catalog_for(context))
