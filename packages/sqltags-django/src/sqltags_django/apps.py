"""Django app configuration for sqltags."""

import logging
from typing import Any, Callable

from django.apps import AppConfig, apps as django_apps
from django.conf import settings as django_settings
from django.db.backends.signals import connection_created

from sqltags.adapters.logging_adapter import PythonLoggingAdapter
from sqltags.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from sqltags.adapters.ports import SchemaCatalogPort
from sqltags.domain.exceptions import SQLTagsConfigError
from sqltags.domain.settings import SQLTagsSettings
from sqltags.usecases.sql_commands_processor import SQLCommandsProcessor
from sqltags_django.adapters import DjangoSchemaCatalogAdapter
from sqltags_django.settings import get_sqltags_settings
from sqltags_django.tracking import MutationTracker, install_tracker

logger = logging.getLogger(__name__)


def _default_schema_catalog_factory() -> SchemaCatalogPort:
    """Default factory for creating the schema catalog adapter."""
    return DjangoSchemaCatalogAdapter()


def _default_metrics_factory(settings: SQLTagsSettings) -> MetricsPort:
    """Default factory for creating the metrics adapter.

    Returns a Prometheus adapter when METRICS_ENABLED is set, a no-op adapter
    otherwise.

    Raises:
        ImportError: If metrics are enabled but prometheus-client is missing.
    """
    if not settings.metrics_enabled:
        return NoOpMetricsAdapter()

    from sqltags.adapters.prometheus_metrics import PrometheusMetricsAdapter

    return PrometheusMetricsAdapter(prefix=settings.metrics_prefix)


class SQLTagsDjangoConfig(AppConfig):
    """Django app configuration for the sqltags adapter.

    Owns the app-wide SQLCommandsProcessor, so its caches live exactly as
    long as the Django process.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "sqltags_django"
    verbose_name = "sqltags Django Adapter"

    # Dependency injection factories (can be overridden for testing)
    schema_catalog_factory: Callable[[], SchemaCatalogPort] = staticmethod(
        _default_schema_catalog_factory
    )
    metrics_factory: Callable[[SQLTagsSettings], MetricsPort] = staticmethod(
        _default_metrics_factory
    )

    processor: SQLCommandsProcessor | None = None
    tracker: MutationTracker | None = None

    def ready(self) -> None:
        """Build the processor and install statement tracking."""
        sqltags_config = getattr(django_settings, "SQLTAGS", None)

        try:
            # Convert Django settings to domain object (validates settings)
            sqltags_settings = get_sqltags_settings(sqltags_config)
        except SQLTagsConfigError as e:
            logger.error(f"Invalid SQLTAGS settings: {e}. Statement tracking disabled.")
            return

        try:
            metrics = self.metrics_factory(sqltags_settings)
        except ImportError as e:
            logger.error(
                f"sqltags metrics unavailable: {e}. "
                f"Install sqltags[metrics] to enable them. Metrics disabled."
            )
            metrics = NoOpMetricsAdapter()

        self.processor = SQLCommandsProcessor(
            self.schema_catalog_factory(),
            settings=sqltags_settings,
            metrics=metrics,
            logger=PythonLoggingAdapter(logging.getLogger("sqltags")),
        )

        if not sqltags_settings.enabled:
            logger.info("sqltags statement tracking is disabled in settings.")
            return

        self.tracker = MutationTracker(self.processor, django_apps)
        connection_created.connect(
            self._on_connection_created,
            weak=False,
            dispatch_uid="sqltags_django.install_tracker",
        )
        logger.info("sqltags statement tracking enabled.")

    def _on_connection_created(self, sender: Any, connection: Any, **kwargs: Any) -> None:
        """Install the tracker on each new database connection."""
        if self.tracker is not None:
            install_tracker(connection, self.tracker)
