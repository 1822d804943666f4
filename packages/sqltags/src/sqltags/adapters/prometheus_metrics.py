"""Prometheus metrics adapter for sqltags.

Implements MetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter, Gauge


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    Creates and manages Prometheus counters and gauges for cache activity.
    All metrics use a configurable prefix (default 'sqltags') for namespace clarity.

    This adapter requires prometheus-client to be installed:
        pip install sqltags[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(prefix="myapp_sqltags")
        >>> adapter.record_statement_cache_lookup(hit=True)
        >>> adapter.set_statement_cache_size(42)

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "sqltags",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus collectors.

        Args:
            prefix: Metric name prefix. Defaults to "sqltags".
                   All metric names will be {prefix}_<metric_name>.
            registry: Registry to register collectors with. Defaults to the
                     global prometheus_client registry.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Counter, Gauge

        if registry is None:
            registry = REGISTRY

        self._statement_lookups: Counter = Counter(
            f"{prefix}_statement_cache_lookups",
            "Statement table-name cache lookups by result",
            ["result"],
            registry=registry,
        )
        self._catalog_lookups: Counter = Counter(
            f"{prefix}_catalog_cache_lookups",
            "Schema catalog cache lookups by result",
            ["result"],
            registry=registry,
        )
        self._statement_cache_size: Gauge = Gauge(
            f"{prefix}_statement_cache_entries",
            "Number of distinct statements in the table-name cache",
            registry=registry,
        )

    def record_statement_cache_lookup(self, hit: bool) -> None:
        """Increment the statement lookup counter.

        Args:
            hit: True counts under result="hit", False under result="miss".
        """
        self._statement_lookups.labels(result="hit" if hit else "miss").inc()

    def record_catalog_cache_lookup(self, hit: bool) -> None:
        """Increment the catalog lookup counter.

        Args:
            hit: True counts under result="hit", False under result="miss".
        """
        self._catalog_lookups.labels(result="hit" if hit else "miss").inc()

    def set_statement_cache_size(self, size: int) -> None:
        """Set the statement cache entries gauge."""
        self._statement_cache_size.set(size)
