"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Implementations handle metrics recording to various backends
    (Prometheus, StatsD, etc.). Abstracts the metrics mechanism from
    the caches that emit them.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - record_* methods increment counters
        - set_* methods update gauges to specific values
        - Implementations must be safe to call from several threads
        - Implementations may no-op if metrics are disabled
    """

    def record_statement_cache_lookup(self, hit: bool) -> None:
        """Record one statement cache lookup.

        Args:
            hit: True if the table-name set was already published,
                False if this lookup tokenized the statement.
        """
        ...

    def record_catalog_cache_lookup(self, hit: bool) -> None:
        """Record one schema catalog cache lookup.

        Args:
            hit: True if the catalog was already published,
                False if this lookup enumerated the schema context.
        """
        ...

    def set_statement_cache_size(self, size: int) -> None:
        """Set the statement cache entry count gauge.

        Args:
            size: Number of distinct statement keys cached.
        """
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    All methods are no-ops. This allows use cases to unconditionally
    call metrics methods without checking if metrics are enabled.

    Example:
        >>> adapter = NoOpMetricsAdapter()
        >>> adapter.record_statement_cache_lookup(hit=True)  # Does nothing
    """

    def record_statement_cache_lookup(self, hit: bool) -> None:
        """No-op."""
        pass

    def record_catalog_cache_lookup(self, hit: bool) -> None:
        """No-op."""
        pass

    def set_statement_cache_size(self, size: int) -> None:
        """No-op."""
        pass
