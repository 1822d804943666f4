"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Value that was recorded or set.
    """

    metric_name: str
    value: int | bool


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Records all metric updates for later assertion. Safe to share between
    threads, since the caches report lookups from every caller.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_statement_cache_lookup(hit=False)
        >>> fake.statement_misses
        1
        >>> fake.calls
        [MetricCall(metric_name='statement_cache_lookup', value=False)]
    """

    def __init__(self) -> None:
        """Initialize with no recorded state."""
        self._lock = threading.Lock()
        self._calls: list[MetricCall] = []
        self._statement_cache_size: int | None = None

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls, in order of invocation."""
        with self._lock:
            return list(self._calls)

    @property
    def statement_hits(self) -> int:
        return self._count("statement_cache_lookup", True)

    @property
    def statement_misses(self) -> int:
        return self._count("statement_cache_lookup", False)

    @property
    def catalog_hits(self) -> int:
        return self._count("catalog_cache_lookup", True)

    @property
    def catalog_misses(self) -> int:
        return self._count("catalog_cache_lookup", False)

    @property
    def current_statement_cache_size(self) -> int | None:
        """Return last set statement cache size, or None if never set."""
        return self._statement_cache_size

    def record_statement_cache_lookup(self, hit: bool) -> None:
        self._record(MetricCall("statement_cache_lookup", hit))

    def record_catalog_cache_lookup(self, hit: bool) -> None:
        self._record(MetricCall("catalog_cache_lookup", hit))

    def set_statement_cache_size(self, size: int) -> None:
        with self._lock:
            self._statement_cache_size = size
            self._calls.append(MetricCall("statement_cache_size", size))

    def reset(self) -> None:
        """Reset all state and calls."""
        with self._lock:
            self._statement_cache_size = None
            self._calls.clear()

    def _record(self, call: MetricCall) -> None:
        with self._lock:
            self._calls.append(call)

    def _count(self, metric_name: str, value: bool) -> int:
        with self._lock:
            return sum(
                1
                for call in self._calls
                if call.metric_name == metric_name and call.value is value
            )
