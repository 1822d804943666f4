"""Tests for FakeMetricsAdapter."""

import threading

import pytest

from sqltags.adapters.fakes import FakeMetricsAdapter, MetricCall
from sqltags.adapters.metrics_port import MetricsPort


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.FakeMetricsAdapter")
class TestFakeMetricsAdapter:
    """Tests for the recording metrics double."""

    def test_implements_metrics_port(self) -> None:
        assert isinstance(FakeMetricsAdapter(), MetricsPort)

    def test_records_calls_in_order(self) -> None:
        fake = FakeMetricsAdapter()
        fake.record_statement_cache_lookup(hit=False)
        fake.set_statement_cache_size(1)
        fake.record_catalog_cache_lookup(hit=True)

        assert fake.calls == [
            MetricCall("statement_cache_lookup", False),
            MetricCall("statement_cache_size", 1),
            MetricCall("catalog_cache_lookup", True),
        ]

    def test_counters(self) -> None:
        fake = FakeMetricsAdapter()
        fake.record_statement_cache_lookup(hit=True)
        fake.record_statement_cache_lookup(hit=True)
        fake.record_statement_cache_lookup(hit=False)
        fake.record_catalog_cache_lookup(hit=False)

        assert fake.statement_hits == 2
        assert fake.statement_misses == 1
        assert fake.catalog_hits == 0
        assert fake.catalog_misses == 1

    def test_size_gauge_keeps_last_value(self) -> None:
        fake = FakeMetricsAdapter()
        assert fake.current_statement_cache_size is None
        fake.set_statement_cache_size(3)
        fake.set_statement_cache_size(5)
        assert fake.current_statement_cache_size == 5

    def test_size_does_not_count_as_lookup(self) -> None:
        """A gauge value of 1 must not be mistaken for a hit."""
        fake = FakeMetricsAdapter()
        fake.set_statement_cache_size(1)
        assert fake.statement_hits == 0

    def test_calls_returns_copy(self) -> None:
        fake = FakeMetricsAdapter()
        fake.calls.append(MetricCall("bogus", 0))
        assert fake.calls == []

    def test_reset(self) -> None:
        fake = FakeMetricsAdapter()
        fake.record_statement_cache_lookup(hit=True)
        fake.set_statement_cache_size(1)
        fake.reset()
        assert fake.calls == []
        assert fake.current_statement_cache_size is None

    @pytest.mark.concurrency
    def test_concurrent_recording(self) -> None:
        fake = FakeMetricsAdapter()

        def record() -> None:
            for _ in range(100):
                fake.record_statement_cache_lookup(hit=True)

        threads = [threading.Thread(target=record) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert fake.statement_hits == 800
