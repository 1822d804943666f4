"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without a real ORM or metrics backend.
"""

from sqltags.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall
from sqltags.adapters.fakes.fake_schema_catalog import FakeSchemaCatalog

__all__ = [
    "FakeMetricsAdapter",
    "FakeSchemaCatalog",
    "MetricCall",
]
