"""Interface adapters: ports plus logging and metrics implementations."""

from sqltags.adapters.logging_adapter import PythonLoggingAdapter
from sqltags.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from sqltags.adapters.ports import (
    LoggingPort,
    SchemaCatalogPort,
    SQLCommandsProcessorPort,
)

__all__ = [
    "LoggingPort",
    "MetricsPort",
    "NoOpMetricsAdapter",
    "PythonLoggingAdapter",
    "SchemaCatalogPort",
    "SQLCommandsProcessorPort",
]
