"""Fake adapters for testing."""

from .counting_extractor import CountingExtractor
from .fake_logging_adapter import FakeLoggingAdapter
from .unscannable_dict import UnscannableDict

__all__ = [
    "CountingExtractor",
    "FakeLoggingAdapter",
    "UnscannableDict",
]
