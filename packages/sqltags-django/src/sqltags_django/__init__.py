"""Django adapter for sqltags statement tagging."""

from sqltags_django.adapters import DjangoSchemaCatalogAdapter
from sqltags_django.settings import get_sqltags_settings
from sqltags_django.signals import tables_mutated
from sqltags_django.tracking import MutationTracker

__version__ = "0.1.0"

__all__ = [
    "DjangoSchemaCatalogAdapter",
    "MutationTracker",
    "get_sqltags_settings",
    "tables_mutated",
]
