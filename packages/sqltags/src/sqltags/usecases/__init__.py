"""Use cases: Application logic layer."""

from sqltags.usecases.entity_resolver import EntityResolver
from sqltags.usecases.once_cache import CacheLookup, OnceCache
from sqltags.usecases.schema_catalog_cache import SchemaCatalogCache
from sqltags.usecases.sql_commands_processor import SQLCommandsProcessor
from sqltags.usecases.statement_cache import StatementTableNameCache, statement_key
from sqltags.usecases.statement_classifier import StatementClassifier
from sqltags.usecases.table_name_extractor import TableNameExtractor

__all__ = [
    "CacheLookup",
    "EntityResolver",
    "OnceCache",
    "SchemaCatalogCache",
    "SQLCommandsProcessor",
    "StatementClassifier",
    "StatementTableNameCache",
    "TableNameExtractor",
    "statement_key",
]
