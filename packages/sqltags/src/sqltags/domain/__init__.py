"""Domain layer: Entities with zero external dependencies."""

from sqltags.domain.exceptions import SQLTagsConfigError
from sqltags.domain.settings import SQLTagsSettings
from sqltags.domain.table_entity import SchemaCatalog, TableEntityRef

__all__ = [
    "SQLTagsConfigError",
    "SQLTagsSettings",
    "SchemaCatalog",
    "TableEntityRef",
]
