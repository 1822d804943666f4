"""sqltags: Framework-agnostic table and entity tagging for SQL statements."""

__version__ = "0.1.0"

from sqltags.domain.exceptions import SQLTagsConfigError
from sqltags.domain.settings import SQLTagsSettings
from sqltags.domain.table_entity import TableEntityRef
from sqltags.usecases.sql_commands_processor import SQLCommandsProcessor

__all__ = [
    "SQLTagsConfigError",
    "SQLTagsSettings",
    "TableEntityRef",
    "SQLCommandsProcessor",
]
