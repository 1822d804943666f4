"""Table name extraction use case.

Finds the tables a statement touches by looking at the token that follows
FROM, JOIN, INTO and UPDATE. Subqueries, CTEs and dialect features are
not understood; anything that follows a marker is taken as a name.
"""

from __future__ import annotations

import re

from sqltags.domain.settings import DEFAULT_TABLE_MARKERS

# Pre-compiled token separators: spaces and line breaks only ("\r\n" first so
# it is consumed as one separator)
_TOKEN_SEPARATOR_RE = re.compile(r"\r\n|\n| ")

# Identifier decoration used by SQL Server, MySQL, SQLite and PostgreSQL
_DECORATION_TABLE = str.maketrans("", "", "[]'`\"")


class TableNameExtractor:
    """Extracts referenced table names from statement text.

    Handles:
    - Schema-qualified names (dbo.Users -> Users)
    - Bracketed, quoted and backticked identifiers ([Users], "Users", `Users`)
    - Markers on any line, repeated markers, markers in any letter case

    Stateless and safe for concurrent use.
    """

    def __init__(
        self, table_markers: tuple[str, ...] = DEFAULT_TABLE_MARKERS
    ) -> None:
        """Initialize the extractor.

        Args:
            table_markers: Keywords whose following token is a table name.
        """
        self._markers = frozenset(marker.upper() for marker in table_markers)

    @property
    def table_markers(self) -> frozenset[str]:
        """Return the normalized table markers."""
        return self._markers

    def tokenize(self, text: str | None) -> list[str]:
        """Split statement text into non-empty tokens.

        Args:
            text: Statement text.

        Returns:
            Tokens separated by spaces and line breaks, in text order.
        """
        if not text:
            return []
        return [token for token in _TOKEN_SEPARATOR_RE.split(text) if token]

    def clean_table_name(self, candidate: str) -> str | None:
        """Turn the token following a marker into a bare table name.

        Args:
            candidate: Possibly qualified, possibly quoted name token.

        Returns:
            The table name, or None if the token is blank once qualification
            is removed. Decoration is stripped afterwards, so a quoted empty
            identifier yields "".
        """
        parts = [part for part in candidate.split(".") if part]
        if not parts:
            return None

        # schema.table takes the second part; longer names are not resolved
        # any further
        table_name = (parts[0] if len(parts) == 1 else parts[1]).strip()
        if not table_name:
            return None

        return table_name.translate(_DECORATION_TABLE)

    def extract_table_names(self, text: str | None) -> frozenset[str]:
        """Extract the set of table names referenced by a statement.

        Args:
            text: Statement text. Malformed or non-SQL text is accepted.

        Returns:
            Deduplicated, case-sensitive table names. Use sorted() for a
            deterministic order.
        """
        tokens = self.tokenize(text)
        tables: set[str] = set()

        index = 0
        count = len(tokens)
        while index < count:
            if tokens[index].upper() in self._markers:
                # The next token is consumed as a name, never as a marker
                index += 1
                if index < count:
                    table_name = self.clean_table_name(tokens[index])
                    if table_name is not None:
                        tables.add(table_name)
            index += 1

        return frozenset(tables)
