"""Statement classification use case for identifying mutating statements."""

from __future__ import annotations

from sqltags.domain.settings import DEFAULT_CRUD_MARKERS


class StatementClassifier:
    """Detects statements that insert, update, delete or create.

    A statement is mutating when any of its lines, once stripped, starts
    with one of the CRUD markers (case-insensitive). Every line is checked,
    so leading comments or blank lines before the verb are tolerated.
    Words appearing mid-line never count.

    Stateless and safe for concurrent use.
    """

    def __init__(self, crud_markers: tuple[str, ...] = DEFAULT_CRUD_MARKERS) -> None:
        """Initialize the classifier.

        Args:
            crud_markers: Line prefixes that mark a mutating statement,
                         including their trailing space (e.g., "insert ").
        """
        self._markers = tuple(marker.casefold() for marker in crud_markers)

    @property
    def crud_markers(self) -> tuple[str, ...]:
        """Return the normalized CRUD markers."""
        return self._markers

    def is_mutating(self, text: str | None) -> bool:
        """Check if a statement is a mutating (CRUD) statement.

        Args:
            text: Statement text. May be empty, blank, or not SQL at all.

        Returns:
            True on the first line that starts with a CRUD marker,
            False otherwise.
        """
        if not text or text.isspace():
            return False

        for line in text.split("\n"):
            if line.strip().casefold().startswith(self._markers):
                return True

        return False
