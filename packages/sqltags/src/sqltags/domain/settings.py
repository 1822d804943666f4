"""sqltags settings domain entity."""

from dataclasses import dataclass

from sqltags.domain.exceptions import SQLTagsConfigError

DEFAULT_TABLE_MARKERS: tuple[str, ...] = ("FROM", "JOIN", "INTO", "UPDATE")
DEFAULT_CRUD_MARKERS: tuple[str, ...] = ("insert ", "update ", "delete ", "create ")


@dataclass(frozen=True)
class SQLTagsSettings:
    """Statement analysis settings.

    Domain entity with zero external dependencies.

    Attributes:
        enabled: Whether framework adapters should track mutating statements.
                Defaults to True.
        verify_statement_text: Keep the original text next to each statement
                              cache entry and re-check it on every hit, so a
                              content-hash collision is detected instead of
                              silently reusing another statement's tables.
                              Defaults to False.
        table_markers: Keywords whose following token names a table.
                      Compared case-insensitively. Must not contain whitespace.
        crud_markers: Line prefixes that mark a mutating statement.
                     Compared case-insensitively after the line is stripped.
        metrics_enabled: Whether framework adapters should export Prometheus
                        metrics. Defaults to False.
        metrics_prefix: Metric name prefix used by metrics adapters.
    """

    enabled: bool = True
    verify_statement_text: bool = False
    table_markers: tuple[str, ...] = DEFAULT_TABLE_MARKERS
    crud_markers: tuple[str, ...] = DEFAULT_CRUD_MARKERS
    metrics_enabled: bool = False
    metrics_prefix: str = "sqltags"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate_table_markers()
        self._validate_crud_markers()
        self._validate_metrics_prefix()

    def _validate_table_markers(self) -> None:
        """Validate table markers are non-empty single tokens."""
        if not isinstance(self.table_markers, tuple):
            raise SQLTagsConfigError(
                f"table_markers must be a tuple, got: {type(self.table_markers).__name__}"
            )

        if not self.table_markers:
            raise SQLTagsConfigError("table_markers cannot be empty")

        for marker in self.table_markers:
            if not isinstance(marker, str) or not marker:
                raise SQLTagsConfigError(
                    f"table_markers must contain non-empty strings, got: {marker!r}"
                )
            # Markers are compared against whole tokens, which never contain
            # separators
            if any(c.isspace() for c in marker):
                raise SQLTagsConfigError(
                    f"table marker cannot contain whitespace, got: {marker!r}"
                )

    def _validate_crud_markers(self) -> None:
        """Validate CRUD markers are non-blank strings."""
        if not isinstance(self.crud_markers, tuple):
            raise SQLTagsConfigError(
                f"crud_markers must be a tuple, got: {type(self.crud_markers).__name__}"
            )

        if not self.crud_markers:
            raise SQLTagsConfigError("crud_markers cannot be empty")

        for marker in self.crud_markers:
            if not isinstance(marker, str) or not marker.strip():
                raise SQLTagsConfigError(
                    f"crud_markers must contain non-blank strings, got: {marker!r}"
                )

    def _validate_metrics_prefix(self) -> None:
        """Validate metrics_prefix is a usable metric name prefix."""
        if not self.metrics_prefix or not self.metrics_prefix.strip():
            raise SQLTagsConfigError("metrics_prefix cannot be empty or whitespace-only")

        if not self.metrics_prefix.replace("_", "").isalnum():
            raise SQLTagsConfigError(
                f"metrics_prefix may only contain letters, digits and underscores, "
                f"got: {self.metrics_prefix!r}"
            )

        if self.metrics_prefix[0].isdigit():
            raise SQLTagsConfigError(
                f"metrics_prefix cannot start with a digit, got: {self.metrics_prefix!r}"
            )
