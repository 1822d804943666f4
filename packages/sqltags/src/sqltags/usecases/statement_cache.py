"""Statement table-name cache use case."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from sqltags.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from sqltags.usecases.once_cache import OnceCache
from sqltags.usecases.table_name_extractor import TableNameExtractor

if TYPE_CHECKING:
    from sqltags.adapters.ports import LoggingPort

# 8-byte digest, rendered as 16 hex characters
STATEMENT_KEY_DIGEST_SIZE = 8


def statement_key(text: str | None) -> str:
    """Compute the cache key of a statement text.

    A fixed-width hex digest of the full text bounds key storage and
    comparison cost for long statements. Different texts may collide;
    see StatementTableNameCache for how collisions are treated.

    Args:
        text: Statement text. None is keyed like the empty string.

    Returns:
        Lowercase hex digest, 16 characters.
    """
    data = (text or "").encode("utf-8", "surrogatepass")
    return hashlib.blake2b(data, digest_size=STATEMENT_KEY_DIGEST_SIZE).hexdigest()


class StatementTableNameCache:
    """Memoizes table-name extraction per statement text.

    Decorates a TableNameExtractor: the first lookup of a statement text
    tokenizes it once and publishes the result; later lookups of the same
    text return the published frozenset.

    Entries are keyed by a content hash, not by the text itself. By default
    a hash collision reuses the first statement's table names. With
    verify_statement_text=True the original text is kept next to each
    entry; a hit whose text differs is logged and answered by tokenizing
    directly, without touching the published entry.

    Thread safety:
        Safe for concurrent use; at most one tokenization per key.
    """

    def __init__(
        self,
        extractor: TableNameExtractor | None = None,
        verify_statement_text: bool = False,
        metrics: MetricsPort | None = None,
        logger: LoggingPort | None = None,
    ) -> None:
        """Initialize the statement cache.

        Args:
            extractor: Tokenizer to memoize. Defaults to TableNameExtractor().
            verify_statement_text: Detect content-hash collisions by comparing
                                  the cached text on every hit.
            metrics: Optional port for cache hit/miss metrics.
            logger: Optional port for collision warnings.
        """
        self._extractor = extractor or TableNameExtractor()
        self._verify_statement_text = verify_statement_text
        self._metrics = metrics or NoOpMetricsAdapter()
        self._logger = logger
        self._entries: OnceCache[str, tuple[str | None, frozenset[str]]] = OnceCache()

    @property
    def verify_statement_text(self) -> bool:
        return self._verify_statement_text

    def __len__(self) -> int:
        """Return the number of cached statements."""
        return len(self._entries)

    def table_names_for(self, text: str | None) -> frozenset[str]:
        """Return the table names referenced by a statement, memoized.

        Args:
            text: Statement text.

        Returns:
            The published table-name set for this statement text.
        """
        key = statement_key(text)
        source = (text or "") if self._verify_statement_text else None

        lookup = self._entries.get_or_compute(
            key, lambda: (source, self._extractor.extract_table_names(text))
        )
        self._metrics.record_statement_cache_lookup(hit=not lookup.computed)
        if lookup.computed:
            self._metrics.set_statement_cache_size(len(self._entries))

        cached_text, table_names = lookup.value
        if self._verify_statement_text and cached_text != source:
            if self._logger is not None:
                self._logger.warning(
                    f"Statement cache key {key} collides with a different "
                    f"statement; extracting table names without caching."
                )
            return self._extractor.extract_table_names(text)

        return table_names
