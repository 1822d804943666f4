"""Thread-safe compute-once cache.

Both statement and schema catalog caches are append-only maps whose values
are expensive to compute and never change once published. OnceCache gives
each key a one-shot cell: concurrent first-time callers for the same key
block on the single in-flight computation instead of repeating it, and all
of them observe the same published object.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class CacheLookup(Generic[V]):
    """Result of a OnceCache lookup.

    Attributes:
        value: The published value for the key.
        computed: True if this lookup ran the factory, False if the value
                 had already been published (or was published by another
                 thread while this one waited).
    """

    value: V
    computed: bool


class _OnceCell(Generic[V]):
    """Lazily initialized, publish-once value holder."""

    __slots__ = ("_lock", "_ready", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ready = False
        self._value: V | None = None

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def value(self) -> V | None:
        return self._value

    def get(self, factory: Callable[[], V]) -> CacheLookup[V]:
        if self._ready:
            return CacheLookup(self._value, computed=False)  # type: ignore[arg-type]

        with self._lock:
            if self._ready:
                return CacheLookup(self._value, computed=False)  # type: ignore[arg-type]

            # A raising factory leaves the cell empty; the next caller
            # computes again
            value = factory()
            self._value = value
            # Published last so lock-free readers never see a partial value
            self._ready = True
            return CacheLookup(value, computed=True)


class OnceCache(Generic[K, V]):
    """Append-only map with at-most-once computation per key.

    No entry is ever evicted or replaced. Growth is bounded only by the
    number of distinct keys the owner sees.

    Thread safety:
        Inserting a new cell is guarded by a map-wide lock. Computing a value
        is guarded by the cell's own lock, so slow computations for different
        keys run in parallel. Reading a published value takes no lock. The
        published count is bumped after each computation, so len() never
        scans the map.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cells: dict[K, _OnceCell[V]] = {}
        self._published = 0

    def get_or_compute(self, key: K, factory: Callable[[], V]) -> CacheLookup[V]:
        """Return the value for key, computing it with factory on first use.

        Args:
            key: Cache key.
            factory: Zero-argument callable producing the value. Called at
                    most once per key unless it raises.

        Returns:
            CacheLookup with the published value.

        Raises:
            Any exception raised by factory, unchanged.
        """
        cell = self._cells.get(key)
        if cell is None:
            with self._lock:
                cell = self._cells.setdefault(key, _OnceCell())
        lookup = cell.get(factory)
        if lookup.computed:
            with self._lock:
                self._published += 1
        return lookup

    def get(self, key: K) -> V | None:
        """Return the published value for key without computing it."""
        cell = self._cells.get(key)
        if cell is None or not cell.ready:
            return None
        return cell.value

    def __contains__(self, key: object) -> bool:
        cell = self._cells.get(key)  # type: ignore[arg-type]
        return cell is not None and cell.ready

    def __len__(self) -> int:
        """Return the number of published entries."""
        return self._published

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            items = list(self._cells.items())
        return iter([key for key, cell in items if cell.ready])
