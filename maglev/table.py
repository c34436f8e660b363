"""Maglev consistent-hashing lookup table."""
import threading
import time
from typing import Callable, Dict, Iterable, Optional, Tuple

import structlog

from .config import DEFAULT_TABLE_SIZE, MaglevConfig
from .errors import EmptyTable, MaglevError
from .hashing.keyed_hash import KeyedHasher
from .metrics.prometheus import MaglevMetrics
from .state.backend_set import BackendSet
from .state.rwlock import ReadWriteLock
from .state.snapshot import TableSnapshot

logger = structlog.get_logger()


class MaglevTable:
    """Maps client keys to backends with O(1) lookups.

    Every mutation builds a complete new ``TableSnapshot`` and publishes it
    with a single reference swap under the exclusive side of a reader/writer
    lock. Lookups take the shared side only long enough to read the current
    snapshot reference, so they always see one consistent generation.
    """

    def __init__(
        self,
        backends: Iterable[str],
        table_size: int = DEFAULT_TABLE_SIZE,
        hasher: Optional[KeyedHasher] = None,
        metrics: Optional[MaglevMetrics] = None
    ):
        """Build the initial table.

        Args:
            backends: Backend names in any order
            table_size: Prime lookup table size
            hasher: Keyed hash pair (default: KeyedHasher())
            metrics: Optional Prometheus metrics collector

        Raises:
            TooManyBackends: If there are more backends than table slots
            InvalidTableSize: If table_size is not prime
        """
        self._hasher = hasher if hasher is not None else KeyedHasher()
        self.metrics = metrics

        self._lock = ReadWriteLock()
        # Serializes rebuilds; readers only contend on _lock during the swap
        self._mutation_lock = threading.Lock()

        self._snapshot = self._build("create", BackendSet(backends, table_size))

        logger.info(
            "maglev_table_initialized",
            backends=len(self._snapshot),
            table_size=table_size
        )

    @classmethod
    def from_config(
        cls,
        config: MaglevConfig,
        hasher: Optional[KeyedHasher] = None,
        metrics: Optional[MaglevMetrics] = None
    ) -> "MaglevTable":
        """Create a table from configuration.

        Args:
            config: Table configuration (validated here)
            hasher: Overrides the hasher built from the configured keys
            metrics: Overrides the collector created when metrics are enabled

        Returns:
            New table populated with ``config.backends``
        """
        config.validate()

        if hasher is None:
            hasher = KeyedHasher(config.offset_key, config.skip_key)
        if metrics is None and config.enable_metrics:
            metrics = MaglevMetrics()

        return cls(config.backends, config.table_size, hasher=hasher, metrics=metrics)

    def _build(self, operation: str, backends: BackendSet) -> TableSnapshot:
        start = time.perf_counter()
        snapshot = TableSnapshot.build(backends, self._hasher)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "table_rebuilt",
            operation=operation,
            backends=len(backends),
            table_size=backends.table_size,
            duration_ms=round(duration_ms, 3)
        )

        if self.metrics is not None:
            self.metrics.record_rebuild(operation, len(backends), backends.table_size, duration_ms)

        return snapshot

    def _mutate(self, operation: str, change: Callable[[BackendSet], BackendSet]) -> None:
        with self._mutation_lock:
            try:
                backends = change(self._snapshot.backends)
            except MaglevError as e:
                logger.warning("mutation_rejected", operation=operation, error=str(e))
                if self.metrics is not None:
                    self.metrics.record_rejected(operation, e)
                raise

            snapshot = self._build(operation, backends)

            with self._lock.write_locked():
                self._snapshot = snapshot

    def set(self, backends: Iterable[str]) -> None:
        """Replace the whole backend set.

        Raises:
            TooManyBackends: If there are more backends than table slots
        """
        backends = list(backends)
        self._mutate("set", lambda current: current.replace(backends))

    def add(self, backend: str) -> None:
        """Add one backend.

        Raises:
            DuplicateBackend: If backend is already present
            TableFull: If every table slot already has its own backend
        """
        self._mutate("add", lambda current: current.add(backend))

    def remove(self, backend: str) -> None:
        """Remove one backend.

        Raises:
            NotFound: If backend is not present
        """
        self._mutate("remove", lambda current: current.remove(backend))

    def clear(self) -> None:
        """Drop every backend, permutation row and lookup entry."""
        self._mutate("clear", lambda current: current.replace(()))

    def get(self, key: str) -> str:
        """Return the backend responsible for ``key``.

        Raises:
            EmptyTable: If no backends are configured
        """
        try:
            backend = self.snapshot().get(key)
        except EmptyTable:
            if self.metrics is not None:
                self.metrics.record_lookup(hit=False)
            raise

        if self.metrics is not None:
            self.metrics.record_lookup(hit=True)
        return backend

    def snapshot(self) -> TableSnapshot:
        """Return the current immutable table generation."""
        with self._lock.read_locked():
            return self._snapshot

    @property
    def hasher(self) -> KeyedHasher:
        return self._hasher

    @property
    def backends(self) -> Tuple[str, ...]:
        return self.snapshot().names

    @property
    def table_size(self) -> int:
        return self.snapshot().table_size

    @property
    def lookup(self) -> Tuple[int, ...]:
        return self.snapshot().lookup

    @property
    def permutation(self) -> Tuple[Tuple[int, ...], ...]:
        return self.snapshot().permutation

    def distribution(self) -> Dict[str, int]:
        """Return the number of lookup slots owned by each backend."""
        return self.snapshot().distribution()

    def __contains__(self, backend: object) -> bool:
        return backend in self.snapshot().backends

    def __len__(self) -> int:
        return len(self.snapshot())

    def __repr__(self) -> str:
        snapshot = self.snapshot()
        return f"MaglevTable(backends={len(snapshot)}, table_size={snapshot.table_size})"
