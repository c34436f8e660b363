"""Immutable table generation published by every mutation."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..errors import EmptyTable
from ..hashing.keyed_hash import KeyedHasher
from ..hashing.permutation import generate_permutations
from ..hashing.populate import populate
from .backend_set import BackendSet


@dataclass(frozen=True)
class TableSnapshot:
    """One consistent generation of the table.

    ``permutation`` and ``lookup`` are always derived from ``backends`` with
    ``hasher``, which also hashes lookups; none is replaced independently.
    """

    backends: BackendSet
    permutation: Tuple[Tuple[int, ...], ...]
    lookup: Tuple[int, ...]
    hasher: KeyedHasher = field(compare=False, repr=False)

    @classmethod
    def build(cls, backends: BackendSet, hasher: KeyedHasher) -> "TableSnapshot":
        """Generate permutations and populate the lookup table.

        Args:
            backends: Validated backend set
            hasher: Keyed hash pair

        Returns:
            Fully populated snapshot (empty lookup if there are no backends)
        """
        rows = generate_permutations(backends.names, backends.table_size, hasher)
        lookup = populate(rows, backends.table_size)
        return cls(
            backends=backends,
            permutation=tuple(tuple(row) for row in rows),
            lookup=tuple(lookup),
            hasher=hasher,
        )

    @property
    def names(self) -> Tuple[str, ...]:
        return self.backends.names

    @property
    def table_size(self) -> int:
        return self.backends.table_size

    def get(self, key: str) -> str:
        """Map a client key to its backend.

        Raises:
            EmptyTable: If no backends are configured
        """
        if not self.lookup:
            raise EmptyTable()
        return self.names[self.lookup[self.hasher.offset_hash(key) % self.table_size]]

    def distribution(self) -> Dict[str, int]:
        """Return slot count per backend, in sorted backend order."""
        counts = Counter(self.lookup)
        result: Dict[str, int] = {}
        for i, name in enumerate(self.names):
            # duplicate names each own a row
            result[name] = result.get(name, 0) + counts[i]
        return result

    def __len__(self) -> int:
        return len(self.backends)
