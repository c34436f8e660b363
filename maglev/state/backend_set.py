"""Sorted, validated set of backend names."""
import bisect
from typing import Iterable, Iterator, Tuple

from ..errors import DuplicateBackend, InvalidTableSize, NotFound, TableFull, TooManyBackends
from ..hashing.primes import is_prime


class BackendSet:
    """Immutable sorted backend list bound to a lookup table size.

    Mutating operations return a new ``BackendSet`` and never modify the
    receiver, so a rejected change has no side effects.
    """

    __slots__ = ("names", "table_size")

    def __init__(self, names: Iterable[str], table_size: int):
        """Validate and sort backend names.

        Duplicates are not rejected here; only ``add`` checks membership.

        Args:
            names: Backend names in any order
            table_size: Lookup table size

        Raises:
            TooManyBackends: If there are more names than table slots
            InvalidTableSize: If table_size is not prime
        """
        names = tuple(sorted(names))
        if len(names) > table_size:
            raise TooManyBackends(len(names), table_size)
        if not is_prime(table_size):
            raise InvalidTableSize(table_size)

        self.names: Tuple[str, ...] = names
        self.table_size = table_size

    @classmethod
    def _trusted(cls, names: Tuple[str, ...], table_size: int) -> "BackendSet":
        backend_set = cls.__new__(cls)
        backend_set.names = names
        backend_set.table_size = table_size
        return backend_set

    def replace(self, names: Iterable[str]) -> "BackendSet":
        return BackendSet(names, self.table_size)

    def add(self, name: str) -> "BackendSet":
        """Return a new set including ``name``.

        Raises:
            DuplicateBackend: If name is already present
            TableFull: If the set already fills every table slot
        """
        if name in self:
            raise DuplicateBackend(name)
        if len(self.names) >= self.table_size:
            raise TableFull(self.table_size)

        names = list(self.names)
        bisect.insort(names, name)
        return BackendSet._trusted(tuple(names), self.table_size)

    def remove(self, name: str) -> "BackendSet":
        """Return a new set without ``name``.

        Raises:
            NotFound: If name is not present
        """
        index = self.index(name)
        return BackendSet._trusted(self.names[:index] + self.names[index + 1:], self.table_size)

    def index(self, name: str) -> int:
        """Binary search for ``name``.

        Raises:
            NotFound: If name is not present
        """
        index = bisect.bisect_left(self.names, name)
        if index == len(self.names) or self.names[index] != name:
            raise NotFound(name)
        return index

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        index = bisect.bisect_left(self.names, name)
        return index < len(self.names) and self.names[index] == name

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BackendSet):
            return NotImplemented
        return self.names == other.names and self.table_size == other.table_size

    def __hash__(self) -> int:
        return hash((self.names, self.table_size))

    def __repr__(self) -> str:
        return f"BackendSet(size={len(self)}/{self.table_size})"
