"""Per-backend slot permutations for Maglev table population."""
from typing import List, Sequence

from .keyed_hash import KeyedHasher


def permutation_row(name: str, table_size: int, hasher: KeyedHasher) -> List[int]:
    """Compute the slot preference list for one backend.

    Stepping by a nonzero ``skip`` modulo a prime ``table_size`` visits
    every slot exactly once, so the row is a full permutation of
    ``range(table_size)``.

    Args:
        name: Backend name
        table_size: Prime lookup table size
        hasher: Keyed hash pair

    Returns:
        List of ``table_size`` slot indices
    """
    offset = hasher.offset_hash(name) % table_size
    if table_size == 1:
        return [offset]

    skip = hasher.skip_hash(name) % (table_size - 1) + 1
    return [(offset + j * skip) % table_size for j in range(table_size)]


def generate_permutations(
    names: Sequence[str],
    table_size: int,
    hasher: KeyedHasher
) -> List[List[int]]:
    """Compute permutation rows for a sorted backend list.

    Args:
        names: Sorted backend names
        table_size: Prime lookup table size
        hasher: Keyed hash pair

    Returns:
        Rows index-aligned with ``names``
    """
    return [permutation_row(name, table_size, hasher) for name in names]
