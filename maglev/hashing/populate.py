"""Round-robin preference filling of the Maglev lookup table."""
from typing import List, Optional, Sequence


def populate(permutation: Sequence[Sequence[int]], table_size: int) -> List[int]:
    """Fill the lookup table from per-backend permutation rows.

    Backends take turns in row order; each claims the next slot in its
    preference list that no earlier turn has claimed. Filling stops once
    every slot is owned.

    Args:
        permutation: One full permutation of ``range(table_size)`` per backend
        table_size: Lookup table size

    Returns:
        List mapping slot -> backend index (empty if there are no backends)
    """
    n = len(permutation)
    if n == 0:
        return []

    next_pref = [0] * n
    entry: List[Optional[int]] = [None] * table_size
    assigned = 0

    while True:
        for i in range(n):
            row = permutation[i]
            c = row[next_pref[i]]
            while entry[c] is not None:
                next_pref[i] += 1
                c = row[next_pref[i]]

            entry[c] = i
            next_pref[i] += 1
            assigned += 1

            if assigned == table_size:
                return entry
