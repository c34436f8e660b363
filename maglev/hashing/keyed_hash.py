"""Keyed 64-bit hashing for Maglev permutations and lookups."""
import hashlib

# Keys of the two independent hash functions. H1 (offset) also hashes client keys.
OFFSET_KEY = 0xDEADBABE
SKIP_KEY = 0xDEADBEEF


def keyed_hash(key: int, value: str) -> int:
    """Compute a keyed hash using blake2b (64-bit digest).

    Args:
        key: Hash key (unsigned 64-bit integer)
        value: String to hash

    Returns:
        64-bit integer hash value
    """
    h = hashlib.blake2b(digest_size=8, key=key.to_bytes(8, byteorder='little'))  # 64-bit hash
    h.update(value.encode('utf-8', 'surrogatepass'))
    return int.from_bytes(h.digest(), byteorder='little')


class KeyedHasher:
    """Pair of independent keyed hash functions.

    ``offset_hash`` places a backend's permutation start and hashes client
    keys on lookup; ``skip_hash`` derives the permutation stride.
    """

    def __init__(self, offset_key: int = OFFSET_KEY, skip_key: int = SKIP_KEY):
        """Initialize hasher.

        Args:
            offset_key: Key for the offset/lookup hash (H1)
            skip_key: Key for the skip hash (H2)

        Raises:
            ValueError: If keys are equal or out of the unsigned 64-bit range
        """
        for name, key in (("offset_key", offset_key), ("skip_key", skip_key)):
            if not 0 <= key < 2 ** 64:
                raise ValueError(f"{name} must be an unsigned 64-bit integer, got {key}")

        if offset_key == skip_key:
            raise ValueError("offset_key and skip_key must differ")

        self.offset_key = offset_key
        self.skip_key = skip_key

    def offset_hash(self, value: str) -> int:
        return keyed_hash(self.offset_key, value)

    def skip_hash(self, value: str) -> int:
        return keyed_hash(self.skip_key, value)

    def __repr__(self) -> str:
        return f"KeyedHasher(offset_key={self.offset_key:#x}, skip_key={self.skip_key:#x})"
