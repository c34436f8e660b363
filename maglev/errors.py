"""Error taxonomy for Maglev table operations.

Every error is a local validation failure raised before any state is
published, so a failed mutation leaves the previous table intact.
"""


class MaglevError(Exception):
    """Base class for all table errors."""


class InvalidTableSize(MaglevError, ValueError):
    """Lookup table size is not a prime number."""

    def __init__(self, table_size: int):
        self.table_size = table_size
        super().__init__(f"Lookup table size is not a prime number: {table_size}")


class TooManyBackends(MaglevError, ValueError):
    """More backends than lookup table slots."""

    def __init__(self, count: int, table_size: int):
        self.count = count
        self.table_size = table_size
        super().__init__(
            f"Number of backends ({count}) is greater than lookup table size ({table_size})"
        )


class DuplicateBackend(MaglevError, ValueError):
    """Backend is already part of the set."""

    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"Backend already exists: {backend}")


class TableFull(MaglevError, ValueError):
    """Adding a backend would exceed the lookup table size."""

    def __init__(self, table_size: int):
        self.table_size = table_size
        super().__init__(
            f"Number of backends would be greater than lookup table size ({table_size})"
        )


class NotFound(MaglevError, KeyError):
    """Backend is not part of the set."""

    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(backend)

    def __str__(self) -> str:
        return f"Backend not found: {self.backend}"


class EmptyTable(MaglevError, LookupError):
    """Lookup on a table with no backends."""

    def __init__(self):
        super().__init__("Lookup table is empty")
