"""Maglev consistent hashing for request routing."""
from .config import DEFAULT_TABLE_SIZE, MaglevConfig
from .errors import (
    DuplicateBackend,
    EmptyTable,
    InvalidTableSize,
    MaglevError,
    NotFound,
    TableFull,
    TooManyBackends,
)
from .hashing.keyed_hash import KeyedHasher
from .hashing.primes import is_prime
from .log import configure_logging
from .metrics.prometheus import MaglevMetrics
from .state.snapshot import TableSnapshot
from .table import MaglevTable

__all__ = [
    "DEFAULT_TABLE_SIZE",
    "DuplicateBackend",
    "EmptyTable",
    "InvalidTableSize",
    "KeyedHasher",
    "MaglevConfig",
    "MaglevError",
    "MaglevMetrics",
    "MaglevTable",
    "NotFound",
    "TableFull",
    "TableSnapshot",
    "TooManyBackends",
    "configure_logging",
    "is_prime",
]
