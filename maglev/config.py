"""Configuration management for embedded Maglev tables."""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

from .hashing.keyed_hash import OFFSET_KEY, SKIP_KEY

load_dotenv()

# Default lookup table size (prime, comfortably above typical backend counts)
DEFAULT_TABLE_SIZE = 65537

LOG_LEVELS = ["debug", "info", "warning", "error"]


def _parse_int(value: str) -> int:
    """Parse decimal or 0x-prefixed integers."""
    return int(value, 0)


@dataclass
class MaglevConfig:
    """Configuration for a Maglev lookup table."""

    # Lookup table
    table_size: int = DEFAULT_TABLE_SIZE
    backends: List[str] = field(default_factory=list)

    # Hashing
    offset_key: int = OFFSET_KEY
    skip_key: int = SKIP_KEY

    # Observability
    log_level: str = "info"
    enable_metrics: bool = False

    @classmethod
    def from_env(cls) -> "MaglevConfig":
        """Load configuration from environment variables."""
        backends_str = os.getenv("MAGLEV_BACKENDS", "")
        backends = [b.strip() for b in backends_str.split(",") if b.strip()]

        return cls(
            table_size=_parse_int(os.getenv("MAGLEV_TABLE_SIZE", str(DEFAULT_TABLE_SIZE))),
            backends=backends,
            offset_key=_parse_int(os.getenv("MAGLEV_HASH_KEY_OFFSET", hex(OFFSET_KEY))),
            skip_key=_parse_int(os.getenv("MAGLEV_HASH_KEY_SKIP", hex(SKIP_KEY))),
            # Support MAGLEV_LOG_LEVEL with fallback to LOG_LEVEL
            log_level=os.getenv("MAGLEV_LOG_LEVEL", os.getenv("LOG_LEVEL", "info")).lower(),
            enable_metrics=os.getenv("MAGLEV_ENABLE_METRICS", "false").lower() == "true",
        )

    def validate(self) -> None:
        """Validate configuration.

        Table size primality and backend count are checked when the table is
        built, where they raise the table's own errors.
        """
        if self.table_size <= 0:
            raise ValueError(f"MAGLEV_TABLE_SIZE must be positive, got {self.table_size}")

        if self.offset_key == self.skip_key:
            raise ValueError("MAGLEV_HASH_KEY_OFFSET and MAGLEV_HASH_KEY_SKIP must differ")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

    def to_dict(self) -> dict:
        """Get configuration as dictionary.

        Returns:
            Dictionary with all configuration fields
        """
        return {
            "table_size": self.table_size,
            "backends": list(self.backends),
            "offset_key": self.offset_key,
            "skip_key": self.skip_key,
            "log_level": self.log_level,
            "enable_metrics": self.enable_metrics,
        }
