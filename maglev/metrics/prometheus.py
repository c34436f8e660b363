"""Prometheus metrics for Maglev table rebuilds and lookups."""
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest
import structlog

logger = structlog.get_logger()


class MaglevMetrics:
    """Prometheus metrics collector for a Maglev table.

    Collectors live on their own registry so several tables (or test runs)
    never collide on metric names.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None, namespace: str = "maglev"):
        """Initialize metrics.

        Args:
            registry: Registry to register collectors on (default: a new one)
            namespace: Metric name prefix
        """
        self.registry = registry if registry is not None else CollectorRegistry()
        self.namespace = namespace

        self.rebuilds = Counter(
            'table_rebuilds_total',
            'Number of lookup table rebuilds',
            ['operation'],
            namespace=namespace,
            registry=self.registry
        )

        self.rejected = Counter(
            'mutations_rejected_total',
            'Number of rejected table mutations',
            ['operation', 'error'],
            namespace=namespace,
            registry=self.registry
        )

        self.backends = Gauge(
            'backends',
            'Number of configured backends',
            namespace=namespace,
            registry=self.registry
        )

        self.table_size = Gauge(
            'table_size',
            'Lookup table size',
            namespace=namespace,
            registry=self.registry
        )

        self.lookups = Counter(
            'lookups_total',
            'Number of key lookups',
            ['result'],
            namespace=namespace,
            registry=self.registry
        )

        self.rebuild_latency = Histogram(
            'rebuild_latency_ms',
            'Lookup table rebuild latency in milliseconds',
            buckets=[0.1, 0.5, 1, 5, 10, 50, 100, 500, 1000, 5000],
            namespace=namespace,
            registry=self.registry
        )

        logger.debug("metrics_initialized", namespace=namespace)

    def record_rebuild(self, operation: str, backends: int, table_size: int, duration_ms: float) -> None:
        """Record a published table rebuild.

        Args:
            operation: Mutation name ("set", "add", "remove", "clear")
            backends: Backend count after the rebuild
            table_size: Lookup table size
            duration_ms: Rebuild duration in milliseconds
        """
        self.rebuilds.labels(operation=operation).inc()
        self.backends.set(backends)
        self.table_size.set(table_size)
        self.rebuild_latency.observe(duration_ms)

    def record_rejected(self, operation: str, error: Exception) -> None:
        """Record a mutation rejected by validation.

        Args:
            operation: Mutation name
            error: Raised error
        """
        self.rejected.labels(operation=operation, error=type(error).__name__).inc()

    def record_lookup(self, hit: bool) -> None:
        """Record a key lookup.

        Args:
            hit: True if a backend was returned, False if the table was empty
        """
        self.lookups.labels(result="hit" if hit else "empty").inc()

    def render(self) -> bytes:
        """Return metrics in Prometheus text exposition format."""
        return generate_latest(self.registry)

    def __repr__(self) -> str:
        return f"MaglevMetrics(namespace={self.namespace})"
