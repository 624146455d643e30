"""
Simple Prometheus metrics exporter for the Bolt / S3 benchmark.
"""

import logging
from prometheus_client import start_http_server, Counter, Histogram, Gauge, REGISTRY

from configuration import MS_PER_SECOND
from persistence.record import OperationRecord

logger = logging.getLogger(__name__)


class SimplePrometheusExporter:
    """Simple Prometheus metrics exporter."""

    def __init__(self, port: int = 9100, registry=None):
        self.port = port
        self.registry = registry if registry is not None else REGISTRY
        self.server_started = False

        # Define metrics
        self.requests_total = Counter(
            'bolt_bench_requests_total', 'Total timed requests',
            ['backend', 'operation'], registry=self.registry)
        self.request_duration = Histogram(
            'bolt_bench_request_duration_seconds', 'Timed request duration',
            ['backend', 'operation'], registry=self.registry)
        self.bytes_total = Counter(
            'bolt_bench_bytes_total', 'Declared content length of fetched objects',
            ['backend'], registry=self.registry)
        self.working_set_keys = Gauge(
            'bolt_bench_working_set_keys', 'Keys in the current working set',
            registry=self.registry)

    def start_server(self):
        """Start the Prometheus HTTP server."""
        if not self.server_started:
            try:
                start_http_server(self.port, registry=self.registry)
                self.server_started = True
                logger.info(f"Prometheus server started on port {self.port}")
            except OSError as e:
                logger.error(f"Failed to start Prometheus server: {e}")

    def record_operation(self, record: OperationRecord):
        """Record a request metric."""
        try:
            self.requests_total.labels(backend=record.backend, operation=record.operation).inc()
            self.request_duration.labels(backend=record.backend, operation=record.operation).observe(
                record.latency_ms / MS_PER_SECOND
            )
            if record.content_length:
                self.bytes_total.labels(backend=record.backend).inc(record.content_length)
        except ValueError as e:
            logger.error(f"Failed to record request metric: {e}")

    def update_working_set(self, key_count: int):
        """Update working set size metric."""
        self.working_set_keys.set(key_count)
