"""
Sample collection for one (backend, operation) pair within a run.
"""

from typing import Any, Dict, List

from common.metrics_utils import compute_perf_stats, safe_ratio
from persistence.record import OP_GET, OP_LIST, OperationRecord


class SampleSeries:
    """Ordered per-request samples for one backend and operation kind."""

    def __init__(self, backend: str, operation: str):
        self.backend = backend
        self.operation = operation
        self.records: List[OperationRecord] = []
        self.latencies: List[int] = []
        self.throughputs: List[float] = []
        self.sizes: List[int] = []
        self.compressed = 0
        self.uncompressed = 0

    def add_record(self, record: OperationRecord):
        """Append a record's samples, in the order the requests were issued."""
        self.records.append(record)
        self.latencies.append(record.latency_ms)

        if record.item_count is not None:
            self.throughputs.append(safe_ratio(record.item_count, record.latency_ms))

        if record.content_length is not None:
            self.sizes.append(record.content_length)

        if record.compressed is not None:
            if record.compressed:
                self.compressed += 1
            else:
                self.uncompressed += 1

    def __len__(self):
        return len(self.latencies)

    def get_summary(self) -> Dict[str, Any]:
        """Formatted statistic block; empty when no request was issued."""
        if not self.latencies:
            return {}
        return compute_perf_stats(
            self.latencies,
            self.throughputs if self.operation == OP_LIST else None,
            self.sizes if self.operation == OP_GET else None,
        )

    def get_counts(self) -> Dict[str, str]:
        """Compressed / uncompressed object counts."""
        return {
            'compressed': str(self.compressed),
            'uncompressed': str(self.uncompressed),
        }
