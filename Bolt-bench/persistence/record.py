"""
Basic data structures for the Bolt / S3 benchmark.
"""

import time
from typing import Optional

OP_LIST = "list"
OP_PUT = "put"
OP_DELETE = "delete"
OP_GET = "get"


class OperationRecord:
    """One timed request against one backend."""

    def __init__(self, backend: str, operation: str, object_key: Optional[str],
                 latency_ms: int, item_count: Optional[int] = None,
                 content_length: Optional[int] = None,
                 content_encoding: Optional[str] = None,
                 compressed: Optional[bool] = None,
                 start_ts: float = None, end_ts: float = None):
        self.backend = backend
        self.operation = operation
        self.object_key = object_key
        self.latency_ms = latency_ms
        self.item_count = item_count
        self.content_length = content_length
        self.content_encoding = content_encoding
        self.compressed = compressed
        self.start_ts = start_ts or time.time()
        self.end_ts = end_ts or time.time()
