"""
Backend operation runner: issues one timed request per working-set key against one backend.
"""

import logging
import time
from typing import Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from common.content import is_compressed
from configuration import MS_PER_SECOND, READ_CHUNK_SIZE
from persistence.base import SampleSeries
from persistence.prom import SimplePrometheusExporter
from persistence.record import OP_DELETE, OP_GET, OP_LIST, OP_PUT, OperationRecord
from systems.base import STREAM_READ_ERRORS, StorageBackend

logger = logging.getLogger(__name__)


def elapsed_ms(start: float) -> int:
    """Whole milliseconds since ``start`` (a perf_counter reading), truncated."""
    return int((time.perf_counter() - start) * MS_PER_SECOND)


async def drain_stream(stream, ttfb: bool) -> int:
    """Consume a response body and return the number of bytes read.

    In TTFB mode exactly one read of one byte is attempted and any read error
    is ignored. Otherwise the body is read in chunks until exhaustion; a
    transport-level read error is treated as the end of the data.
    """
    if ttfb:
        try:
            return len(await stream.read(1))
        except Exception as e:
            logger.debug(f"Ignoring first-byte read error: {e}")
            return 0

    total = 0
    try:
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            total += len(chunk)
    except STREAM_READ_ERRORS as e:
        logger.debug(f"Stream ended early after {total} bytes: {e}")
    return total


class OperationRunner:
    """Runs one operation kind over a working set, strictly in order, one request at a time.

    Any backend error aborts the run immediately; no samples are returned for
    a failed run.
    """

    def __init__(self, exporter: Optional[SimplePrometheusExporter] = None):
        self.exporter = exporter

    def _collect(self, series: SampleSeries, record: OperationRecord):
        series.add_record(record)
        if self.exporter:
            self.exporter.record_operation(record)

    def track_working_set(self, keys: List[str]):
        """Publish the size of the working set about to be measured."""
        if self.exporter:
            self.exporter.update_working_set(len(keys))

    def _log_failure(self, system: StorageBackend, operation: str, key: Optional[str], error: Exception):
        target = f" for {key}" if key else ""
        logger.error(f"{system.name} {operation} failed{target}: {error}")

    async def run_list(self, system: StorageBackend, bucket: str, max_keys: int, iterations: int) -> SampleSeries:
        """Repeat a capped listing call ``iterations`` times."""
        series = SampleSeries(system.name, OP_LIST)

        for _ in range(iterations):
            start_ts = time.time()
            start = time.perf_counter()
            try:
                items = await system.list_objects(bucket, max_keys=max_keys)
            except (ClientError, BotoCoreError) as e:
                self._log_failure(system, OP_LIST, None, e)
                raise
            latency_ms = elapsed_ms(start)

            self._collect(series, OperationRecord(
                backend=system.name,
                operation=OP_LIST,
                object_key=None,
                latency_ms=latency_ms,
                item_count=len(items),
                start_ts=start_ts,
            ))

        return series

    async def run_put(self, system: StorageBackend, bucket: str, keys: List[str],
                      payloads: Dict[str, bytes]) -> SampleSeries:
        """Upload the payload of every key."""
        series = SampleSeries(system.name, OP_PUT)

        for key in keys:
            start_ts = time.time()
            start = time.perf_counter()
            try:
                await system.put_object(bucket, key, payloads[key])
            except (ClientError, BotoCoreError) as e:
                self._log_failure(system, OP_PUT, key, e)
                raise
            latency_ms = elapsed_ms(start)

            self._collect(series, OperationRecord(
                backend=system.name,
                operation=OP_PUT,
                object_key=key,
                latency_ms=latency_ms,
                start_ts=start_ts,
            ))

        return series

    async def run_delete(self, system: StorageBackend, bucket: str, keys: List[str]) -> SampleSeries:
        """Delete every key."""
        series = SampleSeries(system.name, OP_DELETE)

        for key in keys:
            start_ts = time.time()
            start = time.perf_counter()
            try:
                await system.delete_object(bucket, key)
            except (ClientError, BotoCoreError) as e:
                self._log_failure(system, OP_DELETE, key, e)
                raise
            latency_ms = elapsed_ms(start)

            self._collect(series, OperationRecord(
                backend=system.name,
                operation=OP_DELETE,
                object_key=key,
                latency_ms=latency_ms,
                start_ts=start_ts,
            ))

        return series

    async def run_get(self, system: StorageBackend, bucket: str, keys: List[str], ttfb: bool) -> SampleSeries:
        """Fetch every key, reading either the first byte or the whole body."""
        series = SampleSeries(system.name, OP_GET)

        for key in keys:
            start_ts = time.time()
            start = time.perf_counter()
            try:
                response = await system.get_object(bucket, key)
            except (ClientError, BotoCoreError) as e:
                self._log_failure(system, OP_GET, key, e)
                raise

            async with response.body as stream:
                await drain_stream(stream, ttfb)
                latency_ms = elapsed_ms(start)

            self._collect(series, OperationRecord(
                backend=system.name,
                operation=OP_GET,
                object_key=key,
                latency_ms=latency_ms,
                content_length=response.content_length,
                content_encoding=response.content_encoding,
                compressed=is_compressed(key, response.content_encoding),
                start_ts=start_ts,
            ))

        return series
