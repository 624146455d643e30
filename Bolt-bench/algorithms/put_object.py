"""
PutObject phase: uploads generated keys to the baseline, then the proxy.
"""

import logging
import random
import string
from typing import Any, Dict, List, Optional

from common.metrics_utils import perf_stat_name
from common.request import BenchmarkRequest
from algorithms.operation_runner import OperationRunner
from systems.base import StorageBackend

logger = logging.getLogger(__name__)

PUT_STAT = "put_obj"
PAYLOAD_ALPHABET = string.ascii_letters + string.digits


def generate_payload(length: int) -> bytes:
    """Random alphanumeric payload of ``length`` bytes."""
    return "".join(random.choices(PAYLOAD_ALPHABET, k=length)).encode()


class PutObjectPhase:
    """Measures upload latency on both backends with identical payloads."""

    def __init__(self, baseline: StorageBackend, proxy: StorageBackend,
                 runner: Optional[OperationRunner] = None):
        self.baseline = baseline
        self.proxy = proxy
        self.runner = runner or OperationRunner()

    async def execute(self, request: BenchmarkRequest, keys: List[str]) -> Dict[str, Any]:
        logger.info(f"Starting put phase: {len(keys)} keys of {request.obj_length} bytes")

        # Both backends receive the same body for a given key
        payloads = {key: generate_payload(request.obj_length) for key in keys}

        report = {}
        for system in (self.baseline, self.proxy):
            series = await self.runner.run_put(system, request.bucket, keys, payloads)
            report[perf_stat_name(system.name, PUT_STAT)] = series.get_summary()

        logger.info("Put phase completed")
        return report
