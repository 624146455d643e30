"""
ListObjectsV2 phase: repeated capped listings against the baseline, then the proxy.
"""

import logging
from typing import Any, Dict, Optional

from common.metrics_utils import perf_stat_name
from common.request import BenchmarkRequest
from algorithms.operation_runner import OperationRunner
from systems.base import StorageBackend

logger = logging.getLogger(__name__)

LIST_STAT = "list_objects_v2"


class ListObjectsPhase:
    """Measures listing latency and objects/ms on both backends."""

    def __init__(self, baseline: StorageBackend, proxy: StorageBackend,
                 runner: Optional[OperationRunner] = None):
        self.baseline = baseline
        self.proxy = proxy
        self.runner = runner or OperationRunner()

    async def execute(self, request: BenchmarkRequest) -> Dict[str, Any]:
        logger.info(
            f"Starting list phase: {request.num_iter} listings of up to {request.num_keys} keys per backend"
        )

        report = {}
        for system in (self.baseline, self.proxy):
            series = await self.runner.run_list(
                system, request.bucket, request.num_keys, request.num_iter
            )
            report[perf_stat_name(system.name, LIST_STAT)] = series.get_summary()

        logger.info("List phase completed")
        return report
