"""
DeleteObject phase: deletes generated keys from the baseline, then the proxy.
"""

import logging
from typing import Any, Dict, List, Optional

from common.metrics_utils import perf_stat_name
from common.request import BenchmarkRequest
from algorithms.operation_runner import OperationRunner
from systems.base import StorageBackend

logger = logging.getLogger(__name__)

DELETE_STAT = "del_obj"


class DeleteObjectPhase:
    """Measures delete latency on both backends."""

    def __init__(self, baseline: StorageBackend, proxy: StorageBackend,
                 runner: Optional[OperationRunner] = None):
        self.baseline = baseline
        self.proxy = proxy
        self.runner = runner or OperationRunner()

    async def execute(self, request: BenchmarkRequest, keys: List[str]) -> Dict[str, Any]:
        logger.info(f"Starting delete phase: {len(keys)} keys")

        report = {}
        for system in (self.baseline, self.proxy):
            series = await self.runner.run_delete(system, request.bucket, keys)
            report[perf_stat_name(system.name, DELETE_STAT)] = series.get_summary()

        logger.info("Delete phase completed")
        return report
