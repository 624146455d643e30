"""
GetObject phases: full-object and first-byte reads, compared across both backends
or, for passthrough, measured on the proxy alone.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from common.metrics_utils import count_stat_name, perf_stat_name
from algorithms.operation_runner import OperationRunner
from systems.base import StorageBackend

logger = logging.getLogger(__name__)

GET_STAT = "get_obj"
PASSTHROUGH_STAT = "get_obj_pt"
TTFB_SUFFIX = "_ttfb"


async def _measure_gets(runner: OperationRunner, systems: Sequence[StorageBackend], bucket: str,
                        keys: List[str], ttfb: bool, stat: str) -> Dict[str, Any]:
    if ttfb:
        stat += TTFB_SUFFIX

    report = {}
    for system in systems:
        series = await runner.run_get(system, bucket, keys, ttfb)
        report[perf_stat_name(system.name, stat)] = series.get_summary()
        report[count_stat_name(system.name)] = series.get_counts()
    return report


class GetObjectPhase:
    """Measures read latency, object sizes and compression mix on both backends."""

    def __init__(self, baseline: StorageBackend, proxy: StorageBackend,
                 runner: Optional[OperationRunner] = None):
        self.baseline = baseline
        self.proxy = proxy
        self.runner = runner or OperationRunner()

    async def execute(self, bucket: str, keys: List[str], ttfb: bool = False) -> Dict[str, Any]:
        mode = "first-byte" if ttfb else "full-object"
        logger.info(f"Starting {mode} get phase: {len(keys)} keys")
        report = await _measure_gets(
            self.runner, (self.baseline, self.proxy), bucket, keys, ttfb, GET_STAT
        )
        logger.info("Get phase completed")
        return report


class GetObjectPassthroughPhase:
    """Measures proxy reads of objects outside the proxy's cache scope."""

    def __init__(self, proxy: StorageBackend, runner: Optional[OperationRunner] = None):
        self.proxy = proxy
        self.runner = runner or OperationRunner()

    async def execute(self, bucket: str, keys: List[str], ttfb: bool = False) -> Dict[str, Any]:
        mode = "first-byte" if ttfb else "full-object"
        logger.info(f"Starting {mode} passthrough get phase: {len(keys)} keys")
        report = await _measure_gets(
            self.runner, (self.proxy,), bucket, keys, ttfb, PASSTHROUGH_STAT
        )
        logger.info("Passthrough get phase completed")
        return report
