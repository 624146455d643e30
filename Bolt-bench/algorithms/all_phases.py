"""
Composite run: put -> delete -> list -> get, merged into one report.
"""

import logging
from typing import Any, Dict, Optional

from common.request import BenchmarkRequest
from algorithms.delete_object import DeleteObjectPhase
from algorithms.get_object import GetObjectPhase
from algorithms.key_provisioner import discover_key_names, generate_key_names
from algorithms.list_objects import ListObjectsPhase
from algorithms.operation_runner import OperationRunner
from algorithms.put_object import PutObjectPhase
from systems.base import StorageBackend

logger = logging.getLogger(__name__)


def merge_perf_stats(*reports: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten phase reports into one; later reports win on a name collision."""
    merged: Dict[str, Any] = {}
    for report in reports:
        merged.update(report)
    return merged


class AllPhases:
    """Runs every comparative phase in a fixed order.

    A failure in any phase propagates immediately: later phases never run
    and no partial report is produced.
    """

    def __init__(self, baseline: StorageBackend, proxy: StorageBackend,
                 runner: Optional[OperationRunner] = None):
        self.baseline = baseline
        self.proxy = proxy
        self.runner = runner or OperationRunner()

    async def execute(self, request: BenchmarkRequest) -> Dict[str, Any]:
        logger.info(f"=== Composite run on {request.bucket} ===")

        generated_keys = generate_key_names(request.num_keys)
        self.runner.track_working_set(generated_keys)

        logger.info("=== Phase 1: Put ===")
        put_report = await PutObjectPhase(self.baseline, self.proxy, self.runner).execute(
            request, generated_keys
        )

        logger.info("=== Phase 2: Delete ===")
        delete_report = await DeleteObjectPhase(self.baseline, self.proxy, self.runner).execute(
            request, generated_keys
        )

        logger.info("=== Phase 3: List ===")
        list_report = await ListObjectsPhase(self.baseline, self.proxy, self.runner).execute(request)

        logger.info("=== Phase 4: Get ===")
        discovered_keys = await discover_key_names(self.baseline, request.bucket, request.num_keys)
        self.runner.track_working_set(discovered_keys)
        get_report = await GetObjectPhase(self.baseline, self.proxy, self.runner).execute(
            request.bucket, discovered_keys
        )

        return merge_perf_stats(put_report, delete_report, list_report, get_report)
