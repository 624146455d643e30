"""
Comparative Bolt / S3 performance run: request validation, key provisioning and phase dispatch.
"""

import logging
from typing import Any, Dict, Optional

from algorithms.all_phases import AllPhases
from algorithms.delete_object import DeleteObjectPhase
from algorithms.get_object import GetObjectPassthroughPhase, GetObjectPhase
from algorithms.key_provisioner import discover_key_names, generate_key_names
from algorithms.list_objects import ListObjectsPhase
from algorithms.operation_runner import OperationRunner
from algorithms.put_object import PutObjectPhase
from common.request import (
    ALL,
    DELETE_OBJECT,
    DISCOVERED_KEY_TYPES,
    GET_OBJECT,
    GET_OBJECT_PASSTHROUGH,
    GET_OBJECT_PASSTHROUGH_TTFB,
    GET_OBJECT_TTFB,
    LIST_OBJECTS_V2,
    PUT_OBJECT,
    BenchmarkRequest,
)
from common.storage_factory import create_storage_system
from configuration import BASELINE_NAME, PROXY_NAME
from persistence.prom import SimplePrometheusExporter
from systems.base import StorageBackend

logger = logging.getLogger(__name__)


class PerfBenchmark:
    """Runs one comparative workload per event.

    Storage systems are created from configuration unless injected; either
    way they are opened for the duration of a single run.
    """

    def __init__(self, baseline: Optional[StorageBackend] = None,
                 proxy: Optional[StorageBackend] = None,
                 exporter: Optional[SimplePrometheusExporter] = None):
        self.baseline = baseline
        self.proxy = proxy
        self.exporter = exporter

    async def process_event(self, event: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Validate the event, run the requested workload and return its report.

        Raises:
            ValueError: On invalid parameters, before any backend is contacted
        """
        request = BenchmarkRequest.from_event(event)

        if not request.is_known:
            logger.warning(f"Unknown request type {request.request_type}, nothing to do")
            return {}
        if not request.bucket:
            raise ValueError("bucket is required")

        baseline = self.baseline or create_storage_system(BASELINE_NAME)
        proxy = self.proxy or create_storage_system(PROXY_NAME)

        logger.info(
            f"Starting {request.request_type} on {request.bucket} "
            f"(numKeys={request.num_keys}, objLength={request.obj_length})"
        )

        async with baseline, proxy:
            report = await self.run(request, baseline, proxy)

        logger.info(f"{request.request_type} completed with {len(report)} statistics")
        return report

    async def run(self, request: BenchmarkRequest, baseline: StorageBackend,
                  proxy: StorageBackend) -> Dict[str, Any]:
        """Run the workload against already opened storage systems."""
        runner = OperationRunner(self.exporter)
        request_type = request.request_type

        if request_type == ALL:
            return await AllPhases(baseline, proxy, runner).execute(request)

        if request_type == LIST_OBJECTS_V2:
            return await ListObjectsPhase(baseline, proxy, runner).execute(request)

        if request_type in DISCOVERED_KEY_TYPES:
            keys = await discover_key_names(baseline, request.bucket, request.num_keys)
        else:
            keys = generate_key_names(request.num_keys)

        runner.track_working_set(keys)

        if request_type == PUT_OBJECT:
            return await PutObjectPhase(baseline, proxy, runner).execute(request, keys)
        if request_type == DELETE_OBJECT:
            return await DeleteObjectPhase(baseline, proxy, runner).execute(request, keys)
        if request_type in (GET_OBJECT, GET_OBJECT_TTFB):
            return await GetObjectPhase(baseline, proxy, runner).execute(
                request.bucket, keys, ttfb=request.ttfb
            )
        if request_type in (GET_OBJECT_PASSTHROUGH, GET_OBJECT_PASSTHROUGH_TTFB):
            return await GetObjectPassthroughPhase(proxy, runner).execute(
                request.bucket, keys, ttfb=request.ttfb
            )

        return {}
