"""
Function entry points: one synchronous handler per command, taking an event dict.

Errors propagate to the caller unchanged so the invoking runtime reports a
single failure with no partial result.
"""

import logging

import uvloop

from commands.autoheal import AutoHealProbe
from commands.ops import ObjectOps
from commands.perf import PerfBenchmark
from commands.validate import ObjectValidator

# Set up logging (only if not already configured)
if not logging.root.handlers:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def handle_perf_request(event, context=None):
    """Run a Bolt / S3 comparative performance test.

    Event fields:
        requestType: list_objects_v2, get_object, get_object_ttfb,
            get_object_passthrough, get_object_passthrough_ttfb, put_object,
            delete_object or all (default)
        bucket: bucket name
        numKeys: number of keys, at most 1000 (default "1000")
        objLength: payload length of uploaded objects (default "100")

    Example:
        {"requestType": "get_object_ttfb", "bucket": "<bucket>"}
    """
    return uvloop.run(PerfBenchmark().process_event(event))


def handle_validate_request(event, context=None):
    """Compare the MD5 of an object served by Bolt and by S3.

    Event fields: bucket, key, bucketClean (ON/OFF, default OFF).
    """
    return uvloop.run(ObjectValidator().process_event(event))


def handle_auto_heal_request(event, context=None):
    """Retry a Bolt read until it succeeds; event fields: bucket, key."""
    return uvloop.run(AutoHealProbe().process_event(event))


def handle_ops_request(event, context=None):
    """Run a single S3 or Bolt operation; event fields: sdkType, requestType, bucket, key, value."""
    return uvloop.run(ObjectOps().process_event(event))
