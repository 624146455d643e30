"""
Working set provisioning: generated key names for write phases, discovered keys for read phases.
"""

import logging
from typing import List

from configuration import KEY_PREFIX
from systems.base import StorageBackend

logger = logging.getLogger(__name__)


def generate_key_names(limit: int, prefix: str = KEY_PREFIX) -> List[str]:
    """Deterministic key names prefix0 .. prefix{limit-1}, in index order."""
    return [f"{prefix}{index}" for index in range(limit)]


async def discover_key_names(baseline: StorageBackend, bucket: str, limit: int) -> List[str]:
    """List up to ``limit`` existing keys from the baseline store.

    One listing call only; key names are returned verbatim in backend order.
    An empty bucket yields an empty working set.
    """
    items = await baseline.list_objects(bucket, max_keys=limit)
    keys = [item["Key"] for item in items][:limit]
    logger.info(f"Discovered {len(keys)} keys in {bucket} via {baseline.name}")
    return keys
