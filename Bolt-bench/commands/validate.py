"""
Data validation: compares the content digest of one object as served by Bolt and by S3.
"""

import logging
from contextlib import AsyncExitStack
from typing import Any, Dict, Optional

from common.content import content_md5, is_compressed
from common.storage_factory import create_storage_system
from configuration import BASELINE_NAME, PROXY_NAME
from systems.base import StorageBackend

logger = logging.getLogger(__name__)

BUCKET_CLEAN_OFF = "OFF"


async def fetch_object_md5(system: StorageBackend, bucket: str, key: str) -> str:
    """Fetch an object and return the MD5 of its (decompressed) content."""
    response = await system.get_object(bucket, key)
    async with response.body as stream:
        data = await stream.read()
    return content_md5(data, compressed=is_compressed(key, response.content_encoding))


class ObjectValidator:
    """Fetches one object through the proxy and, unless the bucket is clean, from S3."""

    def __init__(self, baseline: Optional[StorageBackend] = None,
                 proxy: Optional[StorageBackend] = None):
        self.baseline = baseline
        self.proxy = proxy

    async def process_event(self, event: Dict[str, Any]) -> Dict[str, str]:
        bucket = event.get("bucket") or ""
        key = event.get("key") or ""
        if not bucket or not key:
            raise ValueError("bucket and key are required")

        # A clean bucket has had its objects removed from S3 after being cached
        check_baseline = (event.get("bucketClean") or BUCKET_CLEAN_OFF).upper() == BUCKET_CLEAN_OFF

        proxy = self.proxy or create_storage_system(PROXY_NAME)

        async with AsyncExitStack() as stack:
            await stack.enter_async_context(proxy)
            result = {f"{proxy.name}-md5": await fetch_object_md5(proxy, bucket, key)}

            if check_baseline:
                baseline = self.baseline or create_storage_system(BASELINE_NAME)
                await stack.enter_async_context(baseline)
                result[f"{baseline.name}-md5"] = await fetch_object_md5(baseline, bucket, key)

        if len(set(result.values())) > 1:
            logger.warning(f"Content mismatch for {bucket}/{key}: {result}")
        else:
            logger.info(f"Validated {bucket}/{key}")
        return result
