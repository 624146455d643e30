"""
Auto-heal probe: retries a Bolt read until it succeeds and reports how long healing took.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from common.storage_factory import create_storage_system
from configuration import AUTO_HEAL_RETRY_DELAY_SECONDS, MS_PER_SECOND, PROXY_NAME
from systems.base import StorageBackend

logger = logging.getLogger(__name__)


class AutoHealProbe:
    """Measures the time until a damaged object becomes readable through the proxy again."""

    def __init__(self, proxy: Optional[StorageBackend] = None,
                 retry_delay_seconds: float = AUTO_HEAL_RETRY_DELAY_SECONDS):
        self.proxy = proxy
        self.retry_delay_seconds = retry_delay_seconds

    async def process_event(self, event: Dict[str, Any]) -> Dict[str, str]:
        bucket = event.get("bucket") or ""
        key = event.get("key") or ""
        if not bucket or not key:
            raise ValueError("bucket and key are required")

        proxy = self.proxy or create_storage_system(PROXY_NAME)

        async with proxy:
            start = time.perf_counter()
            attempts = 0
            while True:
                attempts += 1
                try:
                    response = await proxy.get_object(bucket, key)
                except (ClientError, BotoCoreError) as e:
                    logger.debug(f"Attempt {attempts} for {bucket}/{key} failed: {e}")
                    if self.retry_delay_seconds:
                        await asyncio.sleep(self.retry_delay_seconds)
                    continue
                heal_ms = int((time.perf_counter() - start) * MS_PER_SECOND)
                async with response.body:
                    pass
                break

        logger.info(f"{bucket}/{key} readable after {attempts} attempts ({heal_ms} ms)")
        return {"auto_heal_time": f"{heal_ms} ms"}
