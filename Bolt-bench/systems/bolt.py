"""
Bolt object storage system implementation (the caching proxy in front of S3).
"""

from systems.base import ObjectStorageSystem
from configuration import BOLT_ENDPOINT, AWS_REGION, PROXY_NAME
import logging

logger = logging.getLogger(__name__)


class BoltSystem(ObjectStorageSystem):
    """Bolt S3-compatible proxy."""

    def __init__(self, credentials: dict = None):
        if credentials is None:
            credentials = {"region_name": AWS_REGION}

        super().__init__(
            name=PROXY_NAME,
            endpoint=BOLT_ENDPOINT,
            credentials=credentials
        )
        logger.info("Initialized Bolt system")
