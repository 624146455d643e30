"""
AWS S3 object storage system implementation (the baseline store).
"""

from systems.base import ObjectStorageSystem
from configuration import S3_ENDPOINT, AWS_REGION, BASELINE_NAME
import logging

logger = logging.getLogger(__name__)


class AWSSystem(ObjectStorageSystem):
    """AWS S3 object storage system."""

    def __init__(self, credentials: dict = None):
        if credentials is None:
            credentials = {"region_name": AWS_REGION}

        super().__init__(
            name=BASELINE_NAME,
            endpoint=S3_ENDPOINT,
            credentials=credentials
        )
        logger.info("Initialized AWS S3 system")
