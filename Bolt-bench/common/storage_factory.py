"""
Factory module for creating storage system instances.
"""

import logging

# Suppress boto3/botocore logging before importing any boto3-related modules
logging.getLogger('botocore').setLevel(logging.CRITICAL)
logging.getLogger('botocore.credentials').setLevel(logging.CRITICAL)
logging.getLogger('boto3').setLevel(logging.CRITICAL)
logging.getLogger('aioboto3').setLevel(logging.CRITICAL)
logging.getLogger('aiobotocore').setLevel(logging.CRITICAL)
logging.getLogger('urllib3').setLevel(logging.CRITICAL)

from systems.bolt import BoltSystem
from systems.aws import AWSSystem
from configuration import (
    BOLT_ACCESS_KEY_ID,
    BOLT_SECRET_ACCESS_KEY,
    AWS_ACCESS_KEY_ID,
    AWS_SECRET_ACCESS_KEY,
    AWS_REGION,
    BASELINE_NAME,
    PROXY_NAME,
)

logger = logging.getLogger(__name__)


def create_storage_system(storage_type: str):
    """Create and return the appropriate storage system based on type.

    Args:
        storage_type: Storage type ('s3' for the baseline, 'bolt' for the proxy)

    Returns:
        Storage system instance (AWSSystem or BoltSystem)

    Raises:
        ValueError: If storage_type is not supported
    """
    storage_type = storage_type.lower()

    if storage_type == PROXY_NAME:
        credentials = {
            "access_key_id": BOLT_ACCESS_KEY_ID,
            "secret_access_key": BOLT_SECRET_ACCESS_KEY,
            "region_name": AWS_REGION,
        }
        return BoltSystem(credentials)

    elif storage_type == BASELINE_NAME:
        credentials = {
            "access_key_id": AWS_ACCESS_KEY_ID,
            "secret_access_key": AWS_SECRET_ACCESS_KEY,
            "region_name": AWS_REGION,
        }
        return AWSSystem(credentials)

    else:
        raise ValueError(f"Unsupported storage type: {storage_type}. Must be 's3' or 'bolt'.")
