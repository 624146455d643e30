"""
Single object / bucket operations against either S3 or Bolt, for smoke-testing a deployment.
"""

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from commands.validate import fetch_object_md5
from common.storage_factory import create_storage_system
from configuration import BASELINE_NAME
from systems.base import StorageBackend

logger = logging.getLogger(__name__)


def _isoformat(value):
    return value.isoformat() if value is not None else None


def _status_text(response: Dict[str, Any]) -> str:
    code = response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0)
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return str(code)


class ObjectOps:
    """Sends one request to the selected backend and shapes its response."""

    def __init__(self, system: Optional[StorageBackend] = None):
        self.system = system

    async def process_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        request_type = (event.get("requestType") or "").upper()
        sdk_type = (event.get("sdkType") or BASELINE_NAME).lower()
        bucket = event.get("bucket") or ""
        key = event.get("key") or ""

        handlers = {
            "GET_OBJECT": lambda system: self._get_object(system, bucket, key),
            "LIST_OBJECTS_V2": lambda system: self._list_objects(system, bucket),
            "HEAD_OBJECT": lambda system: self._head_object(system, bucket, key),
            "LIST_BUCKETS": self._list_buckets,
            "HEAD_BUCKET": lambda system: self._head_bucket(system, bucket),
            "PUT_OBJECT": lambda system: self._put_object(system, bucket, key, event.get("value") or ""),
            "DELETE_OBJECT": lambda system: self._delete_object(system, bucket, key),
        }
        handler = handlers.get(request_type)
        if handler is None:
            logger.warning(f"Unknown request type {request_type!r}, nothing to do")
            return {}

        system = self.system or create_storage_system(sdk_type)
        async with system:
            logger.info(f"{request_type} via {system.name}")
            return await handler(system)

    async def _get_object(self, system: StorageBackend, bucket: str, key: str):
        return {"md5": await fetch_object_md5(system, bucket, key)}

    async def _list_objects(self, system: StorageBackend, bucket: str):
        items = await system.list_objects(bucket)
        return {
            "objects": [
                {
                    "Key": item.get("Key"),
                    "LastModified": _isoformat(item.get("LastModified")),
                    "ETag": item.get("ETag"),
                    "Size": item.get("Size"),
                    "StorageClass": item.get("StorageClass"),
                }
                for item in items
            ]
        }

    async def _head_object(self, system: StorageBackend, bucket: str, key: str):
        response = await system.head_object(bucket, key)
        return {
            "ETag": response.get("ETag"),
            "StorageClass": response.get("StorageClass"),
            "LastModified": _isoformat(response.get("LastModified")),
            "ContentLength": response.get("ContentLength"),
        }

    async def _list_buckets(self, system: StorageBackend):
        buckets = await system.list_buckets()
        return {
            "buckets": [
                {"Name": bucket.get("Name"), "CreationDate": _isoformat(bucket.get("CreationDate"))}
                for bucket in buckets
            ]
        }

    async def _head_bucket(self, system: StorageBackend, bucket: str):
        response = await system.head_bucket(bucket)
        headers = response.get("ResponseMetadata", {}).get("HTTPHeaders", {})
        return {
            "statusText": _status_text(response),
            "region": headers.get("x-amz-bucket-region", ""),
        }

    async def _put_object(self, system: StorageBackend, bucket: str, key: str, value: str):
        response = await system.put_object(bucket, key, value.encode())
        return {
            "ETag": response.get("ETag"),
            "Expiration": response.get("Expiration"),
            "VersionId": response.get("VersionId"),
        }

    async def _delete_object(self, system: StorageBackend, bucket: str, key: str):
        response = await system.delete_object(bucket, key)
        return {"statusText": _status_text(response)}
