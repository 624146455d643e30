"""
Async base classes for the object storage systems under comparison.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

import aioboto3
from aiohttp import ClientError as HTTPClientError
from botocore.config import Config
from botocore.exceptions import ReadTimeoutError
from urllib3.exceptions import IncompleteRead

from configuration import (
    CONNECT_TIMEOUT_SECONDS,
    GZIP_ENCODING,
    MAX_POOL_CONNECTIONS,
    MAX_RETRIES,
    READ_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)

# Errors raised while reading a response body once the request itself succeeded
STREAM_READ_ERRORS = (HTTPClientError, IncompleteRead, ReadTimeoutError)


@dataclass(frozen=True)
class ObjectResponse:
    """A GetObject result: the open body stream plus its content metadata."""

    body: Any
    content_encoding: Optional[str]
    content_length: int


class StorageBackend(Protocol):
    """Capability interface the benchmarking engine depends on."""

    name: str

    async def list_objects(self, bucket: str, max_keys: Optional[int] = None) -> List[Dict[str, Any]]:
        ...

    async def put_object(self, bucket: str, key: str, body: bytes) -> Dict[str, Any]:
        ...

    async def delete_object(self, bucket: str, key: str) -> Dict[str, Any]:
        ...

    async def get_object(self, bucket: str, key: str) -> ObjectResponse:
        ...

    async def head_object(self, bucket: str, key: str) -> Dict[str, Any]:
        ...

    async def head_bucket(self, bucket: str) -> Dict[str, Any]:
        ...

    async def list_buckets(self) -> List[Dict[str, Any]]:
        ...


def _accept_gzip(request, **kwargs):
    request.headers["Accept-Encoding"] = GZIP_ENCODING


class ObjectStorageSystem:
    """Async base class for S3-compatible object storage systems."""

    def __init__(self, name: str, endpoint: str, credentials: dict):
        self.name = name
        self.endpoint = endpoint or None
        self.credentials = credentials

        self._config = self._create_config()

        self.session = aioboto3.Session(
            aws_access_key_id=credentials.get("access_key_id") or None,
            aws_secret_access_key=credentials.get("secret_access_key") or None,
            region_name=credentials.get("region_name"),
        )

        self.client = None
        self._client_cm = None

        logger.info(f"Initialized async storage '{name}' for {self.endpoint or 'default endpoint'}")

    def _create_config(self) -> Config:
        """Create the botocore client config shared by every request."""
        return Config(
            max_pool_connections=MAX_POOL_CONNECTIONS,
            connect_timeout=CONNECT_TIMEOUT_SECONDS,
            read_timeout=READ_TIMEOUT_SECONDS,
            retries={
                "max_attempts": MAX_RETRIES,
                "mode": "standard",
            },
            tcp_keepalive=True,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        self._client_cm = self.session.client(
            "s3",
            endpoint_url=self.endpoint,
            config=self._config,
        )
        self.client = await self._client_cm.__aenter__()
        # Ask for the encoded representation so compressed objects are reported as such
        self.client.meta.events.register("before-sign.s3.GetObject", _accept_gzip)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client_cm:
            await self._client_cm.__aexit__(exc_type, exc_val, exc_tb)
        self.client = None
        self._client_cm = None

    def _require_client(self):
        if not self.client:
            raise RuntimeError("Storage client not initialized. Use async context manager.")
        return self.client

    async def list_objects(self, bucket: str, max_keys: Optional[int] = None) -> List[Dict[str, Any]]:
        """List one page of objects (ListObjectsV2).

        Returns:
            The page's items in backend order, each with Key, Size, ETag,
            LastModified and StorageClass
        """
        client = self._require_client()
        params = {"Bucket": bucket}
        if max_keys is not None:
            params["MaxKeys"] = max_keys
        response = await client.list_objects_v2(**params)
        return response.get("Contents", [])

    async def put_object(self, bucket: str, key: str, body: bytes) -> Dict[str, Any]:
        """Upload an object in a single request."""
        client = self._require_client()
        return await client.put_object(Bucket=bucket, Key=key, Body=body)

    async def delete_object(self, bucket: str, key: str) -> Dict[str, Any]:
        """Delete an object."""
        client = self._require_client()
        return await client.delete_object(Bucket=bucket, Key=key)

    async def get_object(self, bucket: str, key: str) -> ObjectResponse:
        """Issue a GetObject request and return the unread body stream.

        The caller owns the stream and must close it (``async with response.body``).
        """
        client = self._require_client()
        response = await client.get_object(Bucket=bucket, Key=key)
        return ObjectResponse(
            body=response["Body"],
            content_encoding=response.get("ContentEncoding"),
            content_length=response.get("ContentLength", 0),
        )

    async def head_object(self, bucket: str, key: str) -> Dict[str, Any]:
        """Retrieve object metadata."""
        client = self._require_client()
        return await client.head_object(Bucket=bucket, Key=key)

    async def head_bucket(self, bucket: str) -> Dict[str, Any]:
        """Check that a bucket exists and is accessible."""
        client = self._require_client()
        return await client.head_bucket(Bucket=bucket)

    async def list_buckets(self) -> List[Dict[str, Any]]:
        """List the buckets owned by the caller."""
        client = self._require_client()
        response = await client.list_buckets()
        return response.get("Buckets", [])
