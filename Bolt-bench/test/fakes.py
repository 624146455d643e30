"""
In-memory storage system used by the tests in place of S3 and Bolt.
"""

import asyncio
import os
import sys
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, Optional

from botocore.exceptions import ClientError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from systems.base import ObjectResponse


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeBody:
    """Async readable body that records reads and closing."""

    def __init__(self, data: bytes, read_error: Optional[Exception] = None):
        self.data = data
        self.position = 0
        self.read_sizes = []
        self.read_error = read_error
        self.closed = False

    async def read(self, amt=None):
        self.read_sizes.append(amt)
        if self.read_error is not None:
            raise self.read_error
        if amt is None:
            amt = len(self.data) - self.position
        chunk = self.data[self.position:self.position + amt]
        self.position += len(chunk)
        return chunk

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True


class FakeStorageSystem:
    """Async object store keeping objects in insertion order.

    Args:
        name: Backend name used in report keys
        objects: Initial objects, key -> bytes
        encodings: Content-Encoding to report per key
        fail_calls: Operation -> 1-based call number that raises ClientError
        delay_seconds: Simulated latency per request
    """

    def __init__(self, name: str, objects: Optional[Dict[str, bytes]] = None,
                 encodings: Optional[Dict[str, str]] = None,
                 fail_calls: Optional[Dict[str, int]] = None,
                 delay_seconds: float = 0.0):
        self.name = name
        self.objects: Dict[str, bytes] = dict(objects or {})
        self.encodings = dict(encodings or {})
        self.fail_calls = dict(fail_calls or {})
        self.delay_seconds = delay_seconds
        self.read_errors: Dict[str, Exception] = {}
        self.calls = []
        self.call_counts = defaultdict(int)
        self.bodies = []
        self.entered = 0
        self.exited = 0

    async def __aenter__(self):
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.exited += 1

    async def _request(self, operation: str, key: Optional[str] = None):
        self.calls.append((operation, key))
        self.call_counts[operation] += 1
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_calls.get(operation) == self.call_counts[operation]:
            raise client_error("InternalError", operation)

    async def list_objects(self, bucket, max_keys=None):
        await self._request("list")
        items = [
            {
                "Key": key,
                "Size": len(data),
                "ETag": f'"{key}"',
                "StorageClass": "STANDARD",
                "LastModified": datetime(2024, 1, 1, tzinfo=timezone.utc),
            }
            for key, data in self.objects.items()
        ]
        limit = 1000 if max_keys is None else max_keys
        return items[:limit]

    async def put_object(self, bucket, key, body):
        await self._request("put", key)
        self.objects[key] = body
        return {"ETag": f'"{key}"', "ResponseMetadata": {"HTTPStatusCode": 200}}

    async def delete_object(self, bucket, key):
        await self._request("delete", key)
        self.objects.pop(key, None)
        return {"ResponseMetadata": {"HTTPStatusCode": 204}}

    async def get_object(self, bucket, key):
        await self._request("get", key)
        if key not in self.objects:
            raise client_error("NoSuchKey", "GetObject")
        data = self.objects[key]
        body = FakeBody(data, self.read_errors.get(key))
        self.bodies.append(body)
        return ObjectResponse(
            body=body,
            content_encoding=self.encodings.get(key),
            content_length=len(data),
        )

    async def head_object(self, bucket, key):
        await self._request("head", key)
        if key not in self.objects:
            raise client_error("404", "HeadObject")
        return {
            "ETag": f'"{key}"',
            "StorageClass": "STANDARD",
            "LastModified": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "ContentLength": len(self.objects[key]),
        }

    async def head_bucket(self, bucket):
        await self._request("head_bucket")
        return {
            "ResponseMetadata": {
                "HTTPStatusCode": 200,
                "HTTPHeaders": {"x-amz-bucket-region": "us-east-1"},
            }
        }

    async def list_buckets(self):
        await self._request("list_buckets")
        return [{"Name": "bench", "CreationDate": datetime(2024, 1, 1, tzinfo=timezone.utc)}]
