"""
Perf request model: parsing, defaulting and validation of an incoming event.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from configuration import (
    DEFAULT_LIST_ITERATIONS,
    DEFAULT_NUM_KEYS,
    DEFAULT_OBJ_LENGTH,
    DEFAULT_REQUEST_TYPE,
    MAX_NUM_KEYS,
)

LIST_OBJECTS_V2 = "LIST_OBJECTS_V2"
PUT_OBJECT = "PUT_OBJECT"
DELETE_OBJECT = "DELETE_OBJECT"
GET_OBJECT = "GET_OBJECT"
GET_OBJECT_TTFB = "GET_OBJECT_TTFB"
GET_OBJECT_PASSTHROUGH = "GET_OBJECT_PASSTHROUGH"
GET_OBJECT_PASSTHROUGH_TTFB = "GET_OBJECT_PASSTHROUGH_TTFB"
ALL = "ALL"

REQUEST_TYPES = (
    LIST_OBJECTS_V2,
    PUT_OBJECT,
    DELETE_OBJECT,
    GET_OBJECT,
    GET_OBJECT_TTFB,
    GET_OBJECT_PASSTHROUGH,
    GET_OBJECT_PASSTHROUGH_TTFB,
    ALL,
)

# Request types whose working set is generated rather than discovered
GENERATED_KEY_TYPES = (PUT_OBJECT, DELETE_OBJECT, ALL)
DISCOVERED_KEY_TYPES = (
    GET_OBJECT,
    GET_OBJECT_TTFB,
    GET_OBJECT_PASSTHROUGH,
    GET_OBJECT_PASSTHROUGH_TTFB,
)
TTFB_TYPES = (GET_OBJECT_TTFB, GET_OBJECT_PASSTHROUGH_TTFB)


def _parse_count(event: Dict[str, Any], field: str, default: int) -> int:
    raw = event.get(field)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{field} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class BenchmarkRequest:
    """Immutable configuration of one benchmark run."""

    request_type: str
    bucket: str
    num_keys: int = DEFAULT_NUM_KEYS
    obj_length: int = DEFAULT_OBJ_LENGTH
    num_iter: int = DEFAULT_LIST_ITERATIONS

    @classmethod
    def from_event(cls, event: Optional[Dict[str, Any]]) -> "BenchmarkRequest":
        """Build a request from an invocation event.

        Accepts the event fields requestType, bucket, numKeys, objLength and
        numIter; numeric fields may be strings or ints.

        Raises:
            ValueError: If a numeric field is not a non-negative integer
        """
        event = event or {}

        request_type = (event.get("requestType") or DEFAULT_REQUEST_TYPE).upper()

        num_keys = min(_parse_count(event, "numKeys", DEFAULT_NUM_KEYS), MAX_NUM_KEYS)
        obj_length = _parse_count(event, "objLength", DEFAULT_OBJ_LENGTH)
        num_iter = _parse_count(event, "numIter", DEFAULT_LIST_ITERATIONS)

        return cls(
            request_type=request_type,
            bucket=event.get("bucket") or "",
            num_keys=num_keys,
            obj_length=obj_length,
            num_iter=num_iter,
        )

    @property
    def is_known(self) -> bool:
        return self.request_type in REQUEST_TYPES

    @property
    def ttfb(self) -> bool:
        return self.request_type in TTFB_TYPES
