"""
Object content helpers: compression classification and content digests.
"""

import gzip
import hashlib
from typing import Optional

from configuration import COMPRESSED_SUFFIXES, GZIP_ENCODING


def is_compressed(key: str, content_encoding: Optional[str]) -> bool:
    """True if the response is gzip-encoded or the key names a compressed file."""
    return content_encoding == GZIP_ENCODING or key.endswith(COMPRESSED_SUFFIXES)


def content_md5(data: bytes, compressed: bool = False) -> str:
    """Upper-case hex MD5 of the object content, gunzipping compressed payloads first."""
    if compressed:
        data = gzip.decompress(data)
    return hashlib.md5(data).hexdigest().upper()
