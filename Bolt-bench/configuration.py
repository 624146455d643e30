"""
Configuration constants for the Bolt / S3 comparative benchmark.

This module contains all configuration parameters including:
- Cloud credentials and endpoints for the baseline store and the proxy
- Workload defaults (key counts, payload length, list iterations)
- Client parameters (timeouts, transport retries)
- Object classification constants
"""

import os
from typing import Tuple

# =============================================================================
# CLOUD STORAGE CONFIGURATION
# =============================================================================

# AWS S3 (baseline) credentials and configuration
S3_ENDPOINT: str = os.getenv("S3_ENDPOINT", "")
AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")

# Bolt (proxy) credentials and configuration
# Bolt authenticates with the same IAM identity as S3 unless overridden
BOLT_ENDPOINT: str = os.getenv("BOLT_ENDPOINT", "")
BOLT_ACCESS_KEY_ID: str = os.getenv("BOLT_ACCESS_KEY_ID", AWS_ACCESS_KEY_ID)
BOLT_SECRET_ACCESS_KEY: str = os.getenv("BOLT_SECRET_ACCESS_KEY", AWS_SECRET_ACCESS_KEY)

# Backend names, used as prefixes of the report statistic names
BASELINE_NAME: str = "s3"
PROXY_NAME: str = "bolt"

# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================

CONNECT_TIMEOUT_SECONDS: int = 5
READ_TIMEOUT_SECONDS: int = 60
MAX_RETRIES: int = 3  # botocore transport retries, the engine itself never retries
MAX_POOL_CONNECTIONS: int = 10

# =============================================================================
# WORKLOAD PARAMETERS
# =============================================================================

DEFAULT_REQUEST_TYPE: str = "ALL"
DEFAULT_NUM_KEYS: int = 1000
MAX_NUM_KEYS: int = 1000  # ListObjectsV2 page size
DEFAULT_OBJ_LENGTH: int = 100
DEFAULT_LIST_ITERATIONS: int = 10
KEY_PREFIX: str = "bolt-s3-perf"

# =============================================================================
# OBJECT CLASSIFICATION
# =============================================================================

GZIP_ENCODING: str = "gzip"
COMPRESSED_SUFFIXES: Tuple[str, ...] = (".gz",)
READ_CHUNK_SIZE: int = 4096

# =============================================================================
# AUTO-HEAL PROBE
# =============================================================================

AUTO_HEAL_RETRY_DELAY_SECONDS: float = float(os.getenv("AUTO_HEAL_RETRY_DELAY_SECONDS", "0"))

# =============================================================================
# METRICS EXPORT
# =============================================================================

DEFAULT_PROMETHEUS_PORT: int = 0  # 0 = exporter disabled

# =============================================================================
# TIME CONSTANTS
# =============================================================================

MS_PER_SECOND: int = 1000
