"""
Common utilities for the Bolt / S3 benchmark.
"""

from .metrics_utils import compute_perf_stats, summarize_samples
from .request import BenchmarkRequest

__all__ = ['BenchmarkRequest', 'compute_perf_stats', 'summarize_samples']
