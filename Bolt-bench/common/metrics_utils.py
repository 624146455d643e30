"""
Shared utilities for benchmark metrics calculations: averages, rank percentiles and throughput.
"""

import logging
import math
from typing import Any, Dict, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

P50_RANK: float = 0.5
P90_RANK: float = 0.9


def perf_stat_name(backend: str, operation: str) -> str:
    """Report key of a statistic block, e.g. ``s3_get_obj_ttfb_perf_stats``."""
    return f"{backend}_{operation}_perf_stats"


def count_stat_name(backend: str) -> str:
    """Report key of an object-composition count block, e.g. ``boltCount``."""
    return f"{backend}Count"


def rank_index(count: int, rank: float) -> int:
    """
    Index of a rank statistic in a sorted sequence of ``count`` samples.

    Plain truncation, no interpolation: p50 -> floor(n/2), p90 -> floor(0.9n).
    For n >= 1 the result is always <= n - 1.
    """
    if count <= 0:
        raise ValueError("rank index of an empty sequence is undefined")
    return int(count * rank)


def summarize_samples(samples: Sequence[float]) -> Dict[str, Any]:
    """
    Summarise one series of samples into average, p50 and p90.

    The average is taken over the samples as collected; the percentiles are
    index lookups on a stable ascending sort of the same samples.

    Args:
        samples: Samples in collection order

    Returns:
        Dictionary with average (float), p50 and p90 (sample values)

    Raises:
        ValueError: If samples is empty
    """
    if len(samples) == 0:
        raise ValueError("cannot summarise an empty sample series")

    series = pd.Series(list(samples))
    count = len(series)
    average = float(series.sum()) / count

    ordered = series.sort_values(kind="stable", ignore_index=True)

    return {
        'average': average,
        'p50': ordered.iloc[rank_index(count, P50_RANK)].item(),
        'p90': ordered.iloc[rank_index(count, P90_RANK)].item(),
    }


def safe_ratio(numerator: float, denominator: float) -> float:
    """
    Divide, mapping a zero denominator to infinity (or zero for 0/0).

    Millisecond timers truncate, so fast local calls can legitimately report 0 ms.
    """
    if denominator == 0:
        return math.inf if numerator else 0.0
    return numerator / denominator


def calculate_fallback_throughput(latencies_ms: Sequence[int]) -> float:
    """
    Aggregate rate in objects/ms when no per-operation throughput was sampled.

    This is count / sum(latencies), a ratio of sums rather than a mean of
    per-operation rates.
    """
    return safe_ratio(len(latencies_ms), sum(latencies_ms))


def format_stat(stats: Dict[str, Any], unit: str, integral: bool) -> Dict[str, str]:
    """Render an {average, p50, p90} block with its unit suffix."""
    if integral:
        p50 = f"{int(stats['p50'])} {unit}"
        p90 = f"{int(stats['p90'])} {unit}"
    else:
        p50 = f"{stats['p50']:.2f} {unit}"
        p90 = f"{stats['p90']:.2f} {unit}"
    return {
        'average': f"{stats['average']:.2f} {unit}",
        'p50': p50,
        'p90': p90,
    }


def compute_perf_stats(
    latencies_ms: Sequence[int],
    throughputs: Optional[Sequence[float]] = None,
    sizes: Optional[Sequence[int]] = None,
) -> Dict[str, Any]:
    """
    Compute the formatted statistic block for one (backend, operation) series.

    Args:
        latencies_ms: Per-operation latencies in milliseconds (required, non-empty)
        throughputs: Per-operation throughput samples in objects/ms (list operations)
        sizes: Per-object content lengths in bytes (get operations)

    Returns:
        Dictionary with 'latency', 'throughput' or 'throughputT', and
        optionally 'objectSize'

    Raises:
        ValueError: If latencies_ms is empty
    """
    perf_stats: Dict[str, Any] = {
        'latency': format_stat(summarize_samples(latencies_ms), "ms", integral=True),
    }

    if throughputs:
        perf_stats['throughput'] = format_stat(
            summarize_samples(throughputs), "objects/ms", integral=False
        )
    elif throughputs is None:
        perf_stats['throughputT'] = f"{calculate_fallback_throughput(latencies_ms):.2f} objects/ms"

    if sizes:
        perf_stats['objectSize'] = format_stat(summarize_samples(sizes), "bytes", integral=True)

    return perf_stats
