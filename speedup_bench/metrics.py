# SPDX-License-Identifier: Apache-2.0
"""
Metrics for sequential-vs-parallel comparisons.
Includes wall-clock timing, speedup and result validation.
"""

import logging
import math
import time
from datetime import datetime
from typing import Callable, Dict, Any, Sequence, Tuple
from dataclasses import dataclass, field

import numpy as np

from parallel_kernels.errors import ComputationMismatch, InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkRecord:
    """One sequential-vs-parallel run, handed to a report sink."""
    label: str
    input_size: int
    worker_count: int
    sequential_seconds: float
    parallel_seconds: float
    speedup: float
    results_match: bool = True
    machine: str = "unknown"
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat(timespec='seconds'))

    def to_dict(self, json_safe: bool = False) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Args:
            json_safe: Replace a non-finite speedup with None so the result
                serializes as strict JSON
        """
        speedup = self.speedup
        if json_safe and not math.isfinite(speedup):
            speedup = None
        return {
            'label': self.label,
            'input_size': self.input_size,
            'worker_count': self.worker_count,
            'sequential_seconds': self.sequential_seconds,
            'parallel_seconds': self.parallel_seconds,
            'speedup': speedup,
            'results_match': self.results_match,
            'machine': self.machine,
            'timestamp': self.timestamp,
        }


@dataclass(frozen=True)
class ComparisonOutcome:
    """Results of both paths together with the timing record."""
    sequential_result: Any
    parallel_result: Any
    record: BenchmarkRecord


def time_call(fn: Callable, *args, **kwargs) -> Tuple[Any, float]:
    """
    Call ``fn`` once and measure its wall-clock duration.

    Returns:
        Tuple of (result, elapsed_seconds)
    """
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    elapsed = time.perf_counter() - start
    return result, elapsed


def compute_speedup(sequential_seconds: float, parallel_seconds: float) -> float:
    """
    Speedup = sequential time / parallel time.

    Returns ``inf`` when the parallel time is zero (timer resolution on a
    tiny input), so callers never divide by zero.
    """
    if sequential_seconds < 0 or parallel_seconds < 0:
        raise InvalidArgument(
            f"durations must be non-negative, got {sequential_seconds} and {parallel_seconds}"
        )
    if parallel_seconds == 0:
        return math.inf
    return sequential_seconds / parallel_seconds


def results_match(expected, actual) -> bool:
    """
    Compare a sequential and a parallel result.

    Scalars are compared as integers. Arrays must have the same shape and
    every cell must be equal.
    """
    if np.ndim(expected) == 0 and np.ndim(actual) == 0:
        return int(expected) == int(actual)
    expected = np.asarray(expected)
    actual = np.asarray(actual)
    if expected.shape != actual.shape:
        return False
    return bool(np.array_equal(expected, actual))


def input_extent(inputs: Sequence) -> int:
    """Size reported in records: vector length or matrix dimension N."""
    return int(np.shape(inputs[0])[0]) if len(inputs) else 0


def run_comparison(
    label: str,
    sequential_fn: Callable,
    parallel_fn: Callable,
    inputs: Sequence,
    workers: int,
    machine: str = "unknown",
) -> ComparisonOutcome:
    """
    Time the sequential baseline, then the parallel kernel, and compare them.

    Args:
        label: Kernel label stored in the record ('dot', 'matmul', ...)
        sequential_fn: Baseline, called as ``sequential_fn(*inputs)``
        parallel_fn: Parallel kernel, called as ``parallel_fn(*inputs, workers)``
        inputs: Input operands shared by both paths
        workers: Worker count for the parallel run
        machine: Environment label stored in the record

    Returns:
        ComparisonOutcome with both results and the BenchmarkRecord
    """
    seq_result, seq_seconds = time_call(sequential_fn, *inputs)
    par_result, par_seconds = time_call(parallel_fn, *inputs, workers)

    match = results_match(seq_result, par_result)
    if not match:
        logger.warning("%s: sequential and parallel results differ (workers=%d)", label, workers)

    record = BenchmarkRecord(
        label=label,
        input_size=input_extent(inputs),
        worker_count=workers,
        sequential_seconds=seq_seconds,
        parallel_seconds=par_seconds,
        speedup=compute_speedup(seq_seconds, par_seconds),
        results_match=match,
        machine=machine,
    )
    return ComparisonOutcome(seq_result, par_result, record)


def check_results(outcome: ComparisonOutcome) -> ComparisonOutcome:
    """
    Raise if the two paths disagreed.

    Raises:
        ComputationMismatch: If ``outcome.record.results_match`` is False
    """
    if not outcome.record.results_match:
        r = outcome.record
        raise ComputationMismatch(
            f"{r.label}: parallel result differs from sequential "
            f"(size={r.input_size}, workers={r.worker_count})"
        )
    return outcome


def get_dot_metrics(size: int) -> Dict[str, int]:
    """
    Operation count for a dot product of two length-``size`` vectors.

    Returns:
        Dict with 'ops' (one multiply and one add per element) and 'bytes'
        (both int64 inputs read once)
    """
    return {'ops': 2 * size, 'bytes': 2 * size * 8}


def get_matmul_metrics(n: int) -> Dict[str, int]:
    """
    Operation count for an N x N matrix product.

    Returns:
        Dict with 'ops' (2*N^3 multiply-adds) and 'bytes' (read A and B,
        write C, int64)
    """
    return {'ops': 2 * n ** 3, 'bytes': 3 * n * n * 8}


def compute_gops(ops: int, seconds: float) -> float:
    """Throughput in giga-operations per second; 0.0 for a zero duration."""
    if seconds <= 0:
        return 0.0
    return ops / seconds / 1e9
