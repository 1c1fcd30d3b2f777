# SPDX-License-Identifier: Apache-2.0
"""
Thread-parallel dot product.

The vectors are split into contiguous ranges, one thread per range. Each
thread writes its partial sum into its own slot of a per-call array, so the
loop needs no locking. Partials are summed in worker order after all threads
have joined.
"""

import logging
import numpy as np
from typing import Optional, Dict, Any

from ..partition import Range, partition
from ..validation import as_vector_pair, check_workers, configured_workers
from ..workers import run_workers
from .sequential_dot import SequentialDot

logger = logging.getLogger(__name__)


def parallel_dot(a, b, workers: int) -> int:
    """
    Dot product of two equal-length integer vectors using ``workers`` threads.

    Args:
        a: First vector
        b: Second vector
        workers: Number of threads (one per range)

    Returns:
        The int64 dot product as a Python int. Overflow wraps exactly as in
        ``sequential_dot``.

    Raises:
        InvalidArgument: On mismatched lengths, non-integer data or a
            non-positive worker count
        ExecutionInterrupted: If a worker thread fails
    """
    a, b = as_vector_pair(a, b)
    workers = check_workers(workers)
    ranges = partition(a.shape[0], workers)
    logger.debug("parallel_dot: length=%d workers=%d", a.shape[0], workers)

    partials = np.zeros(workers, dtype=np.int64)

    def _partial_dot(index: int, work_range: Range) -> None:
        partials[index] = np.dot(a[work_range.indices], b[work_range.indices])

    run_workers(ranges, _partial_dot)

    return int(partials.sum(dtype=np.int64))


class ThreadedDot:
    """Dot product split across a fixed number of threads."""

    name = "threaded"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the threaded kernel.

        Args:
            config: Configuration dict; ``parallel.workers`` sets the default
                worker count (falls back to the CPU count)

        Raises:
            InvalidArgument: If the configured worker count is invalid
        """
        self.config = config or {}
        self.workers = configured_workers(self.config)

    def __call__(self, a, b, workers: Optional[int] = None) -> int:
        return parallel_dot(a, b, workers if workers is not None else self.workers)

    create_inputs = staticmethod(SequentialDot.create_inputs)
    reference = staticmethod(SequentialDot.reference)
