# SPDX-License-Identifier: Apache-2.0
"""
Thread-parallel square matrix multiplication.

Rows of the output are partitioned into contiguous blocks, one thread per
block. Each thread computes ``A[rows] @ B`` straight into its own rows of
``C``; no two threads address the same cell, so there is no lock and no
merge step.
"""

import logging
import numpy as np
from typing import Optional, Dict, Any

from ..partition import Range, partition
from ..validation import as_square_pair, check_workers, configured_workers
from ..workers import run_workers
from .sequential_matmul import SequentialMatmul

logger = logging.getLogger(__name__)


def parallel_matmul(A, B, workers: int) -> np.ndarray:
    """
    Compute ``C = A @ B`` for N x N integer matrices using ``workers`` threads.

    Args:
        A: Left matrix (N x N)
        B: Right matrix (N x N)
        workers: Number of threads (one per row block)

    Returns:
        N x N int64 matrix

    Raises:
        InvalidArgument: On non-square or mismatched matrices, non-integer
            data or a non-positive worker count
        ExecutionInterrupted: If a worker thread fails
    """
    A, B = as_square_pair(A, B)
    workers = check_workers(workers)
    n = A.shape[0]
    ranges = partition(n, workers)
    logger.debug("parallel_matmul: n=%d workers=%d", n, workers)

    # Every row is covered by exactly one range, so C is fully written
    C = np.empty((n, n), dtype=np.int64)

    def _row_block(index: int, work_range: Range) -> None:
        rows = work_range.indices
        np.matmul(A[rows], B, out=C[rows])

    run_workers(ranges, _row_block)
    return C


class ThreadedMatmul:
    """Matrix multiplication split by output rows across threads."""

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

    def __call__(self, A, B, workers: Optional[int] = None) -> np.ndarray:
        return parallel_matmul(A, B, workers if workers is not None else self.workers)

    create_inputs = staticmethod(SequentialMatmul.create_inputs)
    reference = staticmethod(SequentialMatmul.reference)
