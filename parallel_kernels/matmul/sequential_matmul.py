# SPDX-License-Identifier: Apache-2.0
"""
Single-threaded square matrix multiplication.
"""

import numpy as np
from typing import Optional, Dict, Any

from ..validation import as_square_pair


def sequential_matmul(A, B) -> np.ndarray:
    """Compute ``C = A @ B`` for N x N integer matrices on the calling thread."""
    A, B = as_square_pair(A, B)
    return np.matmul(A, B)


def classic_matmul(A, B) -> np.ndarray:
    """
    Triple-loop product ``C[i][j] = sum_k A[i][k] * B[k][j]``.

    Pure Python, so only practical for small N. Used as the textbook
    reference when checking the other kernels.
    """
    A, B = as_square_pair(A, B)
    n = A.shape[0]
    a = A.tolist()
    b = B.tolist()
    c = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            total = 0
            for k in range(n):
                total += a[i][k] * b[k][j]
            c[i][j] = total
    return np.array(c, dtype=np.int64).reshape(n, n)


class SequentialMatmul:
    """Matrix multiplication computed on the calling thread."""

    name = "sequential"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def __call__(self, A, B, workers: Optional[int] = None) -> np.ndarray:
        return sequential_matmul(A, B)

    @staticmethod
    def create_inputs(n: int, seed: Optional[int] = None, max_value: int = 10):
        """
        Create a pair of random N x N matrices with values in ``[0, max_value)``.

        Returns:
            Tuple of (A, B) int64 arrays
        """
        rng = np.random.default_rng(seed)
        A = rng.integers(0, max_value, size=(n, n), dtype=np.int64)
        B = rng.integers(0, max_value, size=(n, n), dtype=np.int64)
        return A, B

    @staticmethod
    def reference(A, B) -> np.ndarray:
        """Reference implementation."""
        return classic_matmul(A, B)
