# SPDX-License-Identifier: Apache-2.0
"""
Single-threaded dot product, the baseline for speedup measurements.
"""

import numpy as np
from typing import Optional, Dict, Any

from ..validation import as_vector_pair


def sequential_dot(a, b) -> int:
    """
    Dot product of two equal-length integer vectors in one pass.

    Accumulates in int64; overflow wraps silently like any fixed-width
    integer sum.
    """
    a, b = as_vector_pair(a, b)
    return int(np.dot(a, b))


class SequentialDot:
    """Dot product computed on the calling thread."""

    name = "sequential"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def __call__(self, a, b, workers: Optional[int] = None) -> int:
        """
        Compute ``a . b``.

        Args:
            a: First vector
            b: Second vector
            workers: Ignored, accepted so every backend shares one signature
        """
        return sequential_dot(a, b)

    @staticmethod
    def create_inputs(size: int, seed: Optional[int] = None, max_value: int = 100):
        """
        Create a pair of random vectors with values in ``[0, max_value)``.

        Returns:
            Tuple of (a, b) int64 arrays
        """
        rng = np.random.default_rng(seed)
        a = rng.integers(0, max_value, size=size, dtype=np.int64)
        b = rng.integers(0, max_value, size=size, dtype=np.int64)
        return a, b

    @staticmethod
    def reference(a, b) -> int:
        """Textbook loop with unbounded Python integers."""
        total = 0
        for x, y in zip(a, b):
            total += int(x) * int(y)
        return total
