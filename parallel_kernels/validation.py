# SPDX-License-Identifier: Apache-2.0
"""Input coercion and shape checks shared by the kernels."""

import os

import numpy as np

from .errors import InvalidArgument


def _as_int64(data, name: str) -> np.ndarray:
    try:
        arr = np.asarray(data)
    except ValueError as e:
        raise InvalidArgument(f"{name} is not a rectangular array: {e}") from e
    # An empty list comes back as float64; it carries no values to lose
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise InvalidArgument(f"{name} must contain integers, got dtype {arr.dtype}")
    return arr.astype(np.int64, copy=False)


def check_workers(workers) -> int:
    """Validate a worker count and return it."""
    if isinstance(workers, bool) or not isinstance(workers, (int, np.integer)):
        raise InvalidArgument(f"workers must be an integer, got {type(workers).__name__}")
    if workers <= 0:
        raise InvalidArgument(f"workers must be positive, got {workers}")
    return int(workers)


def as_vector_pair(a, b):
    """
    Coerce two vectors to 1-D int64 arrays of equal length.

    Raises:
        InvalidArgument: On non-integer data, wrong rank or length mismatch
    """
    a = _as_int64(a, 'a')
    b = _as_int64(b, 'b')
    if a.ndim != 1 or b.ndim != 1:
        raise InvalidArgument(f"vectors must be 1-D, got shapes {a.shape} and {b.shape}")
    if a.shape[0] != b.shape[0]:
        raise InvalidArgument(f"vector lengths differ: {a.shape[0]} != {b.shape[0]}")
    return a, b


def as_square_pair(A, B):
    """
    Coerce two matrices to N x N int64 arrays with the same N.

    Raises:
        InvalidArgument: On non-integer data, non-square or mismatched matrices
    """
    A = _as_int64(A, 'A')
    B = _as_int64(B, 'B')
    for name, m in (('A', A), ('B', B)):
        if m.ndim != 2 or m.shape[0] != m.shape[1]:
            raise InvalidArgument(f"{name} must be a square matrix, got shape {m.shape}")
    if A.shape != B.shape:
        raise InvalidArgument(f"matrix sizes differ: {A.shape} != {B.shape}")
    return A, B


def configured_workers(config) -> int:
    """
    Default worker count from ``parallel.workers`` in config.

    Falls back to the CPU count only when the key is absent or null; any
    other value goes through ``check_workers``.
    """
    workers = (config.get('parallel') or {}).get('workers')
    if workers is None:
        return os.cpu_count() or 1
    return check_workers(workers)
