# SPDX-License-Identifier: Apache-2.0
"""
Square matrix multiplication kernels: sequential baseline and row-parallel version.
"""

from .sequential_matmul import SequentialMatmul, sequential_matmul, classic_matmul
from .threaded_matmul import ThreadedMatmul, parallel_matmul

__all__ = ['SequentialMatmul', 'ThreadedMatmul', 'sequential_matmul',
           'parallel_matmul', 'classic_matmul', 'get_backend', 'BACKENDS']

BACKENDS = {
    'sequential': SequentialMatmul,
    'threaded': ThreadedMatmul,
}


def get_backend(name: str):
    """Get a kernel backend by name."""
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend: {name}. Available: {list(BACKENDS.keys())}")
    return BACKENDS[name]
