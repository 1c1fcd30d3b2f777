# SPDX-License-Identifier: Apache-2.0
"""
Dot product kernels: a sequential baseline and a thread-parallel version.
"""

from .sequential_dot import SequentialDot, sequential_dot
from .threaded_dot import ThreadedDot, parallel_dot

__all__ = ['SequentialDot', 'ThreadedDot', 'sequential_dot', 'parallel_dot',
           'get_backend', 'BACKENDS']

BACKENDS = {
    'sequential': SequentialDot,
    'threaded': ThreadedDot,
}


def get_backend(name: str):
    """Get a kernel backend by name."""
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend: {name}. Available: {list(BACKENDS.keys())}")
    return BACKENDS[name]
