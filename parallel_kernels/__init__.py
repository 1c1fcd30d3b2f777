# SPDX-License-Identifier: Apache-2.0
"""
Chunked thread-parallel integer kernels.

Vectors and matrices are split into contiguous ranges, one thread per range,
joined at a barrier and then reduced.
"""

from .errors import (
    ParallelKernelError,
    InvalidArgument,
    ComputationMismatch,
    ExecutionInterrupted,
)
from .partition import Range, partition
from .workers import run_workers
from .dot import sequential_dot, parallel_dot
from .matmul import sequential_matmul, parallel_matmul, classic_matmul

__all__ = [
    'ParallelKernelError',
    'InvalidArgument',
    'ComputationMismatch',
    'ExecutionInterrupted',
    'Range',
    'partition',
    'run_workers',
    'sequential_dot',
    'parallel_dot',
    'sequential_matmul',
    'parallel_matmul',
    'classic_matmul',
]
