# SPDX-License-Identifier: Apache-2.0
"""Exception types raised by the parallel kernels and the benchmark harness."""

from typing import Optional


class ParallelKernelError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgument(ParallelKernelError, ValueError):
    """Malformed dimensions, dtypes or worker counts.

    Always raised before any worker thread is started.
    """


class ComputationMismatch(ParallelKernelError, AssertionError):
    """Sequential and parallel results disagree.

    Indicates a bug in partitioning or aggregation, never a transient failure.
    """


class ExecutionInterrupted(ParallelKernelError, RuntimeError):
    """A worker thread terminated with an exception before finishing its range."""

    def __init__(self, message: str, worker_index: Optional[int] = None, work_range=None):
        super().__init__(message)
        self.worker_index = worker_index
        self.work_range = work_range
