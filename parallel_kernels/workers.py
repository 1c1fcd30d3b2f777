# SPDX-License-Identifier: Apache-2.0
"""
Thread-per-range execution with a full barrier.

Each call spawns one fresh ``threading.Thread`` per range; nothing is pooled
or reused between calls. The caller only regains control once every thread
has terminated, so no partial result is observable before the barrier.
"""

import logging
import threading
from typing import Callable, List, Optional, Sequence

from .errors import ExecutionInterrupted
from .partition import Range

logger = logging.getLogger(__name__)


class _Worker(threading.Thread):
    """Runs ``fn(index, work_range)`` and records how it terminated."""

    def __init__(self, index: int, work_range: Range, fn: Callable[[int, Range], None]):
        super().__init__(name=f"worker-{index}", daemon=True)
        self.index = index
        self.work_range = work_range
        self._fn = fn
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        try:
            self._fn(self.index, self.work_range)
        except BaseException as e:  # re-raised by run_workers after the barrier
            self.error = e


def run_workers(ranges: Sequence[Range], fn: Callable[[int, Range], None]) -> None:
    """
    Run ``fn`` once per range, each on its own thread, and wait for all of them.

    Args:
        ranges: Work ranges, typically from ``partition``
        fn: Callable receiving ``(worker_index, range)``. It must only write
            to memory owned by its range.

    Raises:
        ExecutionInterrupted: If any worker raised. Raised after every thread
            has been joined, chained to the first failure in worker order.
    """
    workers: List[_Worker] = [_Worker(i, r, fn) for i, r in enumerate(ranges)]

    for w in workers:
        w.start()
    logger.debug("Started %d workers: %s", len(workers),
                 ", ".join(str(w.work_range) for w in workers))

    # Barrier
    for w in workers:
        w.join()
    logger.debug("Joined %d workers", len(workers))

    for w in workers:
        if w.error is not None:
            raise ExecutionInterrupted(
                f"worker {w.index} on range {w.work_range} terminated: {w.error!r}",
                worker_index=w.index,
                work_range=w.work_range,
            ) from w.error
