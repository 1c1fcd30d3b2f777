# SPDX-License-Identifier: Apache-2.0
"""
Contiguous range partitioning.

The extent is cut into ``workers`` blocks of ``extent // workers`` elements;
the last block absorbs the remainder (``extent % workers``). This is
load-imbalancing when the remainder is large relative to the block size, and
is kept that way so timings stay comparable with the reference programs.
"""

from dataclasses import dataclass
from typing import List

from .errors import InvalidArgument


@dataclass(frozen=True)
class Range:
    """Half-open index interval ``[start, end)`` owned by one worker."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def indices(self) -> slice:
        """Slice selecting this range from a sequence."""
        return slice(self.start, self.end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __str__(self) -> str:
        return f"[{self.start},{self.end})"


def _check_int(name: str, value) -> None:
    # bool is an int subclass, but True workers is almost always a bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")


def partition(extent: int, workers: int) -> List[Range]:
    """
    Split ``[0, extent)`` into ``workers`` contiguous ranges.

    Args:
        extent: Total number of elements (vector length or row count)
        workers: Number of ranges to produce

    Returns:
        Exactly ``workers`` ranges ordered by start. When ``workers > extent``
        the leading ranges are empty; when ``extent == 0`` all of them are.

    Raises:
        InvalidArgument: If ``workers <= 0`` or ``extent < 0``
    """
    _check_int('extent', extent)
    _check_int('workers', workers)
    if workers <= 0:
        raise InvalidArgument(f"workers must be positive, got {workers}")
    if extent < 0:
        raise InvalidArgument(f"extent must be non-negative, got {extent}")

    block_size = extent // workers
    ranges = []
    for i in range(workers):
        start = i * block_size
        end = extent if i == workers - 1 else (i + 1) * block_size
        ranges.append(Range(start, end))
    return ranges
