# SPDX-License-Identifier: Apache-2.0
"""
Report sinks that receive one BenchmarkRecord per run.
"""

import logging
import os
from typing import List, Protocol

from .metrics import BenchmarkRecord

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
    """Anything that accepts finished benchmark records."""

    def write(self, record: BenchmarkRecord) -> bool:
        ...


def format_record(record: BenchmarkRecord) -> str:
    """
    Render a record as one pipe-delimited line.

    Matrix records print their dimensions as ``NxN``.
    """
    if record.label == 'matmul':
        size = f"Matrix: {record.input_size}x{record.input_size}"
    else:
        size = f"Size: {record.input_size}"
    status = "OK" if record.results_match else "MISMATCH"
    return (f"Machine: {record.machine} | {size} | Workers: {record.worker_count} | "
            f"T.Seq: {record.sequential_seconds:.4f}s | T.Par: {record.parallel_seconds:.4f}s | "
            f"Sp: {record.speedup:.2f} | Check: {status}")


class PipeLogSink:
    """Appends one pipe-delimited line per record to a text file."""

    def __init__(self, path: str):
        self.path = path

    def write(self, record: BenchmarkRecord) -> bool:
        """
        Append ``record`` to the log file.

        A failed write is logged and reported to the console; the run goes on.

        Returns:
            True if the line was written, False otherwise
        """
        directory = os.path.dirname(self.path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, 'a') as f:
                f.write(format_record(record) + "\n")
        except OSError as e:
            logger.error("Failed to append to %s: %s", self.path, e)
            print(f"Error saving result log {self.path}: {e}")
            return False
        return True


class MemorySink:
    """Keeps records in a list."""

    def __init__(self):
        self.records: List[BenchmarkRecord] = []

    def write(self, record: BenchmarkRecord) -> bool:
        self.records.append(record)
        return True
