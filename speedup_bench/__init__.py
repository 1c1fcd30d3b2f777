# SPDX-License-Identifier: Apache-2.0
"""Sequential-vs-parallel benchmarking package."""

from .metrics import (
    BenchmarkRecord,
    ComparisonOutcome,
    time_call,
    compute_speedup,
    results_match,
    run_comparison,
    check_results,
)
from .report import ReportSink, PipeLogSink, MemorySink, format_record
from .benchmark_runner import BenchmarkRunner, load_config

__all__ = [
    'BenchmarkRecord',
    'ComparisonOutcome',
    'time_call',
    'compute_speedup',
    'results_match',
    'run_comparison',
    'check_results',
    'ReportSink',
    'PipeLogSink',
    'MemorySink',
    'format_record',
    'BenchmarkRunner',
    'load_config',
]
