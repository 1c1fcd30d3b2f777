#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""
Benchmark runner script that reads config.yaml and compares sequential and
threaded kernels.

Usage:
    python run_benchmarks.py                          # Dot product, sizes from config
    python run_benchmarks.py --kernel matmul          # Matrix multiplication
    python run_benchmarks.py --sizes 1000000,5000000  # Specific sizes
    python run_benchmarks.py --workers 1,2,4,8        # Specific worker counts
    python run_benchmarks.py --machine "Lab PC"       # Label written to the log
"""

import argparse
import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging for command-line runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(levelname)s - [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _int_list(value: str):
    return [int(s.strip()) for s in value.split(',') if s.strip()]


def main():
    parser = argparse.ArgumentParser(
        description='Compare sequential and threaded kernels based on configuration'
    )
    parser.add_argument(
        '--config', '-c',
        default='config.yaml',
        help='Path to configuration file'
    )
    parser.add_argument(
        '--kernel', '-k',
        choices=['dot', 'matmul'],
        default='dot',
        help='Kernel to benchmark (default: dot)'
    )
    parser.add_argument(
        '--sizes', '-s',
        type=_int_list,
        help='Comma-separated vector lengths (dot) or matrix dimensions (matmul)'
    )
    parser.add_argument(
        '--workers', '-w',
        type=_int_list,
        help='Comma-separated worker counts'
    )
    parser.add_argument(
        '--machine', '-m',
        help='Environment label written to the result log'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed for input generation'
    )
    parser.add_argument(
        '--log-file',
        help='Pipe-delimited result log to append to (default: from config)'
    )
    parser.add_argument(
        '--output-format', '-o',
        choices=['json', 'csv', 'both', 'none'],
        default='both',
        help='Export format for results'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit with an error as soon as parallel and sequential results differ'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        help='Logging level (DEBUG, INFO, WARNING, ...)'
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    # Import and run
    from parallel_kernels.errors import ParallelKernelError
    from speedup_bench.benchmark_runner import BenchmarkRunner
    from speedup_bench.report import PipeLogSink

    sinks = [PipeLogSink(args.log_file)] if args.log_file else None
    runner = BenchmarkRunner(args.config, kernel=args.kernel, sinks=sinks, machine=args.machine)

    try:
        results = runner.run(
            sizes=args.sizes,
            workers=args.workers,
            seed=args.seed,
            strict=args.strict
        )
    except ParallelKernelError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if not results:
        print("No benchmark results generated!")
        sys.exit(1)

    # Save results
    if args.output_format in ['json', 'both']:
        runner.save_json()
    if args.output_format in ['csv', 'both']:
        runner.save_csv()

    # Print summary
    runner.print_summary()

    if not all(r.results_match for r in results):
        print("Validation: ERROR (parallel results differ from sequential)", file=sys.stderr)
        sys.exit(1)
    print("Validation: OK (all results identical)")


if __name__ == '__main__':
    main()
