# SPDX-License-Identifier: Apache-2.0
"""
Benchmark runner that loads config and compares sequential and threaded kernels.
"""

import os
import json
import csv
import logging
import platform
import yaml
from typing import Dict, List, Any, Optional
from datetime import datetime

from .metrics import (
    BenchmarkRecord,
    run_comparison,
    check_results,
    compute_gops,
    get_dot_metrics,
    get_matmul_metrics,
)
from .report import ReportSink, PipeLogSink

logger = logging.getLogger(__name__)

KERNELS = ('dot', 'matmul')

_DEFAULTS = {
    'dot': {'sizes': [1_000_000], 'workers': [1, 2, 4], 'max_value': 100,
            'log_file': 'dot_product_results.txt'},
    'matmul': {'sizes': [256], 'workers': [1, 2, 4], 'max_value': 10,
               'log_file': 'matmul_results.txt'},
}


def load_config(config_path: str) -> Dict[str, Any]:
    """Load a YAML configuration file; an empty file yields an empty dict."""
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class BenchmarkRunner:
    """Run sequential-vs-parallel comparisons based on configuration."""

    def __init__(
        self,
        config_path: str = 'config.yaml',
        kernel: str = 'dot',
        config: Optional[Dict[str, Any]] = None,
        sinks: Optional[List[ReportSink]] = None,
        machine: Optional[str] = None,
    ):
        """
        Initialize benchmark runner.

        Args:
            config_path: Path to configuration file (ignored if ``config`` is given)
            kernel: Kernel name ('dot' or 'matmul')
            config: Already-loaded configuration dict
            sinks: Report sinks; defaults to the kernel's pipe-delimited log file
            machine: Environment label; overrides ``machine`` from config
        """
        if kernel not in KERNELS:
            raise ValueError(f"Unknown kernel: {kernel}. Available: {list(KERNELS)}")

        self.config = config if config is not None else load_config(config_path)
        self.kernel = kernel
        self.output_dir = self.config.get('output_dir', 'outputs')
        self.machine = machine or self.config.get('machine') or platform.node() or 'unknown'

        if sinks is None:
            log_file = self.get_benchmark_config().get('log_file', _DEFAULTS[kernel]['log_file'])
            sinks = [PipeLogSink(os.path.join(self.config.get('log_dir', self.output_dir), log_file))]
        self.sinks = sinks

        self.results: List[BenchmarkRecord] = []

    def get_benchmark_config(self) -> Dict[str, Any]:
        """Get benchmark config based on kernel type."""
        return self.config.get(f'benchmarks_{self.kernel}', {})

    def is_enabled(self) -> bool:
        return self.get_benchmark_config().get('enabled', True)

    def _setting(self, key: str):
        return self.get_benchmark_config().get(key, _DEFAULTS[self.kernel].get(key))

    def get_sizes(self) -> List[int]:
        """Vector lengths for 'dot', matrix dimensions N for 'matmul'."""
        return list(self._setting('sizes'))

    def get_worker_counts(self) -> List[int]:
        return list(self._setting('workers'))

    def _kernel_module(self):
        if self.kernel == 'matmul':
            from parallel_kernels import matmul as module
        else:
            from parallel_kernels import dot as module
        return module

    def _create_kernels(self):
        """Create (sequential, threaded) kernel instances."""
        module = self._kernel_module()
        sequential = module.get_backend('sequential')(self.config)
        threaded = module.get_backend('threaded')(self.config)
        return sequential, threaded

    def create_inputs(self, size: int, seed: Optional[int] = None):
        """Generate random operands for one size."""
        sequential, _ = self._create_kernels()
        max_value = self._setting('max_value')
        return sequential.create_inputs(size, seed=seed, max_value=max_value)

    def run(
        self,
        sizes: Optional[List[int]] = None,
        workers: Optional[List[int]] = None,
        seed: Optional[int] = None,
        strict: bool = False,
    ) -> List[BenchmarkRecord]:
        """
        Run comparisons for every size and worker count.

        Inputs are generated once per size and shared by every worker count.

        Args:
            sizes: Sizes to benchmark (default: from config)
            workers: Worker counts to benchmark (default: from config)
            seed: RNG seed for input generation (default: from config)
            strict: Raise ComputationMismatch on the first disagreement

        Returns:
            List of BenchmarkRecord objects
        """
        if not self.is_enabled():
            print(f"{self.kernel} benchmarks disabled in config")
            return self.results

        sizes = sizes or self.get_sizes()
        workers = workers or self.get_worker_counts()
        if seed is None:
            seed = self.get_benchmark_config().get('seed')

        sequential, threaded = self._create_kernels()

        print(f"Running {self.kernel} benchmarks on {self.machine}")
        print(f"Sizes: {sizes}")
        print(f"Workers: {workers}")
        print(f"Seed: {seed}")
        print("-" * 60)

        for size in sizes:
            size_str = f"{size}x{size}" if self.kernel == 'matmul' else str(size)
            print(f"Generating inputs | size={size_str}...")
            inputs = self.create_inputs(size, seed=seed)

            for w in workers:
                print(f"Benchmarking {self.kernel} | size={size_str} | workers={w}...", end=" ")
                outcome = run_comparison(
                    self.kernel, sequential, threaded, inputs, w, machine=self.machine
                )
                record = outcome.record
                self.results.append(record)

                status = "OK" if record.results_match else "ERROR (results differ)"
                print(f"seq={record.sequential_seconds:.4f}s, "
                      f"par={record.parallel_seconds:.4f}s, "
                      f"speedup={record.speedup:.2f}x, check={status}")

                for sink in self.sinks:
                    sink.write(record)
                logger.debug("Recorded %s", record)

                if strict:
                    check_results(outcome)

        return self.results

    def save_json(self, filename: Optional[str] = None) -> str:
        """
        Save results to JSON file.

        Args:
            filename: Output filename (default: auto-generated)

        Returns:
            Path to saved file
        """
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{self.kernel}_results_{timestamp}.json"

        os.makedirs(self.output_dir, exist_ok=True)
        filepath = os.path.join(self.output_dir, filename)

        data = {
            'timestamp': datetime.now().isoformat(),
            'kernel': self.kernel,
            'machine': self.machine,
            'config': self.get_benchmark_config(),
            'results': [r.to_dict(json_safe=True) for r in self.results]
        }

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2, allow_nan=False)

        print(f"Results saved to {filepath}")
        return filepath

    def save_csv(self, filename: Optional[str] = None) -> str:
        """
        Save results to CSV file.

        Args:
            filename: Output filename (default: auto-generated)

        Returns:
            Path to saved file
        """
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{self.kernel}_results_{timestamp}.csv"

        os.makedirs(self.output_dir, exist_ok=True)
        filepath = os.path.join(self.output_dir, filename)

        if not self.results:
            print("No results to save")
            return filepath

        fieldnames = list(self.results[0].to_dict().keys())

        with open(filepath, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for result in self.results:
                writer.writerow(result.to_dict())

        print(f"Results saved to {filepath}")
        return filepath

    def print_summary(self):
        """Print a summary table of results."""
        if not self.results:
            print("No results to display")
            return

        print("\n" + "=" * 88)
        print("BENCHMARK SUMMARY")
        print("=" * 88)
        print(f"{'Kernel':<8} {'Size':>10} {'Workers':>8} {'T.Seq (s)':>12} "
              f"{'T.Par (s)':>12} {'Speedup':>9} {'GOPS':>8} {'Check':>8}")
        print("-" * 88)

        for r in self.results:
            check = "OK" if r.results_match else "ERROR"
            print(f"{r.label:<8} {r.input_size:>10} {r.worker_count:>8} "
                  f"{r.sequential_seconds:>12.4f} {r.parallel_seconds:>12.4f} "
                  f"{r.speedup:>9.2f} {self._parallel_gops(r):>8.3f} {check:>8}")

        print("=" * 88)

    def _parallel_gops(self, record: BenchmarkRecord) -> float:
        """Parallel-run throughput in giga-operations per second."""
        if record.label == 'matmul':
            ops = get_matmul_metrics(record.input_size)['ops']
        else:
            ops = get_dot_metrics(record.input_size)['ops']
        return compute_gops(ops, record.parallel_seconds)
