# SPDX-License-Identifier: Apache-2.0
"""Tests for the config-driven benchmark runner."""

import csv
import json
import math

import pytest
import yaml

from parallel_kernels.errors import ComputationMismatch
from speedup_bench.benchmark_runner import BenchmarkRunner
from speedup_bench.metrics import BenchmarkRecord
from speedup_bench.report import MemorySink


@pytest.fixture
def config(tmp_path):
    return {
        'machine': 'CI',
        'output_dir': str(tmp_path / 'out'),
        'benchmarks_dot': {'sizes': [1000, 4097], 'workers': [1, 3], 'seed': 1},
        'benchmarks_matmul': {'sizes': [8], 'workers': [2, 5], 'seed': 1},
    }


class TestBenchmarkRunner:
    """Test suite for BenchmarkRunner."""

    def test_dot_run(self, config):
        sink = MemorySink()
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[sink])
        results = runner.run()

        assert len(results) == 4
        assert [(r.input_size, r.worker_count) for r in results] == [
            (1000, 1), (1000, 3), (4097, 1), (4097, 3)
        ]
        assert all(r.results_match for r in results)
        assert all(r.machine == 'CI' for r in results)
        assert sink.records == results

    def test_matmul_run(self, config):
        sink = MemorySink()
        runner = BenchmarkRunner(kernel='matmul', config=config, sinks=[sink])
        results = runner.run()
        assert [(r.label, r.input_size, r.worker_count) for r in results] == [
            ('matmul', 8, 2), ('matmul', 8, 5)
        ]
        assert all(r.results_match for r in results)

    def test_overrides(self, config):
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[], machine='Laptop')
        results = runner.run(sizes=[16], workers=[4])
        assert len(results) == 1
        assert results[0].input_size == 16
        assert results[0].machine == 'Laptop'

    def test_defaults_without_section(self, tmp_path):
        runner = BenchmarkRunner(kernel='dot', config={'output_dir': str(tmp_path)}, sinks=[])
        assert runner.get_sizes() == [1_000_000]
        assert runner.get_worker_counts() == [1, 2, 4]

    def test_default_sink_writes_pipe_log(self, config, tmp_path):
        config['benchmarks_dot']['log_file'] = 'dot.txt'
        runner = BenchmarkRunner(kernel='dot', config=config)
        runner.run(sizes=[10], workers=[2])
        lines = (tmp_path / 'out' / 'dot.txt').read_text().splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("Machine: CI | Size: 10 | Workers: 2")

    def test_disabled(self, config):
        config['benchmarks_dot']['enabled'] = False
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[])
        assert runner.run() == []

    def test_unknown_kernel(self, config):
        with pytest.raises(ValueError):
            BenchmarkRunner(kernel='conv', config=config)

    def test_strict_raises_on_mismatch(self, config, monkeypatch):
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[])
        sequential, threaded = runner._create_kernels()
        monkeypatch.setattr(runner, '_create_kernels',
                            lambda: (sequential, lambda a, b, w: threaded(a, b, w) + 1))
        with pytest.raises(ComputationMismatch):
            runner.run(sizes=[10], workers=[2], strict=True)

    def test_save_json_and_csv(self, config):
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[])
        runner.run(sizes=[100], workers=[2])

        json_path = runner.save_json('r.json')
        with open(json_path) as f:
            data = json.load(f)
        assert data['kernel'] == 'dot'
        assert data['machine'] == 'CI'
        assert data['results'][0]['worker_count'] == 2

        csv_path = runner.save_csv('r.csv')
        with open(csv_path, newline='') as f:
            rows = list(csv.DictReader(f))
        assert rows[0]['input_size'] == '100'

    def test_print_summary(self, config, capsys):
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[])
        runner.run(sizes=[50], workers=[1])
        runner.print_summary()
        out = capsys.readouterr().out
        assert "BENCHMARK SUMMARY" in out
        assert "OK" in out

    def test_loads_config_file(self, config, tmp_path):
        path = tmp_path / 'config.yaml'
        path.write_text(yaml.safe_dump(config))
        runner = BenchmarkRunner(str(path), kernel='matmul', sinks=[])
        assert runner.get_sizes() == [8]
        assert runner.machine == 'CI'

    def test_save_json_is_strict_with_infinite_speedup(self, config):
        runner = BenchmarkRunner(kernel='dot', config=config, sinks=[])
        runner.results.append(BenchmarkRecord('dot', 1, 1, 0.001, 0.0, math.inf, machine='CI'))

        with open(runner.save_json('inf.json')) as f:
            text = f.read()

        def reject(constant):
            raise ValueError(f"non-standard JSON constant {constant}")

        data = json.loads(text, parse_constant=reject)
        assert data['results'][0]['speedup'] is None
