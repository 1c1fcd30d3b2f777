# SPDX-License-Identifier: Apache-2.0
"""Tests for report sinks."""

import os

from speedup_bench.benchmark_runner import BenchmarkRunner
from speedup_bench.metrics import BenchmarkRecord
from speedup_bench.report import MemorySink, PipeLogSink, format_record


def _record(label='dot', size=1000, match=True):
    return BenchmarkRecord(label, size, 4, 0.5, 0.25, 2.0, results_match=match, machine='Lab PC')


class TestFormatRecord:

    def test_dot_line(self):
        assert format_record(_record()) == (
            "Machine: Lab PC | Size: 1000 | Workers: 4 | T.Seq: 0.5000s | "
            "T.Par: 0.2500s | Sp: 2.00 | Check: OK"
        )

    def test_matmul_line(self):
        line = format_record(_record('matmul', 500))
        assert "Matrix: 500x500" in line

    def test_mismatch(self):
        assert format_record(_record(match=False)).endswith("Check: MISMATCH")

    def test_infinite_speedup(self):
        record = BenchmarkRecord('dot', 1, 1, 0.1, 0.0, float('inf'))
        assert "Sp: inf" in format_record(record)


class TestPipeLogSink:

    def test_appends(self, tmp_path):
        path = tmp_path / "logs" / "results.txt"
        sink = PipeLogSink(str(path))
        sink.write(_record())
        sink.write(_record('matmul', 100))

        lines = path.read_text().splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("Machine: Lab PC | Size: 1000")
        assert "Matrix: 100x100" in lines[1]

    def test_write_failure_is_reported(self, tmp_path, capsys):
        # A directory cannot be opened for appending
        sink = PipeLogSink(str(tmp_path))
        assert sink.write(_record()) is False
        assert "Error saving result log" in capsys.readouterr().out

    def test_write_success(self, tmp_path):
        assert PipeLogSink(str(tmp_path / "ok.txt")).write(_record()) is True

    def test_runner_continues_after_write_failure(self, tmp_path):
        memory = MemorySink()
        runner = BenchmarkRunner(
            kernel='dot',
            config={'output_dir': str(tmp_path / 'out'), 'machine': 'CI'},
            sinks=[PipeLogSink(str(tmp_path)), memory],
        )
        results = runner.run(sizes=[10, 20], workers=[1, 2])

        assert len(results) == 4
        assert len(memory.records) == 4
        assert os.path.exists(runner.save_json('r.json'))


class TestMemorySink:

    def test_collects(self):
        sink = MemorySink()
        sink.write(_record())
        assert len(sink.records) == 1
