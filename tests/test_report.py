from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from zip_bench.errors import ReportError
from zip_bench.harness import BenchmarkResult
from zip_bench.report import print_result, save_html, save_txt, summary_lines


def make_result() -> BenchmarkResult:
    return BenchmarkResult(
        total_seconds=1.234,
        iterations=5,
        samples=(0.2, 0.25, 0.3, 0.234, 0.25),
        archive_path=Path("output.zip"),
        entries=5
    )


def test_summary_lines():
    """The two fixed-format lines report total and per-iteration ms."""
    assert summary_lines(make_result()) == [
        "Total elapsed time: 1234ms",
        "Time per iteration: 246ms",
    ]


def test_print_result(capsys):
    print_result(make_result())
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "Total elapsed time: 1234ms",
        "Time per iteration: 246ms",
    ]


def test_print_result_verbose():
    """Verbose output adds per-iteration statistics before the fixed lines."""
    console = Console(file=StringIO(), width=120)
    print_result(make_result(), verbose=True, console=console)
    output = console.file.getvalue()

    assert "zip-bench Summary" in output
    assert "avg=" in output
    assert "measured: 1.234 seconds" in output
    assert output.rstrip().endswith("Time per iteration: 246ms")


def test_save_txt(tmp_path: Path):
    """Checks that save_txt() writes the summary as plain text."""
    file_path = tmp_path / "bench.log"
    save_txt(make_result(), file_path)

    content = file_path.read_text()
    assert "output.zip" in content
    assert "var=" in content
    assert "Total elapsed time: 1234ms" in content


def test_save_html(tmp_path: Path):
    """Checks that save_html() creates an HTML report."""
    file_path = tmp_path / "bench.html"
    save_html(make_result(), file_path, time_unit="ms", precision=1)

    content = file_path.read_text()
    assert "<html>" in content
    assert "250.0ms" in content


def test_save_txt_to_missing_directory_raises(tmp_path: Path):
    """An unwritable report path raises ReportError naming the path."""
    with pytest.raises(ReportError) as excinfo:
        save_txt(make_result(), tmp_path / "missing" / "bench.log")
    assert "bench.log" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_save_html_to_missing_directory_raises(tmp_path: Path):
    with pytest.raises(ReportError):
        save_html(make_result(), tmp_path / "missing" / "bench.html")


def test_save_txt_unknown_unit_falls_back_to_auto(tmp_path: Path):
    """An unsupported time unit is inferred instead of failing."""
    file_path = tmp_path / "bench.log"
    save_txt(make_result(), file_path, time_unit="ns")
    assert "ms" in file_path.read_text()
