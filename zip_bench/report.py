import io
from pathlib import Path
from typing import Literal, Optional, Union

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from zip_bench.errors import ReportError
from zip_bench.harness import BenchmarkResult
from zip_bench.timer import format_seconds
from zip_bench.units import infer_time_property


def summary_lines(result: BenchmarkResult) -> list[str]:
    return [
        f"Total elapsed time: {result.total_ms}ms",
        f"Time per iteration: {result.per_iteration_ms}ms",
    ]


def _create_rich_group(
    result: BenchmarkResult,
    time_unit: Literal["auto", "s", "ms", "us"] = "auto",
    precision: Union[int, Literal["auto"]] = "auto",
    divider: Literal["rule", "blank"] = "rule"
) -> Group:
    stats = result.stats
    time_property = infer_time_property(result.samples, time_unit, precision)

    items = []
    items.append(Panel("zip-bench Summary", style="white", expand=False))

    label = Text()
    label.append(f"[{result.archive_path}]", style="green")
    label.append(f" {result.entries} entries / {result.iterations}x")
    items.append(label)

    detail = Text()
    detail.append(f"min={time_property.format_time(stats.min_)}, ")
    detail.append(f"max={time_property.format_time(stats.max_)}, ")
    detail.append(f"avg={time_property.format_time(stats.avg)}, ")
    detail.append(f"var={time_property.format_time(stats.var_)}")
    items.append(detail)

    for i, sample in enumerate(result.samples, start=1):
        items.append(Text(f"  #{i:<3} {time_property.format_time(sample)}"))

    if divider == "rule":
        items.append(Rule(style="grey50"))
    else:
        items.append(Text())

    items.append(Text(
        f"measured: {format_seconds(result.total_seconds)}",
        style="bright_red"))
    return Group(*items)


def print_result(
    result: BenchmarkResult,
    verbose: bool = False,
    console: Optional[Console] = None
):
    """Prints the benchmark result.

    The two fixed-format lines are always written as plain text so they can
    be parsed. With `verbose`, a rich summary of the per-iteration samples
    is printed first.

    Args:
        result (BenchmarkResult): The finished run.
        verbose (bool, optional): Also print per-iteration statistics.
            Defaults to False.
        console (Console, optional): Where to print. Defaults to a new
            stdout console.
    """
    if console is None:
        console = Console()

    if verbose:
        console.print(_create_rich_group(result))
    for line in summary_lines(result):
        console.print(line, markup=False, highlight=False)


def save_txt(
    result: BenchmarkResult,
    file_path: Union[str, Path],
    time_unit: Literal["auto", "s", "ms", "us"] = "auto",
    precision: Union[int, Literal["auto"]] = "auto"
):
    """Saves the summary as a plain text file.

    Args:
        result (BenchmarkResult): The finished run.
        file_path (str or Path): The path to the output file.
        time_unit (str, optional): The display unit for time.
            Defaults to 'auto'.
        precision (int or str, optional): The display precision for time.
            Defaults to 'auto'.

    Raises:
        ReportError: If the file cannot be written.
    """

    path = Path(file_path)
    group = _create_rich_group(result, time_unit, precision, divider="blank")

    try:
        with path.open("w", encoding="utf-8") as f:
            console = Console(file=f, color_system=None, force_terminal=False)
            console.print(group)
            for line in summary_lines(result):
                console.print(line, markup=False, highlight=False)
    except OSError as e:
        raise ReportError(f"Writing report '{path}' failed: {e}") from e


def save_html(
    result: BenchmarkResult,
    file_path: Union[str, Path],
    time_unit: Literal["auto", "s", "ms", "us"] = "auto",
    precision: Union[int, Literal["auto"]] = "auto"
):
    """Saves the summary as an HTML file.

    Args:
        result (BenchmarkResult): The finished run.
        file_path (str or Path): The path to the output file.
        time_unit (str, optional): The display unit for time.
            Defaults to 'auto'.
        precision (int or str, optional): The display precision for time.
            Defaults to 'auto'.

    Raises:
        ReportError: If the file cannot be written.
    """

    path = Path(file_path)
    group = _create_rich_group(result, time_unit, precision, divider="blank")

    sink = io.StringIO()
    console = Console(record=True, file=sink)
    console.print(group)
    html = console.export_html()
    try:
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise ReportError(f"Writing report '{path}' failed: {e}") from e
