import argparse
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from zip_bench.config import (
    COMPRESSION_METHODS,
    DEFAULT_ARCHIVE,
    DEFAULT_ENTRY_NAME,
    DEFAULT_PAYLOAD,
    BenchConfig,
)
from zip_bench.errors import BenchmarkError
from zip_bench.harness import run_benchmark
from zip_bench.report import print_result, save_html, save_txt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zip-bench",
        description="Measure the time spent packaging an image into a ZIP archive")
    parser.add_argument("--payload", type=Path, default=DEFAULT_PAYLOAD, help="image file to package")
    parser.add_argument("--archive", type=Path, default=DEFAULT_ARCHIVE, help="archive to overwrite on every iteration")
    parser.add_argument("--entries", type=int, default=5, help="entries written per archive")
    parser.add_argument("--entry-name", default=DEFAULT_ENTRY_NAME, help="entry name pattern, '{}' is the 1-based index")
    parser.add_argument("-n", "--iterations", type=int, default=5, help="number of timed iterations")
    parser.add_argument("--warmup", type=int, default=5, help="untimed packaging runs before measuring")
    parser.add_argument("--warmup-fillers", type=int, default=10, help="untimed filler runs before measuring")
    parser.add_argument("--filler-pixels", type=int, default=1_000_000, help="size of the filler pixel buffer")
    parser.add_argument("--compression", choices=list(COMPRESSION_METHODS), default="deflated")
    parser.add_argument("-v", "--verbose", action="store_true", help="print per-iteration statistics")
    parser.add_argument("--save-txt", type=Path, help="also write the summary to a text file")
    parser.add_argument("--save-html", type=Path, help="also write the summary to an HTML file")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None
) -> int:
    args = build_parser().parse_args(argv)

    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)

    try:
        config = BenchConfig(
            payload_path=args.payload,
            archive_path=args.archive,
            entries=args.entries,
            entry_name=args.entry_name,
            iterations=args.iterations,
            warmup_iterations=args.warmup,
            warmup_fillers=args.warmup_fillers,
            filler_pixels=args.filler_pixels,
            compression=args.compression,
        )
        result = run_benchmark(config)

        print_result(result, verbose=args.verbose, console=console)
        if args.save_txt is not None:
            save_txt(result, args.save_txt)
        if args.save_html is not None:
            save_html(result, args.save_html)
    except BenchmarkError as e:
        error_console.print(f"error: {e}", style="bold red", markup=False, highlight=False)
        return 1
    return 0
