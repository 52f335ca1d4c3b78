import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from zip_bench.archive import entry_names, fill_archive, open_archive
from zip_bench.config import BenchConfig
from zip_bench.filler import unrelated_operation
from zip_bench.payload import load_payload
from zip_bench.stats import IterationStats
from zip_bench.timer import ElapsedTimer


@dataclass(slots=True, frozen=True)
class BenchmarkResult:
    total_seconds: float
    iterations: int
    samples: tuple[float, ...]
    archive_path: Path
    entries: int

    @property
    def total_ms(self) -> int:
        return int(round(self.total_seconds * 1_000_000_000)) // 1_000_000

    @property
    def per_iteration_ms(self) -> int:
        return self.total_ms // self.iterations

    @property
    def stats(self) -> IterationStats:
        return IterationStats.from_samples(self.samples)


def package_payload(timer: ElapsedTimer, config: BenchConfig) -> list[str]:
    """One measured packaging run.

    Loading the payload and creating the archive file happen with the timer
    paused; writing the entries and closing the archive are measured.
    The timer must be running when this is called.
    """
    with timer.excluded():
        data = load_payload(config.payload_path)
        zip_file = open_archive(config.archive_path, config.compress_type)
        names = list(entry_names(config.entries, config.entry_name))

    return fill_archive(zip_file, data, names)


def warm_up(config: BenchConfig, clock: Callable[[], float] = time.perf_counter):
    throwaway = ElapsedTimer(clock)
    throwaway.start()
    for _ in range(config.warmup_iterations):
        package_payload(throwaway, config)
    for _ in range(config.warmup_fillers):
        unrelated_operation(config.filler_pixels)


def run_benchmark(
    config: BenchConfig,
    clock: Callable[[], float] = time.perf_counter
) -> BenchmarkResult:
    """Runs the warm-up and the timed loop.

    Each iteration packages the payload with the timer running, then runs
    the filler task with the timer paused.

    Args:
        config (BenchConfig): Paths and counts for the run.
        clock (callable, optional): Monotonic clock in seconds. Defaults to
            `time.perf_counter`.

    Returns:
        BenchmarkResult: Total measured time and per-iteration samples.

    Raises:
        PayloadError: If the payload cannot be read.
        ArchiveError: If the archive cannot be written.
    """

    warm_up(config, clock)

    timer = ElapsedTimer(clock)
    samples: list[float] = []
    mark = 0.

    timer.start()
    for _ in range(config.iterations):
        package_payload(timer, config)
        timer.pause()
        samples.append(timer.total() - mark)
        mark = timer.total()

        unrelated_operation(config.filler_pixels)
        timer.resume()

    # the interval opened by the last resume() holds no work
    return BenchmarkResult(
        total_seconds=timer.accumulated,
        iterations=config.iterations,
        samples=tuple(samples),
        archive_path=config.archive_path,
        entries=config.entries
    )
