from zip_bench.config import BenchConfig
from zip_bench.errors import (
    ArchiveError,
    BenchmarkError,
    ConfigError,
    PayloadError,
    ReportError,
    TimerAlreadyPausedError,
    TimerAlreadyRunningError,
    TimerStateError,
)
from zip_bench.harness import BenchmarkResult, run_benchmark
from zip_bench.timer import ElapsedTimer, format_seconds

__version__ = "0.1.0"

__all__ = [
    "ArchiveError",
    "BenchConfig",
    "BenchmarkError",
    "BenchmarkResult",
    "ConfigError",
    "ElapsedTimer",
    "PayloadError",
    "ReportError",
    "TimerAlreadyPausedError",
    "TimerAlreadyRunningError",
    "TimerStateError",
    "format_seconds",
    "run_benchmark",
]
