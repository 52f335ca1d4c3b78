class BenchmarkError(Exception):
    """Base class for every error raised by zip_bench."""


class ConfigError(BenchmarkError, ValueError):
    pass


class PayloadError(BenchmarkError):
    """Raised when the image payload cannot be read."""


class ArchiveError(BenchmarkError):
    """Raised when the output archive cannot be written."""


class TimerStateError(BenchmarkError, RuntimeError):
    """Raised when an ElapsedTimer operation is invalid in the current state."""


class TimerAlreadyPausedError(TimerStateError):
    pass


class TimerAlreadyRunningError(TimerStateError):
    pass


class ReportError(BenchmarkError):
    """Raised when a report file cannot be written."""
