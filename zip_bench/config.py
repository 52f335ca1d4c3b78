import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from zip_bench.errors import ConfigError

CompressionName = Literal["stored", "deflated"]

COMPRESSION_METHODS: dict[str, int] = {
    "stored": zipfile.ZIP_STORED,
    "deflated": zipfile.ZIP_DEFLATED,
}

DEFAULT_PAYLOAD = Path("no_metadata_large.png")
DEFAULT_ARCHIVE = Path("output.zip")
DEFAULT_ENTRY_NAME = "output{}.png"


@dataclass(slots=True, frozen=True)
class BenchConfig:
    """Everything the benchmark used to hard-code.

    Relative paths are resolved against the current working directory when
    they are opened. The archive at `archive_path` is overwritten on every
    iteration, so only the last iteration's entries persist.
    """

    payload_path: Path = DEFAULT_PAYLOAD
    archive_path: Path = DEFAULT_ARCHIVE
    entries: int = 5
    entry_name: str = DEFAULT_ENTRY_NAME
    iterations: int = 5
    warmup_iterations: int = 5
    warmup_fillers: int = 10
    filler_pixels: int = 1_000_000
    compression: CompressionName = "deflated"

    def __post_init__(self):
        # frozen dataclass: normalise str paths through object.__setattr__
        object.__setattr__(self, "payload_path", Path(self.payload_path))
        object.__setattr__(self, "archive_path", Path(self.archive_path))

        if self.iterations < 1:
            raise ConfigError(f"iterations must be >= 1, got {self.iterations}")
        if self.entries < 1:
            raise ConfigError(f"entries must be >= 1, got {self.entries}")
        if self.warmup_iterations < 0 or self.warmup_fillers < 0:
            raise ConfigError("warm-up counts must not be negative")
        if self.filler_pixels < 0:
            raise ConfigError(
                f"filler_pixels must not be negative, got {self.filler_pixels}")
        try:
            first, second = self.entry_name.format(1), self.entry_name.format(2)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ConfigError(
                f"entry_name {self.entry_name!r} is not a valid pattern: {e}") from e
        if first == second:
            raise ConfigError(
                f"entry_name {self.entry_name!r} needs a placeholder such as "
                "'{}' for the entry number")
        if self.compression not in COMPRESSION_METHODS:
            raise ConfigError(
                f"Unknown compression '{self.compression}'. "
                f"Expected one of: {', '.join(COMPRESSION_METHODS)}")

    @property
    def compress_type(self) -> int:
        return COMPRESSION_METHODS[self.compression]

