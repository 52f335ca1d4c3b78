import zipfile
from pathlib import Path
from typing import Iterator, Union

from zip_bench.errors import ArchiveError


def entry_names(count: int, pattern: str = "output{}.png") -> Iterator[str]:
    for i in range(1, count + 1):
        yield pattern.format(i)


def open_archive(
    path: Union[str, Path],
    compression: int = zipfile.ZIP_DEFLATED
) -> zipfile.ZipFile:
    """Creates the archive file, truncating any previous one.

    Raises:
        ArchiveError: If the file cannot be created.
    """
    path = Path(path)
    try:
        return zipfile.ZipFile(path, mode="w", compression=compression)
    except OSError as e:
        raise ArchiveError(f"Creating archive '{path}' failed: {e}") from e


def fill_archive(
    zip_file: zipfile.ZipFile,
    data: bytes,
    names: list[str]
) -> list[str]:
    """Writes `data` once per name and closes the archive.

    The archive is closed even when a write fails.

    Raises:
        ArchiveError: If any entry or the central directory cannot be written.
    """
    try:
        with zip_file:
            for name in names:
                zip_file.writestr(name, data)
    except (OSError, zipfile.BadZipFile) as e:
        raise ArchiveError(
            f"Writing archive '{zip_file.filename}' failed: {e}") from e
    return names


def write_archive(
    path: Union[str, Path],
    data: bytes,
    entries: int = 5,
    entry_name: str = "output{}.png",
    compression: int = zipfile.ZIP_DEFLATED
) -> list[str]:
    zip_file = open_archive(path, compression)
    return fill_archive(zip_file, data, list(entry_names(entries, entry_name)))
