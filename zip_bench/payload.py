from pathlib import Path
from typing import Union

from zip_bench.errors import PayloadError


def load_payload(path: Union[str, Path]) -> bytes:
    """Reads the whole image payload into memory.

    Args:
        path (str or Path): The payload file, relative to the working
            directory unless absolute.

    Returns:
        bytes: The raw file content. It is not decoded.

    Raises:
        PayloadError: If the file cannot be read.
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise PayloadError(f"Reading payload '{path}' failed: {e}") from e
