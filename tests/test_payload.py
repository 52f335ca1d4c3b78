import pytest

from zip_bench.errors import PayloadError
from zip_bench.payload import load_payload


def test_load_payload_reads_raw_bytes(workdir):
    """The payload is returned as-is, without decoding."""
    data = load_payload("no_metadata_large.png")
    assert data.startswith(b"\x89PNG")
    assert data == (workdir / "no_metadata_large.png").read_bytes()


def test_missing_payload_raises(tmp_path):
    """A missing file raises PayloadError naming the path."""
    missing = tmp_path / "missing.png"
    with pytest.raises(PayloadError) as excinfo:
        load_payload(missing)
    assert "missing.png" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_payload_raises(tmp_path):
    with pytest.raises(PayloadError):
        load_payload(tmp_path)
