import zipfile

import pytest

from zip_bench.archive import entry_names, fill_archive, open_archive, write_archive
from zip_bench.errors import ArchiveError

DATA = b"\x89PNG\r\n\x1a\n" + b"pixels" * 100


def test_entry_names():
    """Entry names are numbered from 1."""
    assert list(entry_names(5)) == [f"output{i}.png" for i in range(1, 6)]
    assert list(entry_names(2, "img_{}.bin")) == ["img_1.bin", "img_2.bin"]


def test_write_archive_entries_share_content(tmp_path):
    """Every entry holds the same bytes."""
    path = tmp_path / "output.zip"
    names = write_archive(path, DATA)

    with zipfile.ZipFile(path) as zf:
        assert zf.namelist() == names
        assert len(names) == 5
        for name in names:
            assert zf.read(name) == DATA
            assert zf.getinfo(name).compress_type == zipfile.ZIP_DEFLATED


def test_write_archive_overwrites(tmp_path):
    """Writing again to the same path replaces the previous archive."""
    path = tmp_path / "output.zip"
    write_archive(path, DATA, entries=5)
    write_archive(path, b"second", entries=3)

    with zipfile.ZipFile(path) as zf:
        assert zf.namelist() == ["output1.png", "output2.png", "output3.png"]
        assert zf.read("output1.png") == b"second"


def test_stored_compression(tmp_path):
    path = tmp_path / "stored.zip"
    write_archive(path, DATA, entries=1, compression=zipfile.ZIP_STORED)
    with zipfile.ZipFile(path) as zf:
        assert zf.getinfo("output1.png").compress_type == zipfile.ZIP_STORED


def test_open_archive_in_missing_directory_raises(tmp_path):
    """An archive path that cannot be created raises ArchiveError."""
    with pytest.raises(ArchiveError) as excinfo:
        open_archive(tmp_path / "no_such_dir" / "output.zip")
    assert "no_such_dir" in str(excinfo.value)


def test_fill_archive_closes_file(tmp_path):
    path = tmp_path / "output.zip"
    zf = open_archive(path)
    fill_archive(zf, DATA, ["a.png"])
    assert zf.fp is None
    assert zipfile.is_zipfile(path)
