import pytest

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class FakeClock:
    """Manually advanced clock, used in place of time.perf_counter."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Runs the test inside tmp_path with a small payload at the default
    location, so relative default paths resolve there.
    """
    payload = tmp_path / "no_metadata_large.png"
    payload.write_bytes(PNG_SIGNATURE + bytes(range(256)) * 16)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
