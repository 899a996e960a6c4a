import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from peperone.services.logging import reset_logging


class FakeClock:
    """Manually advanced replacement for ``time.time``."""

    def __init__(self, start: float = 1_700_000_000.25) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _isolate_logging():
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _isolate_base_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("PEPERONE_DIR", str(tmp_path / "peperone-home"))
