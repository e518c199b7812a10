"""pytest configuration file."""

import pytest, os, logging

# Headless Qt and a quiet pygame import for every test process
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .fakes import FakeAudioBackend, FakeClock, FakeScheduler


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "ui: marks tests that build Qt widgets (offscreen)"
    )


@pytest.fixture(autouse=True)
def _isolate_user_data(tmp_path, monkeypatch):
    monkeypatch.setenv("MEDITATE_DATA_DIR", str(tmp_path / "userdata"))
    monkeypatch.delenv("MEDITATE_AUDIO_DIR", raising=False)
    yield


@pytest.fixture(autouse=True, scope="session")
def _silence_logs():
    logging.getLogger("meditate.session.events").setLevel(logging.WARNING)
    yield


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clock():
    return FakeClock(start=1000.0)


@pytest.fixture
def scheduler(clock):
    return FakeScheduler(clock)


@pytest.fixture
def audio():
    return FakeAudioBackend()
