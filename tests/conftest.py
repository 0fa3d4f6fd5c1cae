import sys
import time
from pathlib import Path

import platformdirs
import pytest
import requests

# Add src to path so the package imports without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

_NETWORK_BLOCK_MSG = (
    "Network access is blocked during tests. Mock requests.* or Session.request."
)


def _block_network(*_args, **_kwargs):
    """
    Prevent network calls in tests by raising a RuntimeError.

    Raises:
        RuntimeError: with `_NETWORK_BLOCK_MSG` indicating that network access is blocked during tests.
    """
    raise RuntimeError(_NETWORK_BLOCK_MSG)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no I/O beyond tmp_path")


@pytest.fixture(autouse=True)
def _isolate_test_environment(tmp_path_factory, monkeypatch):
    """
    Point platformdirs and XDG variables at temporary directories and clear Crocodoc environment overrides.
    """
    base = tmp_path_factory.mktemp("crocodoc")
    config_dir = base / "config"
    log_dir = base / "log"

    for path in (config_dir, log_dir):
        path.mkdir(parents=True, exist_ok=True)

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.delenv("CROCODOC_API_TOKEN", raising=False)
    monkeypatch.delenv("CROCODOC_LOG_LEVEL", raising=False)

    monkeypatch.setattr(
        platformdirs, "user_config_dir", lambda *_args, **_kwargs: str(config_dir)
    )
    monkeypatch.setattr(
        platformdirs, "user_log_dir", lambda *_args, **_kwargs: str(log_dir)
    )


def pytest_runtest_setup():
    """
    Prevent real network requests during tests by replacing requests entry points with a blocking callable.
    """
    requests.get = _block_network
    requests.post = _block_network
    requests.Session.request = _block_network


@pytest.fixture(autouse=True)
def _mock_time_sleep(monkeypatch):
    """Make time.sleep instant so retry backoff never slows tests."""
    monkeypatch.setattr(time, "sleep", lambda *_args, **_kwargs: None)


@pytest.fixture
def requester(mocker):
    """A stand-in request collaborator returning fixed bytes."""
    mock_requester = mocker.Mock()
    mock_requester.request.return_value = b"%PDF-1.4 content"
    return mock_requester
