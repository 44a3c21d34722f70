"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from pickmenu.utils import debug
from pickmenu.utils.config import Config
from tests.helpers.fake_terminal import FakeExecutor, FakeTerminal


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_pickmenu_dir(temp_dir, monkeypatch):
    """Point PICKMENU_DIR at a temp dir so tests never read ~/.config."""
    pickmenu_dir = temp_dir / ".pickmenu"
    pickmenu_dir.mkdir()
    monkeypatch.setenv("PICKMENU_DIR", str(pickmenu_dir))
    for key in ("PICKMENU_DEBUG", "PICKMENU_MIN_WIDTH", "PICKMENU_SHELL"):
        monkeypatch.delenv(key, raising=False)
    debug.reload_config()
    debug.mute_stderr(False)
    yield pickmenu_dir
    debug.reload_config()


@pytest.fixture
def config(mock_pickmenu_dir):
    return Config(mock_pickmenu_dir)


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def executor():
    return FakeExecutor()
