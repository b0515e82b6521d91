"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes.fake_clipboard import FakeClipboard
from tests.fakes.fake_resizer import FakeImageResizer
from tests.fakes.fake_scheduler import FakeScheduler
from tests.fakes.fake_settings import FakeSettingsProvider


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    return tmp_path / "clipstack" / "history.json"


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def resizer() -> FakeImageResizer:
    return FakeImageResizer()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def settings() -> FakeSettingsProvider:
    return FakeSettingsProvider(capacity=5, poll_interval_seconds=0.5)
