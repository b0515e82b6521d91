"""Tests for the daemon wiring."""

import json
import time
from pathlib import Path

import yaml

from clipstack.config.paths import AppPaths
from clipstack.main import ClipstackDaemon
from tests.fakes.fake_clipboard import FakeClipboard


def wait_for(condition, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return False


def test_daemon_polls_and_saves(tmp_path: Path):
    paths = AppPaths(history_path=tmp_path / "data" / "history.json", config_path=tmp_path / "settings.yml")
    paths.config_path.write_text(yaml.dump({
        'history': {'capacity': 3},
        'polling': {'interval_seconds': 0.01},
    }))
    clipboard = FakeClipboard()
    hooks = []

    daemon = ClipstackDaemon(paths=paths, clipboard=clipboard, register_shutdown=hooks.append)
    try:
        clipboard.copy_text("polled")
        assert wait_for(lambda: len(daemon.history_handler.entries) == 1)
    finally:
        daemon.stop()

    assert len(hooks) == 1
    saved = json.loads(paths.history_path.read_text())
    assert saved[0]["displayText"] == "polled"


def test_settings_change_reaches_history(tmp_path: Path):
    paths = AppPaths(history_path=tmp_path / "history.json", config_path=tmp_path / "settings.yml")
    paths.config_path.write_text(yaml.dump({'polling': {'interval_seconds': 0}}))
    clipboard = FakeClipboard()
    daemon = ClipstackDaemon(paths=paths, clipboard=clipboard, register_shutdown=lambda hook: None)

    try:
        for text in ("a", "b", "c"):
            clipboard.copy_text(text)
            daemon.history_handler.read()

        daemon.settings_manager.update_settings(**{"history.capacity": 1})

        assert [e.display_text for e in daemon.history_handler.entries] == ["c"]
    finally:
        daemon.stop()
