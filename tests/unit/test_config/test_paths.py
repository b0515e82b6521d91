"""Tests for paths configuration."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from clipstack.config.paths import AppPaths


def test_app_paths_default(monkeypatch):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    paths = AppPaths.default()

    assert paths.history_path == Path.home() / ".local" / "share" / "clipstack" / "history.json"
    assert paths.config_path == Path.home() / ".config" / "clipstack" / "settings.yml"


def test_app_paths_honor_xdg(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))

    paths = AppPaths.default()

    assert paths.history_path == tmp_path / "data" / "clipstack" / "history.json"
    assert paths.config_path == tmp_path / "config" / "clipstack" / "settings.yml"


def test_app_paths_immutable():
    paths = AppPaths.default()

    with pytest.raises(FrozenInstanceError):
        paths.history_path = Path("/new/path")
