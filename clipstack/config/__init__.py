"""Configuration management."""

from .paths import AppPaths
from .settings import HistorySettings, PollingSettings, Settings, SettingsManager

__all__ = ["AppPaths", "HistorySettings", "PollingSettings", "Settings", "SettingsManager"]
