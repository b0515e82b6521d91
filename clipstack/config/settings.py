#!/usr/bin/env python3
"""
clipstack Settings Management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from clipstack.config.paths import AppPaths

logger = logging.getLogger(__name__)


class HistorySettings(BaseModel):
    """History retention settings"""
    capacity: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Maximum number of clipboard snapshots to keep (1-1000)"
    )


class PollingSettings(BaseModel):
    """Clipboard polling settings"""
    interval_seconds: float = Field(
        default=0.5,
        le=3600,
        description="Seconds between clipboard polls; 0 or less disables polling"
    )

    @field_validator('interval_seconds')
    @classmethod
    def validate_interval(cls, v: float) -> float:
        """Collapse every non-positive interval to 0 (polling disabled)"""
        if v <= 0:
            return 0.0
        return v


class Settings(BaseModel):
    """Main settings model"""
    history: HistorySettings = Field(default_factory=HistorySettings)
    polling: PollingSettings = Field(default_factory=PollingSettings)


class SettingsManager:
    """Loads settings and notifies subscribers when they change"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to the XDG config location
        """
        if config_path is None:
            config_path = AppPaths.default().config_path

        self.config_path = Path(config_path)
        self._listeners: List[Callable[[], None]] = []
        self._listeners_lock = threading.Lock()
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        try:
            if not self.config_path.exists():
                logger.info(f"Settings file not found at {self.config_path}, using defaults")
                return Settings()

            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)

            if config_data is None:
                logger.info("Settings file is empty, using defaults")
                return Settings()

            settings = Settings(**config_data)
            logger.info(f"Loaded settings from {self.config_path}")
            logger.info(f"  - History capacity: {settings.history.capacity}")
            logger.info(f"  - Poll interval: {settings.polling.interval_seconds}s")
            return settings

        except yaml.YAMLError as e:
            logger.error(f"Error parsing settings YAML: {e}")
            logger.error("Using default settings")
            return Settings()
        except (ValidationError, TypeError) as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}")
            logger.error("Using default settings")
            return Settings()
        except OSError as e:
            logger.error(f"Error loading settings: {e}")
            logger.error("Using default settings")
            return Settings()

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register a callback fired after every settings change

        Args:
            callback: Called with no arguments; read the new values from this manager

        Returns:
            Function that removes the subscription
        """
        with self._listeners_lock:
            self._listeners.append(callback)

        def unsubscribe():
            with self._listeners_lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return unsubscribe

    def _notify(self):
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener()
            except Exception as e:
                logger.error(f"Settings listener error: {e}")

    def reload(self):
        """Reload settings from file, notifying subscribers if anything changed"""
        previous = self.settings
        self.settings = self._load_settings()
        if self.settings != previous:
            self._notify()

    @property
    def capacity(self) -> int:
        """Get the history capacity setting"""
        return self.settings.history.capacity

    @property
    def poll_interval_seconds(self) -> float:
        """Get the poll interval setting"""
        return self.settings.polling.interval_seconds

    def update_settings(self, **kwargs):
        """
        Update settings, save them to file and notify subscribers

        Keys use dotted paths for nested settings, e.g. ``history.capacity``.

        Raises:
            ValidationError: If a value is out of range; nothing is changed
        """
        config_data = self.settings.model_dump()
        for key, value in kwargs.items():
            parts = key.split('.')
            section = config_data
            for part in parts[:-1]:
                section = section[part]
            section[parts[-1]] = value

        self.settings = Settings(**config_data)
        self._save_settings()
        self._notify()

    def _save_settings(self):
        """Save current settings to YAML file"""
        config_data = self.settings.model_dump()
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                yaml.dump(config_data, f, default_flow_style=False)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
