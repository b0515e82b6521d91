"""Core interfaces, constants and errors."""

from .exceptions import ClipstackError, HistoryIndexError
from .protocols import (
    ClipboardPort,
    ImageResizerPort,
    SchedulerPort,
    SettingsProviderPort,
    TimerHandle,
)

__all__ = [
    "ClipboardPort",
    "ClipstackError",
    "HistoryIndexError",
    "ImageResizerPort",
    "SchedulerPort",
    "SettingsProviderPort",
    "TimerHandle",
]
