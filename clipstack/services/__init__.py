"""Clipboard history services."""

from .capture_service import CaptureEngine
from .history_handler import HistoryHandler
from .history_store import HistoryStore
from .persistence_service import PersistenceService
from .scheduler_service import RepeatingTimer, ThreadingScheduler
from .thumbnail_service import PillowImageResizer

__all__ = [
    "CaptureEngine",
    "HistoryHandler",
    "HistoryStore",
    "PersistenceService",
    "PillowImageResizer",
    "RepeatingTimer",
    "ThreadingScheduler",
]
