#!/usr/bin/env python3
"""
History Handler - Owns the clipboard history and serializes access to it
"""
import atexit
import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from clipstack.core.protocols import (
    ClipboardPort,
    ImageResizerPort,
    SchedulerPort,
    SettingsProviderPort,
    TimerHandle,
)
from clipstack.models.snapshot import Snapshot
from clipstack.services.capture_service import CaptureEngine
from clipstack.services.history_store import HistoryStore
from clipstack.services.persistence_service import PersistenceService

logger = logging.getLogger(__name__)


class HistoryHandler:
    """Capture, restore and persistence of the clipboard history.

    Every public operation runs under one non-reentrant lock: the periodic
    poll and user-triggered captures or restores never interleave.
    """

    def __init__(
        self,
        clipboard: ClipboardPort,
        resizer: ImageResizerPort,
        settings: SettingsProviderPort,
        scheduler: SchedulerPort,
        history_path: Union[str, Path],
        register_shutdown: Callable[[Callable[[], None]], object] = atexit.register,
    ):
        """
        Initialize history handler

        Args:
            clipboard: Clipboard service
            resizer: Image service used for icon thumbnails
            settings: Provider of capacity and poll interval
            scheduler: Scheduler for the periodic poll
            history_path: Location of the persisted history
            register_shutdown: Registers a function to run at process exit
        """
        logger.info("[HistoryHandler.__init__] Starting initialization...")
        self.settings = settings
        self.scheduler = scheduler
        self.engine = CaptureEngine(clipboard, resizer)
        self.persistence = PersistenceService(history_path)
        self._lock = threading.Lock()
        self._timer_lock = threading.Lock()
        self._timer: Optional[TimerHandle] = None
        self._timer_interval: Optional[float] = None

        self.store = HistoryStore(settings.capacity, self.persistence.load())
        self.store.truncate()

        register_shutdown(self.shutdown)
        self._unsubscribe = settings.subscribe(self._on_settings_changed)
        self._on_settings_changed()
        logger.info(f"[HistoryHandler.__init__] Initialization complete ({len(self.store)} snapshot(s))")

    @property
    def entries(self) -> Tuple[Snapshot, ...]:
        with self._lock:
            return self.store.entries

    def _on_settings_changed(self):
        """Apply capacity and poll interval from the settings provider"""
        capacity = self.settings.capacity
        interval = self.settings.poll_interval_seconds

        with self._lock:
            self.store.capacity = capacity
            if self.store.truncate():
                self.persistence.persist(self.store)

        with self._timer_lock:
            if interval == self._timer_interval:
                return

            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._timer_interval = interval

            if interval > 0:
                self._timer = self.scheduler.schedule(interval, self._on_tick)
                logger.info(f"Polling clipboard every {interval}s")
            else:
                logger.info("Clipboard polling disabled")

    def _on_tick(self):
        self.read()

    def read(self) -> Snapshot:
        """
        Capture the clipboard into the history if it changed

        Returns:
            The new snapshot, or the most recent one if nothing changed
        """
        with self._lock:
            snapshot = self.engine.capture()
            if snapshot is None:
                return self.store.first() or Snapshot.empty()

            self.store.prepend(snapshot)
            self.persistence.persist(self.store)
            self.store.truncate()
            return snapshot

    def write(self, entry: Union[Snapshot, int]):
        """Restore a snapshot, given either the snapshot or its history position"""
        if isinstance(entry, Snapshot):
            self.write_entry(entry)
        else:
            self.write_index(entry)

    def write_entry(self, snapshot: Snapshot):
        with self._lock:
            self.engine.restore(snapshot)

    def write_index(self, index: int):
        """
        Restore the snapshot at a history position

        Raises:
            HistoryIndexError: If index is negative or past the end of the history
        """
        with self._lock:
            snapshot = self.store.get(index)
            self.engine.restore(snapshot)

    def clear(self):
        """Empty the history and the history file"""
        with self._lock:
            self.store.clear()
            self.persistence.persist(self.store)
        logger.info("Clipboard history cleared")

    def shutdown(self):
        """Flush the history to disk; registered to run at process exit"""
        with self._lock:
            self.persistence.persist(self.store)
        logger.info("History saved on shutdown")

    def close(self):
        """Stop polling, drop the settings subscription and save once more"""
        self._unsubscribe()
        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._timer_interval = None
        self.shutdown()
