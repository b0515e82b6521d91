#!/usr/bin/env python3
"""
Capture Service - Detects clipboard changes and turns them into snapshots
"""
import logging
import time
from typing import Callable, Dict, Optional, Set

from clipstack.core.content_types import (
    DEFERRED_TYPES,
    EXCLUDED_TYPES,
    EXTRA_TYPES,
    FILE_REFERENCE_TYPES,
    ICON_THUMBNAIL_SIZE,
    ICON_TYPE,
    IMAGE_TYPES,
    NO_PREVIEW_TEXT,
    SOURCE_APPLICATION_TYPE,
)
from clipstack.core.protocols import ClipboardPort, ImageResizerPort
from clipstack.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class CaptureEngine:
    """Reads the clipboard into snapshots and writes snapshots back.

    The engine remembers the last clipboard change count it has seen so
    repeated polls of an unchanged clipboard are cheap, and so its own
    writes are not captured again. Callers are expected to serialize
    access (the history handler holds its lock around every call).
    """

    def __init__(
        self,
        clipboard: ClipboardPort,
        resizer: ImageResizerPort,
        icon_wait_interval: float = 0.005,
        icon_wait_attempts: int = 200,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize capture engine

        Args:
            clipboard: Clipboard service to read from and write to
            resizer: Image service used to shrink icons
            icon_wait_interval: Seconds between polls for a late icon
            icon_wait_attempts: Maximum number of icon polls
            sleep: Sleep function, replaceable in tests
            clock: Monotonic clock bounding the total icon wait
        """
        self.clipboard = clipboard
        self.resizer = resizer
        self.icon_wait_interval = icon_wait_interval
        self.icon_wait_attempts = icon_wait_attempts
        self._sleep = sleep
        self._clock = clock
        self.observed_change_count = self._safe_change_count()

    def _safe_change_count(self) -> Optional[int]:
        try:
            return self.clipboard.change_count()
        except Exception as e:
            logger.error(f"Error reading clipboard change count: {e}")
            return None

    def _safe_read(self, content_type: str) -> Optional[bytes]:
        try:
            return self.clipboard.read_bytes(content_type)
        except Exception as e:
            logger.warning(f"Error reading clipboard type {content_type}: {e}")
            return None

    def has_changed(self) -> bool:
        """Check whether the clipboard moved since the last observed change"""
        count = self._safe_change_count()
        return count is not None and count != self.observed_change_count

    def sync_change_count(self) -> bool:
        """Record the current change count, returning True if it differed"""
        count = self._safe_change_count()
        if count is None or count == self.observed_change_count:
            return False
        self.observed_change_count = count
        return True

    def _candidate_types(self) -> Set[str]:
        try:
            types = set(self.clipboard.available_types())
        except Exception as e:
            logger.warning(f"Error listing clipboard types: {e}")
            types = set()
        types.update(EXTRA_TYPES)
        return types - EXCLUDED_TYPES

    def _source_application(self) -> bytes:
        try:
            app_id = self.clipboard.frontmost_application_id()
        except Exception as e:
            logger.warning(f"Error reading frontmost application: {e}")
            app_id = None
        return (app_id or "").encode("utf-8")

    def _display_text(self) -> str:
        try:
            text = self.clipboard.read_text()
        except Exception as e:
            logger.warning(f"Error reading clipboard text: {e}")
            text = None
        return text if text is not None else NO_PREVIEW_TEXT

    def _wait_for(self, content_type: str) -> Optional[bytes]:
        """
        Poll for a representation that arrives after the clipboard changed

        Gives up after icon_wait_attempts polls or once their combined
        interval has elapsed, whichever comes first, and as soon as the
        clipboard changes again.
        """
        deadline = self._clock() + self.icon_wait_interval * self.icon_wait_attempts
        for _ in range(self.icon_wait_attempts):
            data = self._safe_read(content_type)
            if data is not None:
                return data
            if self.has_changed():
                logger.info(f"Clipboard changed while waiting for {content_type}, giving up")
                return None
            if self._clock() >= deadline:
                break
            self._sleep(self.icon_wait_interval)
        data = self._safe_read(content_type)
        if data is None:
            logger.info(f"No {content_type} data after waiting")
        return data

    def _supports(self, content_type: str) -> bool:
        try:
            return self.clipboard.supports_type(content_type)
        except Exception as e:
            logger.warning(f"Error checking clipboard support for {content_type}: {e}")
            return False

    def _shrink_icon(self, data: bytes) -> Optional[bytes]:
        try:
            resized = self.resizer.resize(data, ICON_THUMBNAIL_SIZE, ICON_THUMBNAIL_SIZE)
            return self.resizer.encode_as_png(resized)
        except Exception as e:
            logger.warning(f"Dropping undecodable icon ({len(data)} bytes): {e}")
            return None

    def capture(self) -> Optional[Snapshot]:
        """
        Capture the clipboard if it changed since the last observation

        Returns:
            A new snapshot, or None if the clipboard is unchanged
        """
        if not self.sync_change_count():
            return None

        content: Dict[str, bytes] = {}
        for content_type in self._candidate_types():
            data = self._safe_read(content_type)
            if data is not None:
                content[content_type] = data

        if SOURCE_APPLICATION_TYPE not in content:
            content[SOURCE_APPLICATION_TYPE] = self._source_application()

        has_file = any(t in content for t in FILE_REFERENCE_TYPES)
        is_file = has_file or any(t in content for t in IMAGE_TYPES)
        display_text = self._display_text()

        if has_file:
            for content_type in DEFERRED_TYPES:
                if content_type not in content and self._supports(content_type):
                    data = self._wait_for(content_type)
                    if data is not None:
                        content[content_type] = data

        if ICON_TYPE in content:
            icon = self._shrink_icon(content[ICON_TYPE])
            if icon is None:
                del content[ICON_TYPE]
            else:
                content[ICON_TYPE] = icon

        snapshot = Snapshot(display_text=display_text, is_file=is_file, content=content)
        logger.info(f"Captured clipboard: {len(content)} type(s), file={is_file}")
        return snapshot

    def restore(self, snapshot: Snapshot):
        """
        Put a snapshot back on the clipboard

        Args:
            snapshot: Snapshot whose representations are written
        """
        try:
            self.clipboard.clear()
            for content_type, data in snapshot.content.items():
                self.clipboard.write_bytes(content_type, data)
        except Exception as e:
            logger.error(f"Error writing snapshot to clipboard: {e}")
        else:
            logger.info(f"Restored snapshot to clipboard: {len(snapshot.content)} type(s)")
        # Our own write bumps the counter; don't capture it as a new change
        self.observed_change_count = self._safe_change_count()
