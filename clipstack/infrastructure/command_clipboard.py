"""Linux clipboard access through the wl-clipboard and xclip command-line tools.

Neither tool exposes a change counter, so one is synthesized: every call to
``change_count()`` fingerprints the advertised targets plus the preferred
representation and bumps the counter when the fingerprint moves. Writes
through this adapter bump it as well.
"""

import hashlib
import logging
import os
import shutil
import subprocess
import threading
from typing import Dict, List, Optional, Set

from clipstack.core.content_types import (
    FILE_REFERENCE_TYPES,
    ICON_TYPE,
    IMAGE_TYPES,
    PLAIN_TEXT_TYPES,
    SOURCE_APPLICATION_TYPE,
)

logger = logging.getLogger(__name__)

WAYLAND = "wayland"
X11 = "x11"

# Kept in snapshots but never offered to other applications
INTERNAL_TYPES = frozenset({SOURCE_APPLICATION_TYPE, ICON_TYPE})

# Preview text targets, best first. ICCCM STRING is ISO-8859-1.
TEXT_TYPE_PRIORITY = (
    "text/plain;charset=utf-8",
    "UTF8_STRING",
    "text/plain",
    "TEXT",
    "STRING",
)
LATIN1_TEXT_TYPES = frozenset({"STRING"})


def detect_backend() -> Optional[str]:
    """Pick the clipboard tool matching the running session"""
    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste") and shutil.which("wl-copy"):
        return WAYLAND
    if shutil.which("xclip"):
        return X11
    return None


def preferred_type(types) -> Optional[str]:
    """Richest representation among types: files, then images, then text"""
    candidates = [t for t in types if t not in INTERNAL_TYPES]
    for group in (FILE_REFERENCE_TYPES, IMAGE_TYPES, PLAIN_TEXT_TYPES):
        for content_type in sorted(candidates):
            if content_type in group:
                return content_type
    return candidates[-1] if candidates else None


class CommandClipboard:
    """Clipboard service backed by wl-paste/wl-copy or xclip"""

    def __init__(self, backend: Optional[str] = None, timeout: float = 1.5):
        """
        Initialize command clipboard

        Args:
            backend: "wayland" or "x11"; detected from the session when omitted
            timeout: Seconds before a clipboard command is abandoned
        """
        self.backend = backend or detect_backend()
        self.timeout = timeout
        self._count = 0
        self._fingerprint: Optional[str] = None
        self._staged: Dict[str, bytes] = {}
        self._lock = threading.Lock()

        if self.backend is None:
            logger.warning("Neither wl-clipboard nor xclip found; clipboard will read as empty")
        else:
            logger.info(f"Using {self.backend} clipboard tools")

    def _run_command(self, command: List[str]) -> Optional[bytes]:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=self.timeout,
            )
            return result.stdout
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            logger.debug(f"Clipboard command {command[0]} failed: {e}")
            return None

    def _feed_command(self, command: List[str], data: bytes) -> bool:
        # The copy tools fork to serve the selection; their output must not be
        # piped or the call blocks until the selection is taken over.
        try:
            subprocess.run(
                command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self.timeout,
            )
            return True
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            logger.warning(f"Clipboard command {command[0]} failed: {e}")
            return False

    def available_types(self) -> Set[str]:
        if self.backend == WAYLAND:
            output = self._run_command(["wl-paste", "--list-types"])
        elif self.backend == X11:
            output = self._run_command(["xclip", "-selection", "clipboard", "-t", "TARGETS", "-o"])
        else:
            return set()

        if not output:
            return set()
        text = output.decode("utf-8", errors="ignore")
        return {line.strip() for line in text.splitlines() if line.strip()}

    def read_bytes(self, content_type: str) -> Optional[bytes]:
        if content_type in INTERNAL_TYPES:
            return None
        if self.backend == WAYLAND:
            return self._run_command(["wl-paste", "--no-newline", "--type", content_type])
        if self.backend == X11:
            return self._run_command(["xclip", "-selection", "clipboard", "-t", content_type, "-o"])
        return None

    def read_text(self) -> Optional[str]:
        types = self.available_types()
        for content_type in TEXT_TYPE_PRIORITY:
            if content_type not in types:
                continue
            data = self.read_bytes(content_type)
            if data is None:
                continue
            if content_type in LATIN1_TEXT_TYPES:
                return data.decode("latin-1")
            return data.decode("utf-8", errors="replace")
        return None

    def supports_type(self, content_type: str) -> bool:
        """Internal types are never served by the command-line tools"""
        return self.backend is not None and content_type not in INTERNAL_TYPES

    def change_count(self) -> int:
        types = self.available_types()
        digest = hashlib.sha256()
        for content_type in sorted(types):
            digest.update(content_type.encode("utf-8") + b"\0")
        preferred = preferred_type(types)
        if preferred is not None:
            digest.update(self.read_bytes(preferred) or b"")
        fingerprint = digest.hexdigest()

        with self._lock:
            if fingerprint != self._fingerprint:
                self._fingerprint = fingerprint
                self._count += 1
            return self._count

    def clear(self):
        with self._lock:
            self._staged = {}
            self._count += 1
            self._fingerprint = None

        if self.backend == WAYLAND:
            self._feed_command(["wl-copy", "--clear"], b"")
        elif self.backend == X11:
            self._feed_command(["xclip", "-selection", "clipboard", "-i"], b"")

    def write_bytes(self, content_type: str, data: bytes):
        """Stage a representation and offer the richest one staged so far.

        The command-line tools serve a single target per process, so only
        the preferred representation reaches other applications.
        """
        with self._lock:
            self._staged[content_type] = data
            offered = preferred_type(self._staged)
            self._count += 1
            self._fingerprint = None

        if offered != content_type:
            return

        if self.backend == WAYLAND:
            self._feed_command(["wl-copy", "--type", content_type], data)
        elif self.backend == X11:
            self._feed_command(["xclip", "-selection", "clipboard", "-t", content_type, "-i"], data)

    def frontmost_application_id(self) -> Optional[str]:
        if not shutil.which("xdotool"):
            return None
        output = self._run_command(["xdotool", "getactivewindow", "getwindowclassname"])
        if not output:
            return None
        return output.decode("utf-8", errors="replace").strip() or None
