"""Fake clipboard service for testing."""
from typing import Dict, Optional, Set


class FakeClipboard:
    """In-memory clipboard with a real change counter."""

    def __init__(self):
        """Initialize an empty clipboard."""
        self._items: Dict[str, bytes] = {}
        self._text: Optional[str] = None
        self._count = 0
        self._late: Dict[str, tuple] = {}
        self.frontmost_app: Optional[str] = "org.example.Editor"
        self.read_calls: Dict[str, int] = {}
        self.fail_reads = False
        self.unsupported: Set[str] = set()

    def copy(self, items: Dict[str, bytes], text: Optional[str] = None) -> None:
        """
        Simulate another application copying to the clipboard.

        Args:
            items: Content types and their bytes
            text: Plain text the clipboard reports, if any
        """
        self._items = dict(items)
        self._text = text
        self._late = {}
        self._count += 1

    def copy_text(self, text: str) -> None:
        """Simulate another application copying plain text."""
        self.copy({"text/plain": text.encode("utf-8")}, text=text)

    def add_late(self, content_type: str, data: bytes, after_reads: int) -> None:
        """
        Make a representation appear only after a number of reads of it.

        Args:
            content_type: Type that arrives late
            data: Its bytes
            after_reads: Reads that return nothing before data shows up
        """
        self._late[content_type] = (data, after_reads)

    def change_count(self) -> int:
        return self._count

    def available_types(self) -> Set[str]:
        return set(self._items)

    def read_bytes(self, content_type: str) -> Optional[bytes]:
        self.read_calls[content_type] = self.read_calls.get(content_type, 0) + 1
        if self.fail_reads:
            raise OSError("clipboard unavailable")
        if content_type in self._late:
            data, after_reads = self._late[content_type]
            if self.read_calls[content_type] > after_reads:
                return data
            return None
        return self._items.get(content_type)

    def read_text(self) -> Optional[str]:
        if self.fail_reads:
            raise OSError("clipboard unavailable")
        return self._text

    def supports_type(self, content_type: str) -> bool:
        return content_type not in self.unsupported

    def clear(self) -> None:
        self._items = {}
        self._text = None
        self._late = {}
        self._count += 1

    def write_bytes(self, content_type: str, data: bytes) -> None:
        self._items[content_type] = data
        if content_type == "text/plain":
            self._text = data.decode("utf-8", errors="replace")
        self._count += 1

    def frontmost_application_id(self) -> Optional[str]:
        return self.frontmost_app
