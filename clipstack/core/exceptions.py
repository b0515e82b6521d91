"""Exceptions raised by clipstack."""


class ClipstackError(Exception):
    """Base class for clipstack errors"""


class HistoryIndexError(ClipstackError, IndexError):
    """Raised when a history position does not exist"""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"History index {index} out of range (history holds {size} entries)")
