"""Fake image resizer for testing."""
from typing import List, Optional, Tuple


class FakeImageResizer:
    """Resizer that tags bytes instead of decoding images."""

    def __init__(self):
        """Initialize the fake resizer."""
        self.resize_calls: List[Tuple[bytes, int, int]] = []

    def resize(self, data: bytes, width: int, height: int) -> bytes:
        self.resize_calls.append((data, width, height))
        if data.startswith(b"broken"):
            raise OSError("cannot identify image file")
        return b"resized-%dx%d:" % (width, height) + data

    def encode_as_png(self, data: bytes) -> Optional[bytes]:
        return b"png:" + data
