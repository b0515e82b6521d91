"""Fake settings provider for testing."""
from typing import Callable, List


class FakeSettingsProvider:
    """In-memory settings with change notification."""

    def __init__(self, capacity: int = 5, poll_interval_seconds: float = 0.5):
        self.capacity = capacity
        self.poll_interval_seconds = poll_interval_seconds
        self._listeners: List[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def change(self, **values) -> None:
        """Update settings and notify subscribers."""
        for key, value in values.items():
            setattr(self, key, value)
        for listener in list(self._listeners):
            listener()

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)
