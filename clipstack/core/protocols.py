"""Protocol definitions for the collaborators of the history engine."""

from typing import Callable, Optional, Protocol, Set


class ClipboardPort(Protocol):
    def change_count(self) -> int: ...

    def available_types(self) -> Set[str]: ...

    def read_bytes(self, content_type: str) -> Optional[bytes]: ...

    def read_text(self) -> Optional[str]: ...

    def supports_type(self, content_type: str) -> bool: ...

    def clear(self) -> None: ...

    def write_bytes(self, content_type: str, data: bytes) -> None: ...

    def frontmost_application_id(self) -> Optional[str]: ...


class ImageResizerPort(Protocol):
    def resize(self, data: bytes, width: int, height: int) -> bytes: ...

    def encode_as_png(self, data: bytes) -> Optional[bytes]: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class SchedulerPort(Protocol):
    def schedule(self, interval: float, callback: Callable[[], None]) -> TimerHandle: ...


class SettingsProviderPort(Protocol):
    @property
    def capacity(self) -> int: ...

    @property
    def poll_interval_seconds(self) -> float: ...

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]: ...
