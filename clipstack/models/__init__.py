"""Data models."""

from .snapshot import Snapshot, SnapshotRecord

__all__ = ["Snapshot", "SnapshotRecord"]
