#!/usr/bin/env python3
"""
History Store - Ordered, capacity-bounded list of clipboard snapshots
"""
import json
import logging
from typing import Iterable, List, Optional, Tuple

from clipstack.core.exceptions import HistoryIndexError
from clipstack.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


class HistoryStore:
    """In-memory clipboard history, most recent snapshot first.

    Not thread-safe on its own; the history handler serializes access.
    """

    def __init__(self, capacity: int, entries: Optional[Iterable[Snapshot]] = None):
        """
        Initialize history store

        Args:
            capacity: Maximum number of snapshots retained after truncation
            entries: Optional initial snapshots, most recent first
        """
        self._capacity = capacity
        self._entries: List[Snapshot] = list(entries or [])

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int):
        self._capacity = value

    @property
    def entries(self) -> Tuple[Snapshot, ...]:
        return tuple(self._entries)

    def first(self) -> Optional[Snapshot]:
        return self._entries[0] if self._entries else None

    def get(self, index: int) -> Snapshot:
        """Return the snapshot at a history position, raising HistoryIndexError if absent"""
        if index < 0 or index >= len(self._entries):
            raise HistoryIndexError(index, len(self._entries))
        return self._entries[index]

    def prepend(self, snapshot: Snapshot):
        self._entries.insert(0, snapshot)

    def truncate(self, capacity: Optional[int] = None) -> int:
        """
        Drop the oldest snapshots beyond capacity

        Args:
            capacity: Limit to apply; defaults to the store's capacity

        Returns:
            Number of snapshots removed
        """
        limit = self._capacity if capacity is None else capacity
        limit = max(limit, 0)
        overflow = len(self._entries) - limit
        if overflow <= 0:
            return 0
        del self._entries[limit:]
        logger.info(f"Dropped {overflow} old snapshot(s) beyond capacity {limit}")
        return overflow

    def clear(self):
        self._entries.clear()

    def serialize(self) -> str:
        """Render the history as a pretty-printed JSON array, or "" on failure"""
        try:
            return json.dumps([entry.to_record() for entry in self._entries], indent=2)
        except (TypeError, ValueError) as e:
            logger.error(f"Error serializing history: {e}")
            return ""

    @staticmethod
    def deserialize(text: str) -> List[Snapshot]:
        """
        Parse a persisted history

        Args:
            text: JSON array of snapshot records

        Returns:
            Snapshots that could be parsed, in stored order
        """
        try:
            records = json.loads(text)
        except (TypeError, ValueError) as e:
            logger.error(f"Error parsing history JSON: {e}")
            return []

        if not isinstance(records, list):
            logger.error(f"History JSON is a {type(records).__name__}, expected an array")
            return []

        snapshots = []
        for record in records:
            snapshot = Snapshot.from_record(record)
            if snapshot is not None:
                snapshots.append(snapshot)

        skipped = len(records) - len(snapshots)
        if skipped:
            logger.warning(f"Skipped {skipped} unreadable history record(s)")
        return snapshots
