#!/usr/bin/env python3
"""
Persistence Service - Mirrors the clipboard history to a JSON file
"""
import logging
import os
from pathlib import Path
from typing import List, Union

from clipstack.models.snapshot import Snapshot
from clipstack.services.history_store import HistoryStore

logger = logging.getLogger(__name__)


class PersistenceService:
    """Best-effort reads and writes of the history file.

    Failures are logged and swallowed; the in-memory history stays
    authoritative.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize persistence service

        Args:
            path: Location of the history JSON file
        """
        self.path = Path(path)

    def persist(self, store: HistoryStore) -> bool:
        """
        Write the store to disk

        Args:
            store: History to save

        Returns:
            True if the file was written
        """
        text = store.serialize()
        if not text:
            logger.error(f"History could not be serialized, keeping {self.path} as is")
            return False

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error saving history to {self.path}: {e}")
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                pass
            return False

        logger.debug(f"Saved {len(store)} snapshot(s) to {self.path}")
        return True

    def load(self) -> List[Snapshot]:
        """Read snapshots from disk; a missing or corrupt file yields an empty list"""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            logger.info(f"No history file at {self.path}, starting empty")
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading history from {self.path}: {e}")
            return []

        snapshots = HistoryStore.deserialize(text)
        logger.info(f"Loaded {len(snapshots)} snapshot(s) from {self.path}")
        return snapshots
