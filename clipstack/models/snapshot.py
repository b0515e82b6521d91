"""Clipboard snapshot model and its JSON record form."""

import base64
import binascii
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clipstack.core.content_types import NO_PREVIEW_TEXT, SOURCE_APPLICATION_TYPE

logger = logging.getLogger(__name__)


class SnapshotRecord(BaseModel):
    """Storable form of a snapshot, with content bytes as base64 text"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    display_text: str = Field(default=NO_PREVIEW_TEXT, alias="displayText")
    is_file: bool = Field(default=False, alias="isFile")
    content: Dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True)
class Snapshot:
    """One captured clipboard state with all of its representations.

    ``content`` is exposed as a read-only mapping so a snapshot can be
    shared between the history and callers without copying.
    """

    display_text: str
    is_file: bool
    content: Mapping[str, bytes] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "content", MappingProxyType(dict(self.content)))

    def __hash__(self):
        return hash((self.display_text, self.is_file, tuple(sorted(self.content.items()))))

    @classmethod
    def empty(cls) -> "Snapshot":
        """Placeholder returned when there is nothing in the history yet"""
        return cls(display_text="", is_file=False, content={SOURCE_APPLICATION_TYPE: b""})

    @property
    def source_application(self) -> str:
        return self.content.get(SOURCE_APPLICATION_TYPE, b"").decode("utf-8", errors="replace")

    def to_record(self) -> Dict[str, Any]:
        """Convert to a mapping of plain JSON values"""
        record = SnapshotRecord(
            display_text=self.display_text,
            is_file=self.is_file,
            content={
                content_type: base64.b64encode(data).decode("ascii")
                for content_type, data in self.content.items()
            },
        )
        return record.model_dump(by_alias=True)

    @classmethod
    def from_record(cls, record: Any) -> Optional["Snapshot"]:
        """
        Build a snapshot from its stored form

        Args:
            record: One element of the persisted history array

        Returns:
            The snapshot, or None if the record is malformed
        """
        if not isinstance(record, dict):
            logger.warning(f"Skipping history record of type {type(record).__name__}")
            return None

        try:
            parsed = SnapshotRecord.model_validate(record)
            content = {
                content_type: base64.b64decode(encoded, validate=True)
                for content_type, encoded in parsed.content.items()
            }
        except (ValidationError, binascii.Error, ValueError) as e:
            logger.warning(f"Skipping malformed history record: {e}")
            return None

        return cls(display_text=parsed.display_text, is_file=parsed.is_file, content=content)
