"""On-disk JSON document for a conversation's read-state."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from chat_history.domain.entities.metadata import Metadata
from chat_history.domain.value_objects.read_marker import (
    ReadMarker,
    format_timestamp,
    parse_timestamp,
)


class MetadataDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    read_marker: str | None = None
    last_triggers_unread: str | None = None

    @field_validator("read_marker", "last_triggers_unread")
    @classmethod
    def _check_timestamp(cls, value: str | None) -> str | None:
        if value is not None:
            parse_timestamp(value)
        return value

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> MetadataDocument:
        last = metadata.last_triggers_unread
        return cls(
            read_marker=None if metadata.read_marker is None else str(metadata.read_marker),
            last_triggers_unread=None if last is None else format_timestamp(last),
        )

    def to_metadata(self) -> Metadata:
        return Metadata(
            read_marker=None if self.read_marker is None else ReadMarker.parse(self.read_marker),
            last_triggers_unread=(
                None if self.last_triggers_unread is None
                else parse_timestamp(self.last_triggers_unread)
            ),
        )
