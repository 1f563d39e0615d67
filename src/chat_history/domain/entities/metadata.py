from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from chat_history.domain.entities.message import HistoryMessage
from chat_history.domain.value_objects.read_marker import ReadMarker


@dataclass(frozen=True, slots=True)
class Metadata:
    """Persisted read-state of a single conversation."""

    read_marker: ReadMarker | None = None
    last_triggers_unread: datetime | None = None


def latest_triggers_unread(messages: Sequence[HistoryMessage]) -> datetime | None:
    for message in reversed(messages):
        if message.triggers_unread():
            return message.server_time
    return None
