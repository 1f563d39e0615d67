from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from chat_history.domain.value_objects.enums import Direction, MessageSource


class HistoryMessage(Protocol):
    """What the read-state engine needs to know about a message."""

    @property
    def server_time(self) -> datetime: ...

    def is_internal_origin(self) -> bool: ...
    def triggers_unread(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class Message:
    server_time: datetime
    source: str
    direction: str = Direction.RECEIVED
    text: str = ""

    def is_internal_origin(self) -> bool:
        return self.source == MessageSource.INTERNAL

    def triggers_unread(self) -> bool:
        # Only things another person said to us light up the buffer.
        return (
            self.direction == Direction.RECEIVED
            and self.source in (MessageSource.USER, MessageSource.ACTION)
        )
