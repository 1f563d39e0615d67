"""Read marker value object and its canonical text form.

Canonical form: RFC 3339 with a three-digit millisecond fraction and an
explicit offset, always emitted in UTC with a trailing ``Z``::

    2024-01-01T00:00:00.000Z
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from chat_history.application.exceptions import InvalidReadMarkerError

if TYPE_CHECKING:
    from chat_history.domain.entities.message import HistoryMessage

_TIMESTAMP_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}(?:Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def truncate_to_millis(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    try:
        dt = dt.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"timestamp out of range in UTC: {dt!r}") from exc
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)


def format_timestamp(dt: datetime) -> str:
    dt = truncate_to_millis(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime:
    if not isinstance(text, str) or _TIMESTAMP_RE.fullmatch(text) is None:
        raise InvalidReadMarkerError(f"invalid timestamp: {text!r}")
    try:
        return truncate_to_millis(datetime.fromisoformat(text))
    except ValueError as exc:
        raise InvalidReadMarkerError(f"invalid timestamp: {text!r}") from exc


@dataclass(frozen=True, order=True, slots=True)
class ReadMarker:
    """Everything at or before this instant counts as read."""

    value: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", truncate_to_millis(self.value))

    @classmethod
    def latest(cls, messages: Sequence[HistoryMessage]) -> ReadMarker | None:
        """Marker for the newest message that did not originate locally."""
        for message in reversed(messages):
            if not message.is_internal_origin():
                return cls(message.server_time)
        return None

    @classmethod
    def parse(cls, text: str) -> ReadMarker:
        return cls(parse_timestamp(text))

    def date_time(self) -> datetime:
        return self.value

    def __str__(self) -> str:
        return format_timestamp(self.value)
