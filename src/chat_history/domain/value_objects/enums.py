from __future__ import annotations

from enum import StrEnum


class MessageSource(StrEnum):
    USER = "user"
    ACTION = "action"
    SERVER = "server"
    INTERNAL = "internal"


class Direction(StrEnum):
    SENT = "sent"
    RECEIVED = "received"
