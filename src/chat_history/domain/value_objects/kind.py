"""Identities of the conversations whose read-state is tracked."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ServerKind:
    """The server connection buffer itself."""


@dataclass(frozen=True, slots=True)
class Channel:
    name: str


@dataclass(frozen=True, slots=True)
class Query:
    nick: str


@dataclass(frozen=True, slots=True)
class Logs:
    """Aggregate log view, not tied to any server."""


Kind: TypeAlias = ServerKind | Channel | Query | Logs
