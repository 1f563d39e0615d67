from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Server:
    """Configured server connection, identified by its name."""

    name: str

    def __str__(self) -> str:
        return self.name
