"""Shared test fixtures."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from chat_history.domain.entities.message import Message
from chat_history.domain.entities.metadata import Metadata
from chat_history.domain.value_objects.enums import Direction, MessageSource
from chat_history.domain.value_objects.kind import Kind
from chat_history.domain.value_objects.server import Server
from chat_history.infrastructure.storage.directory import LazyDirectory
from chat_history.infrastructure.storage.metadata_file import JsonMetadataStore

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def server() -> Server:
    return Server("libera")


@pytest.fixture
def history_dir(tmp_path: Path) -> Path:
    return tmp_path / "history"


@pytest.fixture
def store(history_dir: Path) -> JsonMetadataStore:
    return JsonMetadataStore(LazyDirectory(history_dir))


def make_message(
    *,
    seconds: float = 0,
    source: str = MessageSource.USER,
    direction: str = Direction.RECEIVED,
    text: str = "hello",
) -> Message:
    return Message(
        server_time=BASE_TIME + timedelta(seconds=seconds),
        source=source,
        direction=direction,
        text=text,
    )


@dataclass
class FakeMetadataStore:
    """In-memory store for service tests."""
    _records: dict[tuple[Server, Kind], Metadata] = field(default_factory=dict)
    _writes: list[tuple[Server, Kind, Metadata]] = field(default_factory=list)
    _loads: list[tuple[Server, Kind]] = field(default_factory=list)

    async def load(self, server: Server, kind: Kind) -> Metadata:
        self._loads.append((server, kind))
        return self._records.get((server, kind), Metadata())

    async def write(self, server: Server, kind: Kind, metadata: Metadata) -> None:
        self._writes.append((server, kind, metadata))
        self._records[(server, kind)] = metadata
