from __future__ import annotations

from typing import Protocol

from chat_history.domain.entities.metadata import Metadata
from chat_history.domain.value_objects.kind import Kind
from chat_history.domain.value_objects.server import Server


class MetadataStore(Protocol):
    async def load(self, server: Server, kind: Kind) -> Metadata: ...
    async def write(self, server: Server, kind: Kind, metadata: Metadata) -> None: ...
