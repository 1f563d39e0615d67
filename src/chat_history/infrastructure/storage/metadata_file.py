from __future__ import annotations

import logging

import aiofiles
import pydantic

from chat_history.application.exceptions import IoWriteError, SerializationError
from chat_history.application.ports.directory import DirectoryResolver
from chat_history.domain.entities.metadata import Metadata
from chat_history.domain.value_objects.kind import Kind
from chat_history.domain.value_objects.server import Server
from chat_history.infrastructure.storage.directory import get_default_directory
from chat_history.infrastructure.storage.paths import resolve_path
from chat_history.infrastructure.storage.schema import MetadataDocument

logger = logging.getLogger(__name__)


class JsonMetadataStore:
    """One JSON file per (server, conversation) under the history directory.

    Reads never fail: a missing, unreadable or malformed file is the same as
    no metadata at all. Only directory resolution errors escape ``load``.
    """

    def __init__(self, directory: DirectoryResolver) -> None:
        self._directory = directory

    async def load(self, server: Server, kind: Kind) -> Metadata:
        path = await resolve_path(server, kind, self._directory)
        try:
            async with aiofiles.open(path, mode="rb") as f:
                raw = await f.read()
        except OSError:
            return Metadata()

        try:
            return MetadataDocument.model_validate_json(raw).to_metadata()
        except pydantic.ValidationError:
            logger.debug("Ignoring unreadable metadata file %s", path)
            return Metadata()

    async def write(self, server: Server, kind: Kind, metadata: Metadata) -> None:
        try:
            payload = MetadataDocument.from_metadata(metadata).model_dump_json()
        except ValueError as exc:
            raise SerializationError(f"cannot encode metadata: {exc}") from exc

        path = await resolve_path(server, kind, self._directory)
        try:
            async with aiofiles.open(path, mode="w", encoding="utf-8") as f:
                await f.write(payload)
        except OSError as exc:
            raise IoWriteError(f"cannot write {path}: {exc}") from exc


def get_default_store() -> JsonMetadataStore:
    return JsonMetadataStore(get_default_directory())
