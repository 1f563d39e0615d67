from __future__ import annotations

import logging
from collections.abc import Sequence

from chat_history.application.exceptions import StorageError
from chat_history.application.repositories.metadata import MetadataStore
from chat_history.domain.entities.message import HistoryMessage
from chat_history.domain.entities.metadata import Metadata, latest_triggers_unread
from chat_history.domain.value_objects.kind import Kind
from chat_history.domain.value_objects.read_marker import ReadMarker
from chat_history.domain.value_objects.server import Server

logger = logging.getLogger(__name__)


async def load(server: Server, kind: Kind, store: MetadataStore) -> Metadata:
    return await store.load(server, kind)


async def save(
    server: Server,
    kind: Kind,
    messages: Sequence[HistoryMessage],
    read_marker: ReadMarker | None,
    store: MetadataStore,
) -> None:
    """Overwrite the stored metadata with the caller's current view.

    Unlike :func:`update` this never consults what is already on disk, so
    passing ``read_marker=None`` clears the marker.
    """
    await store.write(
        server,
        kind,
        Metadata(
            read_marker=read_marker,
            last_triggers_unread=latest_triggers_unread(messages),
        ),
    )


async def update(
    server: Server,
    kind: Kind,
    read_marker: ReadMarker,
    store: MetadataStore,
) -> None:
    """Advance the stored read marker, never moving it backwards.

    Not atomic: concurrent updates of the same conversation can both read
    the old marker and the last write wins.
    """
    metadata = await store.load(server, kind)

    if metadata.read_marker is not None and metadata.read_marker >= read_marker:
        logger.debug(
            "Read marker %s for %s/%r already at %s",
            read_marker, server, kind, metadata.read_marker,
        )
        return

    await store.write(
        server,
        kind,
        Metadata(
            read_marker=read_marker,
            last_triggers_unread=metadata.last_triggers_unread,
        ),
    )


async def mark_read(
    server: Server,
    kind: Kind,
    messages: Sequence[HistoryMessage],
    store: MetadataStore,
) -> ReadMarker | None:
    """Update the read marker to the newest non-internal message.

    Returns the marker that was applied, or None when there was nothing to mark.
    """
    read_marker = ReadMarker.latest(messages)
    if read_marker is None:
        return None

    await update(server, kind, read_marker, store)
    return read_marker


async def mark_read_quietly(
    server: Server,
    kind: Kind,
    messages: Sequence[HistoryMessage],
    store: MetadataStore,
) -> ReadMarker | None:
    try:
        return await mark_read(server, kind, messages, store)
    except StorageError as exc:
        logger.warning("Failed to store read marker for %s/%r: %s", server, kind, exc.detail)
        return None
    except ValueError as exc:
        # e.g. a naive server_time that cannot become a read marker
        logger.warning("Cannot derive read marker for %s/%r: %s", server, kind, exc)
        return None
