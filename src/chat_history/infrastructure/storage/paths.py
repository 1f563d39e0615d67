"""Mapping of (server, conversation) to metadata file names.

Names are hashed with xxHash64 to keep them short and filesystem-safe for
any channel or nickname. Two distinct names hashing to the same value would
share a file; with a 64-bit space this is accepted and not checked for.
"""
from __future__ import annotations

from pathlib import Path

import xxhash

from chat_history.application.ports.directory import DirectoryResolver
from chat_history.domain.value_objects.kind import Channel, Kind, Logs, Query, ServerKind
from chat_history.domain.value_objects.server import Server


def canonical_name(server: Server, kind: Kind) -> str:
    match kind:
        case ServerKind():
            return f"{server}-metadata"
        case Channel(name=channel):
            return f"{server}channel{channel}-metadata"
        case Query(nick=nick):
            return f"{server}nickname{nick}-metadata"
        case Logs():
            return "log-metadata"
    raise TypeError(f"unknown conversation kind: {kind!r}")


def file_name(server: Server, kind: Kind) -> str:
    hashed = xxhash.xxh64_intdigest(canonical_name(server, kind).encode("utf-8"))
    return f"{hashed}.json"


async def resolve_path(
    server: Server,
    kind: Kind,
    directory: DirectoryResolver,
) -> Path:
    base = await directory.resolve()
    return base / file_name(server, kind)
