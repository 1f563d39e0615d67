from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DirectoryResolver(Protocol):
    """Locates (and creates) the directory metadata files live in."""

    async def resolve(self) -> Path: ...
