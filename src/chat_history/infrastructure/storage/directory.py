from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from chat_history.application.exceptions import DirectoryResolutionError
from chat_history.config import settings

logger = logging.getLogger(__name__)


class LazyDirectory:
    """Resolves the configured history directory on first use and caches it.

    Holds no event-loop bound state, so the process-wide instance can be shared
    by successive loops. Concurrent first calls may both run the idempotent
    mkdir.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._resolved: Path | None = None

    async def resolve(self) -> Path:
        if self._resolved is not None:
            return self._resolved
        path = (self._path or settings.HISTORY_DIR).expanduser()
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryResolutionError(
                f"cannot create history directory {path}: {exc}"
            ) from exc
        if self._resolved is None:
            logger.info("History directory resolved to %s", path)
            self._resolved = path
        return self._resolved


_default: LazyDirectory | None = None


def get_default_directory() -> LazyDirectory:
    """Process-wide resolver backed by ``settings.HISTORY_DIR``."""
    global _default  # noqa: PLW0603
    if _default is None:
        _default = LazyDirectory()
    return _default
