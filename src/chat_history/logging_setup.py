"""Logging setup for host applications.

The library itself only creates module loggers; a host process calls
:func:`configure_logging` once from its entry point.
"""
from __future__ import annotations

import logging

from chat_history.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
