from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from ...config import settings
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None
_handlers: list[logging.Handler] = []

LIBRARY_LOGGER = "faceit_data"


def bootstrap_logging(
    *,
    level: str | int | None = None,
    console: bool | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "faceit.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """Attach handlers to the ``faceit_data`` logger.

    Meant for applications and scripts; the library itself never calls it.
    Console output is on when ``console`` is true or FACEIT_LOG_CONSOLE=true.
    File output (JSON lines, rotated, written through a queue listener) is on
    when ``log_dir`` is given or FACEIT_LOG_DIR is set; the level defaults to
    FACEIT_LOG_LEVEL. Calling it again replaces the previous setup.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger(LIBRARY_LOGGER)
    lvl = to_level(level or settings.LOG_LEVEL)
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("FACEIT_LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        stream = logging.StreamHandler()
        stream.setLevel(lvl)
        stream.setFormatter(ConsoleFormatter())
        root.addHandler(stream)
        _handlers.append(stream)

    if log_dir is None:
        log_dir = settings.LOG_DIR
    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        root.addHandler(qh)
        _handlers.append(qh)
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()

    return root


def shutdown_logging() -> None:
    """Stop the queue listener and detach handlers added by ``bootstrap_logging``."""
    global _listener
    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
    root = logging.getLogger(LIBRARY_LOGGER)
    while _handlers:
        handler = _handlers.pop()
        root.removeHandler(handler)
        handler.close()
