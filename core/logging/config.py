from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .levels import register_levels, to_level
from .context import ContextFilter
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "analyzer",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "analyzer.jsonl",
    console: bool | None = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """
    Configure the root logger.

    Console output is on unless ``LOG_CONSOLE=false``; the JSON-lines file
    is written from a background ``QueueListener`` so request handlers
    never block on disk.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "true").strip().lower() == "true"
    if console:
        handler = logging.StreamHandler()
        handler.setLevel(to_level(os.getenv("LOG_CONSOLE_LEVEL"), default=lvl))
        handler.setFormatter(ConsoleFormatter())
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(ContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    logging.getLogger(__name__).debug("logging configured for %s", service)


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
