from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import List, Optional

from .context import ContextFilter
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: Optional[QueueListener] = None

# chatty third-party loggers, capped at WARNING
_QUIET_LOGGERS = ("httpx", "httpcore")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() == "true"


def _console_handler(default_level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    override = os.getenv("LOG_CONSOLE_LEVEL", "")
    handler.setLevel(to_level(override) if override else default_level)
    handler.setFormatter(ConsoleFormatter())
    handler.addFilter(ContextFilter())
    return handler


def _file_listener(path: Path, level: int, max_bytes: int, backup_count: int) -> tuple[logging.Handler, QueueListener]:
    """Queue front-end for the JSON file so coroutines never wait on disk writes."""
    file_handler = RotatingFileHandler(str(path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(JSONFormatter())

    queue: Queue[logging.LogRecord] = Queue(-1)
    front = QueueHandler(queue)
    front.addFilter(ContextFilter())
    return front, QueueListener(queue, file_handler, respect_handler_level=True)


def bootstrap_logging(
    *,
    service: str = "dota-assistant",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "dota-assistant.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """Console output (LOG_CONSOLE=true) plus an optional JSON-lines file in ``log_dir``."""
    global _listener
    shutdown_logging()
    register_levels()

    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    handlers: List[logging.Handler] = []
    if _env_flag("LOG_CONSOLE"):
        handlers.append(_console_handler(lvl))
    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        front, _listener = _file_listener(log_dir / log_file_name, lvl, max_bytes, backup_count)
        handlers.append(front)
        _listener.start()

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(lvl)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(__name__).debug("logging configured for %s", service)


def shutdown_logging() -> None:
    """Flush and stop the file listener, if any."""
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
