"""Per-task logging context (player, match id, ...)."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_bound: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_fields", default={})


def current_context() -> Dict[str, Any]:
    return dict(_bound.get())


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Attach ``fields`` to every record logged inside the block.

    asyncio tasks start from a copy of the creating context, so fields bound
    inside one fan-out task stay out of its siblings.
    """
    merged = {**_bound.get(), **{k: v for k, v in fields.items() if v is not None}}
    token = _bound.set(merged)
    try:
        yield merged
    finally:
        _bound.reset(token)


class ContextFilter(logging.Filter):
    """Copy the bound fields onto the record while still in the emitting task."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = current_context()
        return True
