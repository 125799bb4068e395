from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import current_context

_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# extras promoted to top-level keys when a call site passes them
PROMOTED_EXTRAS = ("endpoint", "status", "attempt", "error", "latency_ms")


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Everything worth keeping from a record, message excluded."""
    bound = getattr(record, "context", None)
    fields: Dict[str, Any] = {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "line": record.lineno,
    }
    fields.update({k: getattr(record, k) for k in PROMOTED_EXTRAS if getattr(record, k, None) is not None})
    ctx = bound if isinstance(bound, dict) else current_context()
    if ctx:
        fields["context"] = ctx
    return fields


class ConsoleFormatter(logging.Formatter):
    """``ts LEVEL [service] logger:line message key=value ...`` in level colour."""

    def format(self, record: logging.LogRecord) -> str:
        fields = record_fields(record)
        head = f"{fields.pop('timestamp')} {fields.pop('level'):<8} [{fields.pop('service') or '-'}]"
        where = f"{fields.pop('logger')}:{fields.pop('line')}"
        tail = {**fields.pop("context", {}), **fields}
        line = f"{head} {where} {record.getMessage()}"
        if tail:
            line += " " + " ".join(f"{k}={v}" for k, v in tail.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return f"{_COLORS.get(record.levelname, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = record_fields(record)
        payload["message"] = record.getMessage()
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        elif record.exc_text:
            payload["exception"] = record.exc_text
        return json.dumps(payload, default=str, separators=(",", ":"))
