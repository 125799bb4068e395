from __future__ import annotations

import logging
from typing import Any, Callable, MutableMapping, Optional, Union

from .levels import LogLevel

LazyMessage = Union[str, Callable[[], str]]


class StructuredLogger(logging.LoggerAdapter):
    """Logger adapter that tags records with a service name.

    Messages may be zero-argument callables; they are only rendered when the
    level is enabled, which keeps f-strings off the hot request path.
    """

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        super().__init__(logger, {"service": service} if service else {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs

    def log(self, level: int, msg: LazyMessage, *args: Any, **kwargs: Any) -> None:
        if not self.isEnabledFor(level):
            return
        if callable(msg):
            try:
                msg = msg()
            except Exception as exc:
                msg = f"<lazy message failed: {exc!r}>"
        super().log(level, msg, *args, **kwargs)

    def trace(self, msg: LazyMessage, *args: Any, **kwargs: Any) -> None:
        self.log(int(LogLevel.TRACE), msg, *args, **kwargs)

    def success(self, msg: LazyMessage, *args: Any, **kwargs: Any) -> None:
        self.log(int(LogLevel.SUCCESS), msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name), service=service)
