"""Log sink protocol and its adapter over the standard ``logging`` module."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LogSink(Protocol):
    """Four independent severity channels, each taking an optional detail."""

    def debug(self, message: str, detail: Any = None) -> None: ...

    def info(self, message: str, detail: Any = None) -> None: ...

    def warn(self, message: str, detail: Any = None) -> None: ...

    def error(self, message: str, detail: Any = None) -> None: ...


class LoggingSink:
    """Forward sink calls to a ``logging.Logger``, appending detail as JSON."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def _emit(self, level: int, message: str, detail: Any) -> None:
        if detail:
            message = f"{message} {json.dumps(detail, default=str, separators=(',', ':'))}"
        self.logger.log(level, message)

    def debug(self, message: str, detail: Any = None) -> None:
        self._emit(logging.DEBUG, message, detail)

    def info(self, message: str, detail: Any = None) -> None:
        self._emit(logging.INFO, message, detail)

    def warn(self, message: str, detail: Any = None) -> None:
        self._emit(logging.WARNING, message, detail)

    def error(self, message: str, detail: Any = None) -> None:
        self._emit(logging.ERROR, message, detail)


def get_sink(name: str = "search_push") -> LoggingSink:
    return LoggingSink(logging.getLogger(name))


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler once; ``level`` is a name such as ``"DEBUG"``."""

    resolved = logging.getLevelName((level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "LogSink", "LoggingSink", "get_sink", "configure_logging"]
