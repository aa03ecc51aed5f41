"""
stencil Logging

Thin structured wrapper over the standard ``logging`` module. Loggers accept
keyword context that is rendered as ``key=value`` pairs (text mode) or as a
``ctx`` object (JSON mode):

    logger = get_logger(__name__)
    logger.debug("Registered template", path="pages/home")

A request id can be bound for the current task with ``set_request_id`` and is
attached to every record emitted while it is set.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVELS, STENCIL_VERSION, EnvVars

ROOT_LOGGER_NAME = "stencil"

_request_id: ContextVar[Optional[str]] = ContextVar("stencil_request_id", default=None)


def set_request_id(request_id: str) -> None:
    """Bind a request id to the current context."""
    _request_id.set(request_id)


def get_request_id() -> Optional[str]:
    """Return the request id bound to the current context, if any."""
    return _request_id.get()


def clear_request_id() -> None:
    """Remove the request id from the current context."""
    _request_id.set(None)


class JsonLogFormatter(logging.Formatter):
    """Emit records as compact JSON with a fixed schema.

    Fields: ts, level, module, msg, version, plus request_id and ctx when set.
    """

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": STENCIL_VERSION,
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            payload["request_id"] = request_id
        ctx = getattr(record, "context", None)
        if ctx:
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextLogFormatter(logging.Formatter):
    """Plain text formatter that appends structured context as key=value."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = []
        request_id = getattr(record, "request_id", None)
        if request_id:
            extras.append(f"request_id={request_id}")
        ctx = getattr(record, "context", None) or {}
        extras.extend(f"{key}={value!r}" for key, value in ctx.items())
        if extras:
            line = f"{line} | {' '.join(extras)}"
        return line


class _StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


class StencilLogger:
    """Logger accepting structured keyword context."""

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = {"context": context, "request_id": get_request_id()}
        self._logger.log(level, message, exc_info=exc_info, extra=extra)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: bool = False, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **context)


def get_logger(name: Optional[str] = None) -> StencilLogger:
    """Return a structured logger namespaced under ``stencil``."""
    if not name or name == ROOT_LOGGER_NAME:
        return StencilLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return StencilLogger(name)
    return StencilLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the base ``stencil`` logger.

    Handlers are installed once; later calls only adjust the level.

    Args:
        level: One of LOG_LEVELS (defaults to $STENCIL_LOG_LEVEL or "info")
        json_format: Emit JSON lines (defaults to $STENCIL_LOG_JSON == "1")
        stream: Output stream (stderr by default)

    Returns:
        The configured base logger
    """
    level_name = (level or os.getenv(EnvVars.LOG_LEVEL) or DEFAULT_LOG_LEVEL).lower()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: '{level_name}'. Valid levels: {', '.join(LOG_LEVELS)}")
    if json_format is None:
        json_format = os.getenv(EnvVars.LOG_JSON) == "1"

    base = logging.getLogger(ROOT_LOGGER_NAME)
    base.setLevel(level_name.upper())
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    handler.setFormatter(JsonLogFormatter() if json_format else TextLogFormatter())
    base.addHandler(handler)
    return base
