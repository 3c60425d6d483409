"""
Logger setup for the inventory service.

Loggers are plain standard library loggers living under the ``ivms_inventory``
namespace. ``configure_logging`` attaches a single stdout handler using the
``StructuredFormatter``, which renders ``extra`` values either as trailing
``key=value`` pairs or, in JSON mode, as one JSON object per line so that the
serverless log collector can index them.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import sys
import uuid
from typing import Any

from ivms_inventory.logging.config import LoggingSettings
from ivms_inventory.logging.level import LogLevel

ROOT_LOGGER_NAME = "ivms_inventory"

# Attributes every LogRecord carries; anything else was passed through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(record, super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **{key: _json_value(value) for key, value in extra.items()},
        }

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data)

    def _format_text(
        self, record: logging.LogRecord, message: str, extra: dict[str, Any]
    ) -> str:
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        return str(_json_value(value))


def _json_value(value: Any) -> Any:
    """Convert special types to JSON-serializable values."""
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_json_value(item) for item in value]
    if isinstance(value, dict):
        return {str(k): _json_value(v) for k, v in value.items()}
    return str(value)


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Configure the package root logger.

    Calling this more than once replaces the previously installed handler.

    Args:
        settings: Optional logging settings (loads from environment if None)

    Returns:
        The configured package root logger
    """
    settings = settings or LoggingSettings.load()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(LogLevel.from_string(settings.level).to_stdlib_level())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        StructuredFormatter(
            json_format=settings.json_format,
            include_timestamp=settings.include_timestamp,
            include_level=settings.include_level,
        )
    )
    logger.addHandler(console)
    # The Lambda runtime installs its own root handler
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the package namespace.

    Args:
        name: Logger name (typically __name__)
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
