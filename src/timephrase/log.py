"""Logging setup for timephrase.

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves. Applications (and the CLI) call ``configure_logging`` to
attach a single handler to the ``timephrase`` logger.

Example output (console):
    2019-01-01 00:00:00 DEBUG [timephrase.engine] Classified offset: tense=past unit=minute amount=1

Example output (json):
    {"timestamp": "2019-01-01T00:00:00+00:00", "level": "debug", "logger": "timephrase.engine", ...}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

ROOT_LOGGER = "timephrase"

_HANDLER_ATTR = "_timephrase_handler"


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter with optional ANSI colors."""

    COLORS = {
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(
        self,
        *,
        color: bool = True,
        show_timestamp: bool = True,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
    ) -> None:
        super().__init__()
        self._color = color
        self._show_timestamp = show_timestamp
        self._timestamp_format = timestamp_format

    def format(self, record: logging.LogRecord) -> str:
        parts = []

        if self._show_timestamp:
            ts = datetime.fromtimestamp(record.created).strftime(self._timestamp_format)
            parts.append(ts)

        level = record.levelname.ljust(5)
        if self._color:
            color = self.COLORS.get(record.levelno, "")
            level = f"{color}{level}{self.RESET}"
        parts.append(level)

        parts.append(f"[{record.name}]")
        parts.append(record.getMessage())

        result = " ".join(parts)
        if record.exc_info:
            result = f"{result}\n{self.formatException(record.exc_info)}"
        return result


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log aggregation."""

    def __init__(self, *, sort_keys: bool = False, ensure_ascii: bool = False) -> None:
        super().__init__()
        self._sort_keys = sort_keys
        self._ensure_ascii = ensure_ascii

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(
            data,
            sort_keys=self._sort_keys,
            ensure_ascii=self._ensure_ascii,
            default=str,
        )


def configure_logging(
    *,
    level: int | str = logging.WARNING,
    format: str = "console",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``timephrase`` logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: Log level name or number.
        format: Output format ("console" or "json").
        stream: Output stream (defaults to stderr).

    Returns:
        The configured logger.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    stream = stream or sys.stderr
    if format == "json":
        formatter: logging.Formatter = JSONFormatter()
    elif format == "console":
        formatter = ConsoleFormatter(color=stream.isatty())
    else:
        raise ValueError(f"Unknown log format: {format!r}")

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
