"""Logging configuration for SkinPack.

The library never configures handlers on import: loggers live under the
``skinpack`` namespace and stay silent until the application (usually the
CLI) calls :func:`setup_logging`.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER_NAME = "skinpack"
DEFAULT_FORMAT = "%(levelname)-5s | %(name)-18s | %(message)s"
VERBOSE_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)-18s | %(message)s"
_SETUP_LOCK = threading.Lock()

# LogRecord attributes forwarded to JSON output when passed via ``extra=``
_EXTRA_FIELDS = ("skin_id", "skin_name", "stage")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with per-skin context when present."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(fmt: str, json_logs: bool) -> logging.Formatter:
    return JsonFormatter() if json_logs else logging.Formatter(fmt)


def _stderr_handler(logger: logging.Logger) -> logging.StreamHandler:
    """Return the single stderr handler on *logger*, creating it if needed."""
    existing = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        and getattr(h, "stream", None) is sys.stderr
    ]
    for extra in existing[1:]:
        logger.removeHandler(extra)
    if existing:
        return existing[0]
    handler = logging.StreamHandler(sys.stderr)
    logger.addHandler(handler)
    return handler


def _file_handler(logger: logging.Logger, log_file: str) -> logging.FileHandler:
    target = os.path.abspath(str(log_file))
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == target:
            return h
    handler = logging.FileHandler(target, encoding="utf-8")
    logger.addHandler(handler)
    return handler


def setup_logging(
    level: int = logging.INFO,
    verbose: bool = False,
    log_file: str | None = None,
    json_logs: bool = False,
) -> None:
    """Configure handlers on the ``skinpack`` logger.

    Repeated calls are safe: the stderr handler is reused (and duplicates
    dropped) and a file handler is only added once per target path.

    Args:
        level: Logging level (default: INFO).
        verbose: If True, include timestamps in console output.
        log_file: Optional file path to write logs to (in addition to stderr).
            File output always uses the verbose format.
        json_logs: Emit structured JSON log lines on every handler.
    """
    with _SETUP_LOCK:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(level)

        console_fmt = VERBOSE_FORMAT if verbose else DEFAULT_FORMAT
        _stderr_handler(logger).setFormatter(_make_formatter(console_fmt, json_logs))

        if log_file:
            _file_handler(logger, log_file).setFormatter(
                _make_formatter(VERBOSE_FORMAT, json_logs)
            )


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a SkinPack module.

    Args:
        name: Module name (e.g., ``"generator"``, ``"preview"``).

    Returns:
        A logger instance under the ``skinpack`` namespace.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
