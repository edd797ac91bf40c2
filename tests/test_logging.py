"""Tests for skinpack.logging module."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

from skinpack.logging import (
    DEFAULT_FORMAT,
    VERBOSE_FORMAT,
    JsonFormatter,
    get_logger,
    setup_logging,
)


def _stream_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
    ]


class TestGetLogger:
    """Tests for the get_logger factory function."""

    def test_returns_namespaced_logger(self) -> None:
        """Loggers live under the skinpack namespace."""
        assert get_logger("generator").name == "skinpack.generator"

    def test_child_of_skinpack(self) -> None:
        """Module loggers propagate to the skinpack logger."""
        logging.getLogger("skinpack")
        lg = get_logger("preview")
        assert lg.parent is not None
        assert lg.parent.name == "skinpack"

    def test_no_setup_means_no_handlers(self) -> None:
        """Importing the library does not attach handlers."""
        assert logging.getLogger("skinpack").handlers == []


class TestSetupLogging:
    """Tests for the setup_logging configuration function."""

    def test_default_info_level(self) -> None:
        """The default level is INFO."""
        setup_logging()
        assert logging.getLogger("skinpack").level == logging.INFO

    def test_sets_level_debug(self) -> None:
        """An explicit level is applied."""
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger("skinpack").level == logging.DEBUG

    def test_verbose_format_includes_timestamp(self) -> None:
        """Verbose output includes the timestamp."""
        setup_logging(verbose=True)
        fmt = logging.getLogger("skinpack").handlers[0].formatter
        assert fmt is not None
        assert "asctime" in fmt._fmt

    def test_default_format_no_timestamp(self) -> None:
        """The default format omits the timestamp."""
        setup_logging(verbose=False)
        fmt = logging.getLogger("skinpack").handlers[0].formatter
        assert fmt is not None
        assert "asctime" not in fmt._fmt

    def test_multiple_setup_calls_idempotent(self) -> None:
        """Repeated setup keeps a single stream handler."""
        setup_logging()
        setup_logging(level=logging.WARNING)
        logger = logging.getLogger("skinpack")
        assert len(_stream_handlers(logger)) == 1
        assert logger.level == logging.WARNING

    def test_console_handler_writes_to_stderr(self) -> None:
        """Console logs go to stderr."""
        setup_logging()
        handlers = _stream_handlers(logging.getLogger("skinpack"))
        assert handlers[0].stream is sys.stderr

    def test_file_handler_uses_verbose_format(self, tmp_path: Path) -> None:
        """A log file gets one handler with the verbose format."""
        log_path = tmp_path / "skinpack.log"
        setup_logging(verbose=False, log_file=str(log_path))
        setup_logging(verbose=False, log_file=str(log_path))
        logger = logging.getLogger("skinpack")
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == os.path.abspath(log_path)
        assert "asctime" in file_handlers[0].formatter._fmt  # type: ignore[union-attr]

    def test_json_logs_installs_json_formatter(self) -> None:
        """json_logs switches the console to JSON lines."""
        setup_logging(json_logs=True)
        handler = logging.getLogger("skinpack").handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)


class TestJsonFormatter:
    """Tests for structured JSON log lines."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord(
            "skinpack.generator", logging.INFO, __file__, 1, "done %s", ("x",), None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self) -> None:
        """Each line carries level, logger, message and timestamp."""
        payload = json.loads(JsonFormatter().format(self._record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "skinpack.generator"
        assert payload["message"] == "done x"
        assert "timestamp" in payload

    def test_skin_context_included(self) -> None:
        """Per-skin extra fields are copied into the payload."""
        record = self._record(skin_id="skin_1", skin_name="steve.png")
        payload = json.loads(JsonFormatter().format(record))
        assert payload["skin_id"] == "skin_1"
        assert payload["skin_name"] == "steve.png"
        assert "stage" not in payload


class TestFormatStrings:
    """Tests for the format string constants."""

    def test_formats_have_level_name_message(self) -> None:
        """Both formats include level, logger name and message."""
        for fmt in (DEFAULT_FORMAT, VERBOSE_FORMAT):
            assert "%(levelname)" in fmt
            assert "%(name)" in fmt
            assert "%(message)" in fmt
        assert "%(asctime)" in VERBOSE_FORMAT
