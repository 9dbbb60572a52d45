"""Tests for logging configuration."""

import io
import json
import logging

import pytest

from timephrase.engine import classify
from timephrase.log import ROOT_LOGGER, ConsoleFormatter, JSONFormatter, configure_logging
from timephrase.types import Instant


class TestConfigureLogging:
    """Test configure_logging."""

    def test_json_output(self):
        stream = io.StringIO()
        configure_logging(level="debug", format="json", stream=stream)

        classify(Instant(0), Instant(120))

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["level"] == "debug"
        assert record["logger"] == "timephrase.engine"
        assert "unit=minute amount=2" in record["message"]

    def test_console_output(self):
        stream = io.StringIO()
        configure_logging(level=logging.DEBUG, stream=stream)

        classify(Instant(0), Instant(120))

        line = stream.getvalue().splitlines()[-1]
        assert "DEBUG" in line
        assert "[timephrase.engine]" in line
        assert "\033[" not in line

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging(level="warning", stream=stream)
        classify(Instant(0), Instant(120))
        assert stream.getvalue() == ""

    def test_reconfigure_replaces_handler(self):
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            configure_logging(level="chatty")
        with pytest.raises(ValueError):
            configure_logging(format="xml")


class TestFormatters:
    """Test formatters directly."""

    def _record(self, msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
        return logging.LogRecord("timephrase.test", level, __file__, 1, msg, None, None)

    def test_console_color(self):
        text = ConsoleFormatter(color=True, show_timestamp=False).format(self._record())
        assert text.startswith("\033[32mINFO ")
        assert text.endswith("[timephrase.test] hello")

    def test_json_fields(self):
        data = json.loads(JSONFormatter().format(self._record("héllo")))
        assert data["message"] == "héllo"
        assert data["logger"] == "timephrase.test"
        assert data["timestamp"].endswith("+00:00")
