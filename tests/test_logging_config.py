"""Tests for centralized logging configuration."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from commentbot.handler import CommentEvent, CommentHandler, IssueSnapshot, RecordingIssueClient
from commentbot.logging_config import JSONFormatter, configure_logging


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Reset root logger state after each test."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    yield
    root.setLevel(original_level)
    root.handlers = original_handlers


def _record(level=logging.INFO, msg="msg", args=(), exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="commentbot.handler",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_defaults_to_info_text(self):
        with patch.dict(os.environ, {}, clear=True):
            configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_log_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_level_override_takes_precedence(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}, clear=True):
            configure_logging(level_override="ERROR")
        assert logging.getLogger().level == logging.ERROR

    def test_invalid_level_falls_back_to_info(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_json_format_from_env(self):
        with patch.dict(os.environ, {"LOG_FORMAT": "JSON"}, clear=True):
            configure_logging()
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_format_override_takes_precedence(self):
        with patch.dict(os.environ, {"LOG_FORMAT": "text"}, clear=True):
            configure_logging(format_override="json")
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_replaces_existing_handlers(self):
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        with patch.dict(os.environ, {}, clear=True):
            configure_logging()
        assert len(root.handlers) == 1

    def test_quiets_third_party_loggers(self):
        with patch.dict(os.environ, {}, clear=True):
            configure_logging(level_override="DEBUG")
        assert logging.getLogger("dotenv").level == logging.WARNING


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_produces_valid_json(self):
        data = json.loads(JSONFormatter().format(_record(msg="Applied %s", args=("close",))))
        assert data["level"] == "INFO"
        assert data["logger"] == "commentbot.handler"
        assert data["message"] == "Applied close"
        assert "exception" not in data

    def test_includes_exception_info(self):
        try:
            raise RuntimeError("tracker down")
        except RuntimeError:
            exc_info = sys.exc_info()

        record = _record(level=logging.ERROR, msg="Command failed", exc_info=exc_info)
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "ERROR"
        assert "RuntimeError: tracker down" in data["exception"]

    def test_timestamp_is_utc_iso_format(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert "T" in data["timestamp"]
        assert data["timestamp"].endswith("+00:00")


class TestHandlerLogging:
    """The handler reports its decisions through logging."""

    def test_skip_is_logged(self, caplog):
        handler = CommentHandler(RecordingIssueClient(), trigger="Derek ")
        event = CommentEvent("octo/widgets", 1, "Derek reopen", "alice")
        with caplog.at_level(logging.INFO, logger="commentbot.handler"):
            handler.handle(event, IssueSnapshot(number=1))
        assert "alice requested reopen on octo/widgets#1" in caplog.text
        assert "Skipping reopen: issue is already open" in caplog.text
