"""Unit tests for logging configuration."""

import json
import logging
import sys

import pytest

from sales_coach.config.logging import JSONExceptionFormatter, get_logger, setup_logging

pytestmark = pytest.mark.unit


def test_get_logger_returns_child():
    assert get_logger().name == "sales_coach"
    assert get_logger("selector").name == "sales_coach.selector"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "coach.log"

    logger = setup_logging("debug", log_file=log_file)
    try:
        get_logger("test").debug("selected %d documents", 3)
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "selected 3 documents" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad corpus")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord("sales_coach", logging.ERROR, __file__, 10, "load failed", None, exc_info)
    entry = json.loads(JSONExceptionFormatter().format(record))

    assert entry["level"] == "ERROR"
    assert entry["message"] == "load failed"
    assert entry["exception"]["type"] == "ValueError"
    assert "bad corpus" in entry["exception"]["traceback"]
