"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from tradebook.config import BaseConfig
from tradebook.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**overrides) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=overrides.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=overrides.pop("msg", "Test message"),
        args=(),
        exc_info=overrides.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in overrides.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits the standard keys."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(payload={"grandTotal": "31.00"})))

    assert log_data["extra"] == {"payload": {"grandTotal": "31.00"}}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_setup_logging(tmp_path):
    """Logging setup creates a JSON log file under DATA_DIR/logs."""
    config = BaseConfig()
    config.DATA_DIR = tmp_path
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "tradebook"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "tradebook.log"
    assert log_file.exists()

    logger.warning("Test warning message")
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 2
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)


def test_setup_logging_does_not_stack_handlers(tmp_path):
    config = BaseConfig()
    config.DATA_DIR = tmp_path

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("TRADEBOOK_LOG_LEVEL", "debug")

    logger = setup_logging(BaseConfig())

    assert logger.level == logging.DEBUG


def test_get_logger():
    """get_logger returns loggers under the tradebook namespace."""
    assert get_logger("module1").name == "tradebook.module1"
    assert get_logger("tradebook.services.schema").name == "tradebook.services.schema"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config = BaseConfig()
    config.DATA_DIR = tmp_path
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
