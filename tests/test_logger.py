"""Tests for the logging configuration."""

import logging
from budgetly.logger import get_log_level, get_logger


def test_root_logger_has_handler():
    """Root 'budgetly' logger should have exactly one handler."""
    logger = get_logger()
    assert len(logger.handlers) == 1


def test_child_logger_has_no_handler():
    """Child loggers should have no handlers and rely on propagation."""
    get_logger()

    plaid_logger = get_logger("budgetly.plaid")
    web_logger = get_logger("budgetly.web")

    assert len(plaid_logger.handlers) == 0
    assert len(web_logger.handlers) == 0


def test_no_double_logging(caplog):
    """Messages from child loggers should only appear once."""
    caplog.clear()

    with caplog.at_level(logging.INFO):
        root_logger = get_logger()
        child_logger = get_logger("budgetly.plaid")

        assert len(root_logger.handlers) == 1
        assert len(child_logger.handlers) == 0

        test_message = "Test message for double logging"
        child_logger.info(test_message)

        matching_records = [r for r in caplog.records if test_message in r.message]
        assert len(matching_records) == 1, f"Expected 1 log record, found {len(matching_records)}"


def test_child_logger_propagates_to_root():
    """Child loggers should propagate to root."""
    get_logger()
    child_logger = get_logger("budgetly.plaid")

    assert child_logger.propagate is True
    assert child_logger.parent.name == "budgetly"


def test_handler_format_identifies_source():
    """Lines from concurrent requests carry level, thread and logger name."""
    handler = get_logger().handlers[0]
    record = logging.LogRecord("budgetly.plaid", logging.ERROR, __file__, 1, "Plaid error", None, None)
    record.threadName = "Thread-7"

    line = handler.format(record)

    assert "ERROR" in line
    assert "[Thread-7]" in line
    assert "budgetly.plaid: Plaid error" in line


def test_bare_names_are_nested_under_root():
    logger = get_logger("plaid")

    assert logger.name == "budgetly.plaid"
    assert logger.parent.name == "budgetly"


def test_unknown_log_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert get_log_level() == logging.INFO

    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG
