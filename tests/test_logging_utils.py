"""
Test logging utilities module
"""

import logging

import pytest
from lambdadepot.logging_utils import ROOT_LOGGER_NAME, initialize_logger, resolve_log_level, timer


@pytest.fixture
def reset_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_resolve_log_level():
    """Test level names map case-insensitively with an INFO fallback"""
    assert resolve_log_level("DEBUG") == logging.DEBUG
    assert resolve_log_level("warning") == logging.WARNING
    assert resolve_log_level("chatty") == logging.INFO


def test_initialize_logger_console_only(reset_logger):
    """Test a console handler is installed without a log path"""
    logger = initialize_logger(None, "error")
    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1


def test_initialize_logger_with_file(reset_logger, tmp_path):
    """Test a dated log file is created and handlers are not duplicated"""
    log_dir = tmp_path / "logs"
    initialize_logger(str(log_dir), "debug")
    logger = initialize_logger(str(log_dir), "debug")

    assert len(logger.handlers) == 2
    log_files = list(log_dir.glob("lambdadepot_*.log"))
    assert len(log_files) == 1


def test_timer_logs_execution(caplog):
    """Test the timer decorator logs and preserves the return value"""
    @timer("square")
    def square(x):
        return x * x

    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        assert square(4) == 16

    assert square.__name__ == "square"
    assert any("Performance - square" in record.getMessage() for record in caplog.records)


def test_timer_logs_on_error(caplog):
    """Test the timer still logs when the function raises"""
    @timer("explode")
    def explode():
        raise RuntimeError("boom")

    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        with pytest.raises(RuntimeError):
            explode()

    assert any("explode" in record.getMessage() for record in caplog.records)
