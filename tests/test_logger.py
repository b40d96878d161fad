"""Test function setup_logger."""
import logging

import pytest

from arithmetic_toolkit.common.logger import logger, setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    """Leave the package logger as it was before each test."""
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.mark.parametrize("message", ["first capture", "second capture"])
def test_setup_logger_writes_to_current_stderr(capsys, message: str) -> None:
    """Each call targets the stderr of its own capture, even after earlier ones closed."""
    setup_logger("info")
    logger.info(message)
    captured = capsys.readouterr()
    assert message in captured.err
    assert message not in captured.out


def test_setup_logger_keeps_a_single_handler() -> None:
    """Repeated calls replace the handler instead of stacking them."""
    setup_logger()
    setup_logger("DEBUG")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logger_level_filters(capsys) -> None:
    """Records below the configured level are dropped."""
    setup_logger("WARNING")
    logger.info("hidden")
    logger.warning("shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
