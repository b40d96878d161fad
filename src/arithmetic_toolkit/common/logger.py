"""Package-wide logger writing to stderr."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_toolkit")


def setup_logger(level: str = "WARNING") -> logging.Logger:
    """
    Attach a handler for the current stderr to the package logger and set its level.

    Handlers from earlier calls are dropped first, the stream they wrote to may
    have been closed or replaced since.

    :param str level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    :return: The configured package logger
    :rtype: logging.Logger
    """
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)

    # stderr keeps log records out of the calculator's output stream
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
