import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "permgen"


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """
    Configure the ``permgen`` logger for command-line use.

    Library code only ever creates module loggers; handlers are attached
    here, once per process entry point, and removed by
    :func:`teardown_logging`. Records do not propagate to the root logger
    while this handler is installed.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.propagate = False
    _close_handlers(root_logger)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def teardown_logging() -> None:
    """Undo :func:`setup_logging`."""
    root_logger = logging.getLogger(LOGGER_NAME)
    _close_handlers(root_logger)
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
