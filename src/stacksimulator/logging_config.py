"""
Logging for the simulator.

Every module logs through `logging.getLogger(__name__)`, so all records end
up under the "stacksimulator" logger configured here. Pushes, pops and clears
are logged at INFO, read-only queries (peek, size, is empty) at DEBUG.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "stacksimulator"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Send simulator log records to stdout and, optionally, to `log_file`.

    Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging set up (level={logging.getLevelName(level)}, file={log_file})")
