import logging
import sys

ROOT_LOGGER_NAME = "weblocscan"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Sends weblocscan log records to stdout.
    Plain messages at INFO and above; DEBUG also shows the emitting module.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if numeric_level <= logging.DEBUG:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))

    # Replace handlers so repeated calls (tests, re-entry) don't duplicate output
    logger.handlers[:] = [handler]
    logger.setLevel(numeric_level)
    logger.propagate = False
    return logger
