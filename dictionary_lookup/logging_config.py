"""Logging setup for dictl.

Records go to stderr; stdout carries only rendered entries, so a failed
lookup never leaves partial text there.
"""

import logging
import sys

ROOT_LOGGER = "dictionary_lookup"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONCISE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(debug: bool, verbose: bool, default: str = "WARNING") -> str:
    """Pick the level from command-line flags, --debug winning over -v"""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return default.upper()


def setup_logging(
    level: str = "WARNING", log_file: str | None = None
) -> logging.Logger:
    """Attach a stderr handler (and optionally a file handler) to the package logger.

    Calling it again replaces the previous handlers.
    """
    level = level.upper()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level))
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    if level == "DEBUG":
        console_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(CONCISE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)
