"""
Logging configuration for the application.

Everything logs under the "prep_tracker" namespace to stdout in a single
pipe-separated line format; noisy third-party loggers are held at WARNING.
"""
import logging
import sys

from prep_tracker.app.core.config import settings

ROOT_LOGGER = "prep_tracker"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Held at WARNING regardless of log_level
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "openai")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure application logging once per process. Returns the package logger."""
    level_val = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_val, logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger(ROOT_LOGGER)


def get_logger(name: str) -> logging.Logger:
    """Child logger, e.g. get_logger("services.crud") -> prep_tracker.services.crud"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
