"""Logging configuration for link shortener."""

import logging
import logging.config
from typing import Optional

LOGGER_NAME = "link_shortener"

FORMATS = {
    "plain": {
        "format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "json": {
        "format": '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
                  '"logger": "%(name)s", "message": "%(message)s"}',
    },
}


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``link_shortener`` logger tree and return its root.

    Service, store, cache and request logs all live below this logger, so one
    call covers the app, the CLI and the scripts. Calling it again replaces
    the previous handlers.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Also append to this file when set
        json_format: Emit one JSON object per line instead of plain text
    """
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    formatter = "json" if json_format else "plain"

    handlers = {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": formatter,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "formatter": formatter,
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": FORMATS,
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {"level": level, "handlers": list(handlers)},
        },
    })

    return logging.getLogger(LOGGER_NAME)
