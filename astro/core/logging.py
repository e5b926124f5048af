"""Logging configuration for the Astro backend."""

from __future__ import annotations

import logging
import logging.config

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_logging_config(level: str = "INFO") -> dict:
    level = (level or "INFO").upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": DEFAULT_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "astro": {"level": level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logging(level: str = "INFO") -> None:
    """Apply the console logging configuration for the ``astro`` package."""
    logging.config.dictConfig(build_logging_config(level))
    logging.getLogger(__name__).debug("Logging configured at level %s", level)
