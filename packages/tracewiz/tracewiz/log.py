"""Console logging setup for applications embedding tracewiz."""
from __future__ import annotations

import logging.config
import sys


def configure_logging(level: str = "INFO") -> None:
    """Install a console handler for the ``tracewiz`` logger tree.

    The library never calls this itself; hosts opt in.
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "tracewiz": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    })
