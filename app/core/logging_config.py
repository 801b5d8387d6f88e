"""Logging setup shared by the API process and scripts."""

import logging
import sys

from app.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> logging.Logger:
    """Configure the root handler once and return the ``app`` logger."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)

    # redis-py is chatty at DEBUG
    logging.getLogger("redis").setLevel(max(level, logging.INFO))

    return logging.getLogger("app")
