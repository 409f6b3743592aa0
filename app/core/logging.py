"""
Logging configuration.

Modules log through ``logging.getLogger(__name__)``; this installs the
single stream handler on the ``app`` logger at the configured level.
"""

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``app`` logger.  Safe to call more than once."""
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger("app")
    logger.setLevel(logging.DEBUG if settings.DEBUG else log_level)

    if not any(getattr(h, "_pickem_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._pickem_handler = True
        logger.addHandler(handler)

    return logger
