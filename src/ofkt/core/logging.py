"""Logging setup for ofkt."""

import logging
import sys

from ofkt.core.config import SearchSettings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "ofkt-console"


def setup_logging(settings: SearchSettings | None = None) -> logging.Logger:
    """Configure the ``ofkt`` logger.

    The library never calls this itself; applications embedding the
    search engine call it once at startup. Calling it again only updates
    the level.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.effective_log_level)

    logger = logging.getLogger("ofkt")
    logger.setLevel(log_level)

    console_handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)
    console_handler.setLevel(log_level)

    return logger
