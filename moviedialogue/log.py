# Shared logger setup: one stream handler per named logger, level from settings.

import logging

from .settings import settings

_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(h)
        # records stop here; a root handler would print them a second time
        logger.propagate = False
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    return logger
