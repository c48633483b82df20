# shopcart/utils/logging.py
import logging
import sys

from shopcart.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Zwraca logger modulu z jednym handlerem na stdout.
    Poziom z LOG_LEVEL (DEBUG jesli ustawiona zmienna DEBUG).
    """
    logger = logging.getLogger(name or "shopcart")
    logger.setLevel(LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
