"""Console logging for the Budgetly backend."""
import logging
import os
import sys

# Request threads interleave, so every line carries its thread and origin
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"
ROOT_LOGGER = "budgetly"


def get_log_level() -> int:
    """Level from LOG_LEVEL, INFO when unset or unknown."""
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a console logger for the backend.

    Only the root 'budgetly' logger gets a handler. Child loggers
    (e.g., 'budgetly.plaid', 'budgetly.web') propagate to it.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"

    logger = logging.getLogger(name)

    if name == ROOT_LOGGER and not logger.handlers:
        level = get_log_level()
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger.setLevel(level)
        logger.addHandler(handler)

    return logger
