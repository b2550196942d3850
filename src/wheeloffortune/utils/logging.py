import logging
import os
import sys
from typing import Optional, TextIO, Union

LOG_LEVEL_ENV = "WOF_LOG_LEVEL"
PACKAGE_LOGGER = "wheeloffortune"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


def _resolve_level(level: Union[int, str], fallback: int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else fallback


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send the engine's log records to ``stream`` (stdout by default).

    Only the ``wheeloffortune`` logger is touched, so an embedding application
    keeps its own root configuration. WOF_LOG_LEVEL, when set, overrides
    ``level``; unknown level names fall back to INFO. Calling this again
    replaces the previous handler.
    """
    env_level = os.getenv(LOG_LEVEL_ENV)
    resolved = _resolve_level(env_level if env_level else level, logging.INFO)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    return logger
