"""
Logging setup shared by the engine modules.

Each module calls ``setup_logger(__name__)`` once at import. Unless a level is
passed explicitly it is read from ``LOG_LEVEL``, which the CLI fills in from
``--log-level`` before it imports the command modules.
"""

import logging
import os
import sys

LOG_FORMAT = '[%(asctime)s] %(name)s %(levelname)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


def resolve_level(level: str = None) -> int:
    """Numeric level for a name such as 'debug'; unknown names mean INFO."""
    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')
    return _LEVELS.get(level.strip().upper(), logging.INFO)


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """
    Return the named logger, writing to stderr.

    Args:
        name: Logger name (usually module name)
        level: Level name; defaults to the LOG_LEVEL env var or INFO
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    if not logger.handlers:
        # stdout is reserved for game output
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
