"""
Logging configuration for the budget_sync package.

Library modules only call get_logger(__name__). Entry points (the CLI)
call configure_logging() once at startup.
"""
import logging
import os
import sys
from typing import Optional, Union

_PKG_LOGGER_NAME = 'budget_sync'
_CONFIGURED = False


def _parse_level(level: Optional[Union[int, str]]) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv('BUDGET_SYNC_LOG_LEVEL', 'INFO')
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Attach a single stderr handler to the package logger.

    Args:
        level: Level name or number (default: BUDGET_SYNC_LOG_LEVEL or INFO)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(_parse_level(level))
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured"""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
