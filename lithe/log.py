"""
lithe.log - Logging module.

Records go to the standard "lithe" logger, which has only a NullHandler,
so nothing is printed until the host application configures logging.

Usage:
    from lithe import log

    log.set_level(log.Level.DEBUG)
    log.debug("execute %s", name)
"""

import logging

_logger = logging.getLogger("lithe")
_logger.addHandler(logging.NullHandler())


class Level:
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def debug(msg: str, *args):
    """Log debug message; args are %-formatted only if the record is emitted."""
    _logger.debug(msg, *args)


def enabled(level: int = Level.DEBUG) -> bool:
    return _logger.isEnabledFor(level)


def set_level(level: int):
    _logger.setLevel(level)
