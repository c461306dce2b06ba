"""Defines the :class:`.Logger` class and the package-level log helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "marsdate"
"""``str``: name of the top-level logger every helper in this module writes to."""


class Logger:
    """Extended logger wraps the standard Python logging package.

    It also creates a standard file name and log format for any log files that are saved.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig()
        if not level:
            level = config.logging.Level
        if not path:
            path = config.logging.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = config.logging.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if not self.logger.handlers or allow_multiple_handlers is True:
            if path == "stdout":
                self.filename = "stdout"
                handler = logging.StreamHandler(sys.stdout)

            else:
                if not exists(path):
                    self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                    makedirs(path)

                log_name = f"{name}_{pathSafeTime()}.log"
                self.filename = join(path, log_name)

                handler = RotatingFileHandler(
                    self.filename,
                    maxBytes=config.logging.MaxFileSize,
                    backupCount=config.logging.MaxFileCount,
                )

            formatter = logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Defer everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _marsdateLog(message: str, level: int):
    """Log a message to the top-level log record.

    This is a one-liner that doesn't require pre-initializing a logger object, for plain
    functions that need to log messages.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def marsdateLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _marsdateLog(message, level=logging.CRITICAL)


def marsdateLogError(message: str):
    """Log an ERROR message to the top-level log record.

    See Also:
        :func:`._marsdateLog`

    Args:
        message (``str``): message to record with in the log.
    """
    _marsdateLog(message, level=logging.ERROR)


def marsdateLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _marsdateLog(message, level=logging.WARNING)


def marsdateLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _marsdateLog(message, level=logging.INFO)


def marsdateLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._marsdateLog`

    Args:
        message (``str``): message to record with in the log.
    """
    _marsdateLog(message, level=logging.DEBUG)
