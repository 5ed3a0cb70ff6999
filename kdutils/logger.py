"""Category loggers with ``{}``-style message formatting."""

from __future__ import annotations

import enum
import logging
import sys
from typing import Any

_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


class LoggerType(enum.Enum):
    """The level at which values streamed with ``log`` are written."""

    DEBUG = logging.DEBUG
    WARN = logging.WARNING


def _category_logger(category: str) -> logging.Logger:
    logger = logging.getLogger(category)
    if not logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    return logger


class Logger:
    """Writes messages for one category; loggers of the same category share output."""

    def __init__(self, category: str, logger_type: LoggerType = LoggerType.DEBUG) -> None:
        self._category = category
        self._type = logger_type
        self._logger = _category_logger(category)

    @property
    def category(self) -> str:
        return self._category

    @property
    def type(self) -> LoggerType:
        return self._type

    def _emit(self, level: int, fmt: str, args: tuple[Any, ...]) -> Logger:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, "%s", fmt.format(*args))
        return self

    def warn(self, fmt: str, *args: Any) -> Logger:
        """Log ``fmt.format(*args)`` as a warning and return ``self``."""
        return self._emit(logging.WARNING, fmt, args)

    def debug(self, fmt: str, *args: Any) -> Logger:
        """Log ``fmt.format(*args)`` as a debug message and return ``self``."""
        return self._emit(logging.DEBUG, fmt, args)

    def log(self, value: Any) -> Logger:
        """Log ``value`` at the level given by this logger's type."""
        level = self._type.value
        if self._logger.isEnabledFor(level):
            self._logger.log(level, "%s", value)
        return self

    __lshift__ = log

    def __repr__(self) -> str:
        return f"Logger({self._category!r}, {self._type})"