#!/usr/bin/env python3
"""
Logger Module

Bridges the standard logging module to the level prefixes: a formatter that
prepends render_message_prefix() to each record, a TRACE level between DEBUG
and INFO, and a logger factory with nested grouping support.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

import sys
import logging
import threading
from contextlib import contextmanager
from typing import Optional, Dict, Any, Iterator

from .colors import TextStyler, get_styler
from .levels import LogLevel, render_message_prefix

################################################################################
# TRACE LEVEL
################################################################################

TRACE_LEVEL = 15  # Between DEBUG (10) and INFO (20)
logging.addLevelName(TRACE_LEVEL, 'TRACE')

def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
    """Log a trace message."""
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)

logging.Logger.trace = trace

def to_log_level(levelno: int) -> LogLevel:
    """Map a stdlib level number to a LogLevel, rounding up to the next known level."""
    if levelno <= logging.DEBUG:
        return LogLevel.DEBUG
    if levelno <= TRACE_LEVEL:
        return LogLevel.TRACE
    if levelno <= logging.INFO:
        return LogLevel.INFO
    if levelno <= logging.WARNING:
        return LogLevel.WARN
    return LogLevel.ERROR

def to_stdlib_level(level: LogLevel) -> int:
    return {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.TRACE: TRACE_LEVEL,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARN: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
    }[level]

################################################################################
# GROUP DEPTH - Per-thread nesting
################################################################################

_group_state = threading.local()

def current_group_depth() -> int:
    return getattr(_group_state, 'depth', 0)

################################################################################
# FORMATTER CLASSES - Level prefix formatting
################################################################################

class PrefixFormatter(logging.Formatter):
    """Formatter that prepends the styled level label and group indentation.

    The group depth is read from record.group_depth (pass it through `extra`)
    or, if absent, from the depth of the enclosing LoggerManager.group() blocks.
    """

    def __init__(self, styler: Optional[TextStyler] = None, include_timestamp: bool = False) -> None:
        """Initialize formatter with optional styler and timestamp."""
        self.styler = styler or get_styler()
        self.include_timestamp = include_timestamp
        format_string = '%(asctime)s %(message)s' if include_timestamp else '%(message)s'
        super().__init__(format_string, datefmt='%H:%M:%S')

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with level prefix."""
        depth = getattr(record, 'group_depth', None)
        if depth is None:
            depth = current_group_depth()
        prefix = render_message_prefix(to_log_level(record.levelno), depth, self.styler)
        return f"{prefix} {super().format(record)}"


class LoggerManager:
    """Logger factory returning console loggers that use PrefixFormatter."""

    _loggers: Dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    ################################################################################
    # PUBLIC CLASS METHODS - Logger Factory
    ################################################################################

    @classmethod
    def get_logger(cls, name: str, **kwargs) -> logging.Logger:
        """Get or create logger instance (thread-safe). Accepts level=LogLevel|int, colors=bool, stream=file."""
        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = cls._create_logger(name, **kwargs)
            return cls._loggers[name]

    @classmethod
    def configure_logger(cls, name: str, **kwargs) -> logging.Logger:
        """Create logger instance, replacing any cached one with the same name (thread-safe)."""
        with cls._lock:
            cls._loggers[name] = cls._create_logger(name, **kwargs)
            return cls._loggers[name]

    @classmethod
    def reset(cls) -> None:
        """Forget all created loggers and detach their handlers."""
        with cls._lock:
            for logger in cls._loggers.values():
                for handler in logger.handlers[:]:
                    logger.removeHandler(handler)
            cls._loggers.clear()

    @staticmethod
    @contextmanager
    def group() -> Iterator[int]:
        """Indent every line logged inside the block by one more unit. Yields the new depth."""
        depth = current_group_depth()
        _group_state.depth = depth + 1
        try:
            yield depth + 1
        finally:
            _group_state.depth = depth

    ################################################################################
    # PRIVATE CLASS METHODS - Logger Configuration
    ################################################################################

    @classmethod
    def _create_logger(cls, name: str, **kwargs) -> logging.Logger:
        """Create and configure new logger instance."""
        log_level = kwargs.get('level', LogLevel.INFO)
        if isinstance(log_level, LogLevel):
            log_level = to_stdlib_level(log_level)

        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        logger.propagate = False

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        cls._setup_console_handler(logger, log_level, kwargs.get('colors'), kwargs.get('stream'))
        return logger

    @classmethod
    def _setup_console_handler(cls, logger: logging.Logger, level: int,
                               colors: Optional[bool], stream: Any) -> None:
        """Setup console handler with level prefixes."""
        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(PrefixFormatter(get_styler(colors)))
        logger.addHandler(console_handler)
