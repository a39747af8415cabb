#!/usr/bin/env python3
"""
Log Levels - Ordering and prefix rendering

Utilities for pretty logging. Plain string formatting only, no output is
written here: callers prepend the rendered prefix to their own message and
send the line wherever they like.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple, Union

from .colors import TextStyler, get_styler
from .exceptions import ValidationError

################################################################################
# EXPORTS
################################################################################

__all__ = [
    'LogLevel', 'LevelInfo', 'INDENT_UNIT',
    'rank', 'parse_level', 'describe',
    'log_lt', 'log_lte', 'log_gt', 'log_gte',
    'render_message_prefix',
]

################################################################################
# LOG LEVELS
################################################################################

class LogLevel(str, Enum):
    """Logging levels, declared in ascending order of priority.

    - DEBUG: Temporarily added logging calls for debugging. Should be removed before release.
    - TRACE: Information about the flow of logic in some code.
    - INFO:  Interesting but non-critical, user-facing information.
    - WARN:  Inform about recoverable but undesirable state.
    - ERROR: Information about an irrecoverable fault.
    """
    DEBUG = 'debug'
    TRACE = 'trace'
    INFO = 'info'
    WARN = 'warn'
    ERROR = 'error'


LevelLike = Union[LogLevel, str]

INDENT_UNIT = '    '


class LevelInfo(NamedTuple):
    """Display data for one level: name of the styler method and the label text."""
    style: str
    label: str
    description: str


# Keyed by level; flattened below into a tuple ordered like LogLevel itself.
_LEVEL_STYLES: Dict[LogLevel, Tuple[str, str]] = {
    LogLevel.DEBUG: ('magenta', 'Temporarily added logging calls for debugging.'),
    LogLevel.TRACE: ('blue', 'Information about the flow of logic in some code.'),
    LogLevel.INFO: ('green', 'Interesting but non-critical, user-facing information.'),
    LogLevel.WARN: ('yellow', 'Recoverable but undesirable state.'),
    LogLevel.ERROR: ('red', 'Information about an irrecoverable fault.'),
}

_RANKS: Dict[LogLevel, int] = {level: i for i, level in enumerate(LogLevel)}


def _build_table(styles: Dict[LogLevel, Tuple[str, str]]) -> Tuple[LevelInfo, ...]:
    """Flatten the per-level styles into a tuple indexed by rank.

    Raises:
        RuntimeError: If styles does not cover exactly the members of LogLevel
    """
    missing = [level.value for level in LogLevel if level not in styles]
    extra = [repr(key) for key in styles if key not in _RANKS]
    if missing or extra:
        raise RuntimeError(f"Level table out of sync with LogLevel (missing: {missing}, unknown: {extra})")
    return tuple(LevelInfo(styles[level][0], level.value, styles[level][1]) for level in LogLevel)


_INFOS: Tuple[LevelInfo, ...] = _build_table(_LEVEL_STYLES)

# Levels whose label is one character shorter than the rest.
_PADDED = frozenset({LogLevel.INFO, LogLevel.WARN})

################################################################################
# PUBLIC FUNCTIONS - Level lookup
################################################################################

def parse_level(value: LevelLike) -> LogLevel:
    """Convert a level or its tag (any case, surrounding whitespace ignored) to a LogLevel.

    Raises:
        ValidationError: If value does not name one of the five levels
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        try:
            return LogLevel(value.strip().lower())
        except ValueError:
            pass
    valid = ', '.join(level.value for level in LogLevel)
    raise ValidationError(f"Unknown log level: {value!r} (expected one of: {valid})")

def rank(level: LevelLike) -> int:
    """Integer priority of a level, 0 (debug) to 4 (error)."""
    return _RANKS[parse_level(level)]

def describe(level: LevelLike) -> str:
    """One-line description of what a level is meant for."""
    return _INFOS[rank(level)].description

################################################################################
# PUBLIC FUNCTIONS - Ordering
################################################################################

def log_lt(fst: LevelLike, snd: LevelLike) -> bool:
    """Return if the first level is of strictly lower priority than the second."""
    return rank(fst) < rank(snd)

def log_lte(fst: LevelLike, snd: LevelLike) -> bool:
    """Return if the first level is of lower or equal priority as the second."""
    return rank(fst) <= rank(snd)

def log_gt(fst: LevelLike, snd: LevelLike) -> bool:
    """Return if the first level is of strictly greater priority than the second."""
    return rank(fst) > rank(snd)

def log_gte(fst: LevelLike, snd: LevelLike) -> bool:
    """Return if the first level is of greater or equal priority as the second."""
    return rank(fst) >= rank(snd)

################################################################################
# PUBLIC FUNCTIONS - Prefix rendering
################################################################################

def render_message_prefix(level: LevelLike, group_depth: int = 0,
                          styler: Optional[TextStyler] = None) -> str:
    """Return a string with which to prefix a log line, reflecting level and indentation depth.

    The styled part is only the bracketed label. info and warn get one space of
    padding so all labels share the same visible width, then group_depth indent
    units follow.

    Args:
        level: The level at which to log
        group_depth: How far to indent to indicate grouping of several log lines
        styler: Style transform provider (defaults to ANSI colors unless NO_COLOR is set)

    Raises:
        ValidationError: If level is unknown or group_depth is not a non-negative integer
    """
    if isinstance(group_depth, bool) or not isinstance(group_depth, int):
        raise ValidationError(f"Group depth must be an integer, got {group_depth!r}")
    if group_depth < 0:
        raise ValidationError(f"Group depth must not be negative, got {group_depth}")

    level = parse_level(level)
    info = _INFOS[_RANKS[level]]
    style_fn = getattr(styler or get_styler(), info.style)
    padding = ' ' if level in _PADDED else ''
    return f"{style_fn(f'[{info.label}]')}{padding}{INDENT_UNIT * group_depth}"
