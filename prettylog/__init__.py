#!/usr/bin/env python3
"""
PRETTYLOG

Level ordering and colorized, indentation-aware prefixes for console logging

Created: 2025-10-29
Author: Manuel Ziel
License: MIT
"""

# Package metadata
__version__ = "1.0.0"
__author__ = "Manuel Ziel"
__email__ = "manuelziel@gmail.com"
__description__ = "Level ordering and colorized prefixes for console logging"
__software_name__ = "PRETTYLOG"

# Package imports
from .colors import Colors, TextStyler, PlainStyler, get_styler, strip_ansi
from .exceptions import PrettyLogException, ValidationError, ConfigError
from .levels import (
    LogLevel, INDENT_UNIT, rank, parse_level, describe,
    log_lt, log_lte, log_gt, log_gte, render_message_prefix,
)
from .config import ConfigManager
from .logger import LoggerManager, PrefixFormatter, TRACE_LEVEL

__all__ = [
    'Colors',
    'TextStyler',
    'PlainStyler',
    'get_styler',
    'strip_ansi',
    'PrettyLogException',
    'ValidationError',
    'ConfigError',
    'LogLevel',
    'INDENT_UNIT',
    'rank',
    'parse_level',
    'describe',
    'log_lt',
    'log_lte',
    'log_gt',
    'log_gte',
    'render_message_prefix',
    'ConfigManager',
    'LoggerManager',
    'PrefixFormatter',
    'TRACE_LEVEL',
]
