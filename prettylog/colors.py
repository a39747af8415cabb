#!/usr/bin/env python3
"""
ANSI Color Codes - Central color definitions for terminal output
Used by: levels.py, logger.py, pretty-log.py

Provides the style transforms applied to level labels. A styler is any object
with one string-to-string method per color (magenta, blue, green, yellow, red).

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

import os
import re
from typing import Optional

################################################################################
# ANSI COLOR CODES
################################################################################

class Colors:
    """ANSI color codes for terminal output."""
    # Basic colors
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'

    # Formatting
    BOLD = '\033[1m'
    DIM = '\033[2m'

    # Reset
    NC = '\033[39m'     # Default foreground color
    RESET = '\033[0m'   # Reset all attributes

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

################################################################################
# STYLERS - Injectable style transforms
################################################################################

class TextStyler:
    """Wraps strings in ANSI color codes."""

    def _wrap(self, text: str, code: str) -> str:
        return f"{code}{text}{Colors.NC}"

    def magenta(self, text: str) -> str:
        return self._wrap(text, Colors.MAGENTA)

    def blue(self, text: str) -> str:
        return self._wrap(text, Colors.BLUE)

    def green(self, text: str) -> str:
        return self._wrap(text, Colors.GREEN)

    def yellow(self, text: str) -> str:
        return self._wrap(text, Colors.YELLOW)

    def red(self, text: str) -> str:
        return self._wrap(text, Colors.RED)


class PlainStyler(TextStyler):
    """Styler for sinks without color support (files, NO_COLOR terminals)."""

    def _wrap(self, text: str, code: str) -> str:
        return text


ANSI_STYLER = TextStyler()
PLAIN_STYLER = PlainStyler()

################################################################################
# HELPERS
################################################################################

def colors_enabled() -> bool:
    """Return False when the NO_COLOR environment variable is set to anything non-empty."""
    return not os.environ.get('NO_COLOR')

def get_styler(enabled: Optional[bool] = None) -> TextStyler:
    """Return the ANSI styler or the plain one. None means: decide from NO_COLOR."""
    if enabled is None:
        enabled = colors_enabled()
    return ANSI_STYLER if enabled else PLAIN_STYLER

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences, leaving the visible text."""
    return ANSI_PATTERN.sub('', text)
