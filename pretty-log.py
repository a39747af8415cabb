#!/usr/bin/env python3
"""
PRETTYLOG - Level ordering and colorized log prefixes

Preview prefixes, compare levels and print single prefixed lines from the shell.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT

This program is free software: you can redistribute it and/or modify
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

import sys

from prettylog.cli import main

################################################################################
# ENTRY POINT - Script Execution Handler
################################################################################

if __name__ == "__main__":
    sys.exit(main())
