#!/usr/bin/env python3
"""
Command-Line Interface

Subcommands to preview prefixes, compare levels and print single prefixed lines.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import argparse
from typing import List, Optional

# Internal imports
from . import __version__, __software_name__
from .colors import get_styler
from .config import ConfigManager
from .exceptions import PrettyLogException
from .levels import (
    LogLevel, rank, describe, parse_level,
    log_lt, log_lte, log_gt, log_gte, render_message_prefix,
)
from .logger import LoggerManager

LEVEL_CHOICES = [level.value for level in LogLevel]

################################################################################
# ARGUMENT PARSING - Command-Line Interface
################################################################################

def build_parser() -> argparse.ArgumentParser:
    """Build the parser with subcommands (prefix, compare, levels, log)."""
    parser = argparse.ArgumentParser(
        prog='pretty-log',
        description='PrettyLog - level ordering and colorized log prefixes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prefix warn --depth 2          # Render a prefix
  %(prog)s compare trace error            # Compare two levels
  %(prog)s levels                         # List all levels
  %(prog)s log info "Server started"      # Print one prefixed line
        """
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', type=str, default=None, help='Path to TOML configuration file')
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')

    # Same options after the subcommand; SUPPRESS keeps values given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', '-c', type=str, default=argparse.SUPPRESS, help='Path to TOML configuration file')
    common.add_argument('--no-color', action='store_true', default=argparse.SUPPRESS, help='Disable ANSI colors')

    subparsers = parser.add_subparsers(dest='command', required=True, help='Available commands')

    parser_prefix = subparsers.add_parser('prefix', parents=[common], help='Print the prefix for a level')
    parser_prefix.add_argument('level', type=str, help=f"Log level ({', '.join(LEVEL_CHOICES)})")
    parser_prefix.add_argument('--depth', '-d', type=int, default=0, help='Group depth (default: 0)')

    parser_compare = subparsers.add_parser('compare', parents=[common], help='Compare the priority of two levels')
    parser_compare.add_argument('first', type=str, help='First log level')
    parser_compare.add_argument('second', type=str, help='Second log level')

    subparsers.add_parser('levels', parents=[common], help='List levels with rank, prefix and meaning')

    parser_log = subparsers.add_parser('log', parents=[common], help='Print one prefixed line if the level passes the configured minimum')
    parser_log.add_argument('level', type=str, help='Log level')
    parser_log.add_argument('message', type=str, help='Message text')
    parser_log.add_argument('--depth', '-d', type=int, default=0, help='Group depth (default: 0)')

    return parser

################################################################################
# CLI COMMAND HANDLERS - Subcommand Processing
################################################################################

def handle_command(args: argparse.Namespace, config: ConfigManager) -> int:
    """Run one subcommand. Returns: Exit code (0=success)."""
    styler = get_styler(False) if args.no_color else config.styler()

    if args.command == 'prefix':
        print(render_message_prefix(args.level, args.depth, styler))

    elif args.command == 'compare':
        first, second = parse_level(args.first), parse_level(args.second)
        for name, fn in (('lt', log_lt), ('lte', log_lte), ('gt', log_gt), ('gte', log_gte)):
            print(f"{name}({first.value}, {second.value}) = {str(fn(first, second)).lower()}")

    elif args.command == 'levels':
        for level in LogLevel:
            print(f"{rank(level)}  {render_message_prefix(level, 0, styler)}  {describe(level)}")

    elif args.command == 'log':
        level = parse_level(args.level)
        if config.allows(level):
            print(render_message_prefix(level, args.depth, styler), args.message)

    return 0

################################################################################
# MAIN APPLICATION - Entry Point
################################################################################

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Load config, dispatch subcommand. Returns: Exit code (0=success)."""
    args = build_parser().parse_args(argv)
    logger = LoggerManager.configure_logger(__software_name__, colors=False if args.no_color else None)

    try:
        config = ConfigManager(args.config)
        logger.debug(f"Loaded configuration (level: {config.log_level.value}, colors: {config.console_colors})")
        return handle_command(args, config)
    except PrettyLogException as e:
        logger.error(f"{e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
