#!/usr/bin/env python3
"""
Configuration Manager

Handles TOML configuration loading with environment overrides.

Created: 2025-10-27
Author: Manuel Ziel
License: MIT
"""

################################################################################
# IMPORTS & DEPENDENCIES
################################################################################

# Standard library imports
import os
import tomllib
from typing import Dict, Any, Optional

from .colors import TextStyler, colors_enabled, get_styler
from .exceptions import ConfigError, ValidationError
from .levels import LogLevel, LevelLike, log_gte, parse_level

DEFAULT_LEVEL = LogLevel.INFO

################################################################################
# CONFIGURATION MANAGER CLASS - TOML Configuration with Environment Integration
################################################################################

class ConfigManager:
    """Configuration handler for the [logging] section of a TOML file."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Load TOML config (if a path is given) and apply environment overrides."""
        self.config_path = config_path
        self.config = self.load_config(config_path) if config_path else {}

        self._load_logging_config()
        self._apply_env_overrides()

    ################################################################################
    # PUBLIC INTERFACE - Configuration Loading and Queries
    ################################################################################

    def load_config(self, path: str) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(path, "rb") as f:
                config = tomllib.load(f)
            return config
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {path}")
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Error loading configuration from {path}: {e}")

    def allows(self, level: LevelLike) -> bool:
        """Return True if lines at this level pass the configured minimum level."""
        return log_gte(level, self.log_level)

    def styler(self) -> TextStyler:
        """Styler matching the console_colors setting."""
        return get_styler(self.console_colors)

    ################################################################################
    # PRIVATE METHODS - Internal Implementation
    ################################################################################

    def _load_logging_config(self) -> None:
        """Load logging config from [logging] section."""
        section = self.config.get("logging", {})
        if not isinstance(section, dict):
            raise ConfigError("[logging] must be a table")

        self.log_level = self._parse_level(section.get("level", DEFAULT_LEVEL.value), "logging.level")

        console_colors = section.get("console_colors", True)
        if not isinstance(console_colors, bool):
            raise ConfigError(f"logging.console_colors must be true or false, got {console_colors!r}")
        self.console_colors = console_colors

    def _apply_env_overrides(self) -> None:
        """PRETTYLOG_LEVEL replaces the level, a non-empty NO_COLOR turns colors off."""
        env_level = os.getenv("PRETTYLOG_LEVEL")
        if env_level:
            self.log_level = self._parse_level(env_level, "PRETTYLOG_LEVEL")
        if not colors_enabled():
            self.console_colors = False

    @staticmethod
    def _parse_level(value: Any, source: str) -> LogLevel:
        try:
            return parse_level(value)
        except ValidationError as e:
            raise ConfigError(f"Invalid {source}: {e}")
