"""
Custom Exception Classes for PRETTYLOG.

Exception Hierarchy:
    PrettyLogException (Base)
    ├─ ValidationError      - Input validation failures (unknown level, bad group depth)
    └─ ConfigError          - Configuration issues (TOML parsing, invalid values)
"""


class PrettyLogException(Exception):
    """Base exception for all PRETTYLOG errors."""
    pass


class ValidationError(PrettyLogException):
    """Input validation failed (unknown level tag, negative or non-integer group depth)."""
    pass


class ConfigError(PrettyLogException):
    """Configuration error (TOML parsing, unreadable file, invalid values)."""
    pass
