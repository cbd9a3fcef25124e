"""Exceptions raised by vidar.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from vidar.exceptions import (
        VidarError,
        InvalidKindError,
        InvalidPropertyError,
        EnvFileIOError,
        ConfigPathError,
    )

    try:
        env = load(config)
    except InvalidPropertyError as e:
        print(e.details["line_number"])
"""

from vidar.exceptions.base import (
    ConfigPathError,
    ConfigurationError,
    EnvFileIOError,
    InvalidKindError,
    InvalidPropertyError,
    ValidationError,
    VidarError,
)

__all__ = [
    # Base exceptions
    "VidarError",
    "ValidationError",
    "ConfigurationError",
    # Load failures
    "InvalidKindError",
    "InvalidPropertyError",
    "EnvFileIOError",
    "ConfigPathError",
]
