"""vidar - per-environment key/value properties.

Loads ``<kind>.env`` files (optionally on top of ``common.env`` and the OS
environment) into an immutable Environment:
- kind: Environment kinds and their file tokens
- parser: Strict ``key=value`` line parser
- config: Load configuration, directory resolution and the loader
- exceptions: Structured error classes
- logger: Optional structured logging
"""

__version__ = "1.0.0"

from vidar.kind import ENV_SUFFIX, Kind, parse_kind, to_token

from vidar.parser import parse_file, parse_lines

from vidar.environment import Environment

from vidar.config import (
    Config,
    EnvLoader,
    get_config_path,
    load,
    merge,
    resolve_base_dir,
)

from vidar.exceptions import (
    ConfigPathError,
    ConfigurationError,
    EnvFileIOError,
    InvalidKindError,
    InvalidPropertyError,
    ValidationError,
    VidarError,
)

from vidar.logger import Logger, StructuredLogger, create_logger, get_logger

__all__ = [
    "__version__",
    # Kinds
    "ENV_SUFFIX",
    "Kind",
    "parse_kind",
    "to_token",
    # Parsing
    "parse_file",
    "parse_lines",
    # Loading
    "Config",
    "Environment",
    "EnvLoader",
    "load",
    "merge",
    "get_config_path",
    "resolve_base_dir",
    # Exceptions
    "VidarError",
    "ValidationError",
    "ConfigurationError",
    "InvalidKindError",
    "InvalidPropertyError",
    "EnvFileIOError",
    "ConfigPathError",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
]
