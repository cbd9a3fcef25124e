"""Base exception classes for vidar.

Every vidar exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union


class VidarError(Exception):
    """Base exception for all vidar errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_KIND")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(VidarError):
    """Base for input that fails validation rules.

    Not related to ``pydantic.ValidationError``: invalid ``Config`` field
    values (``comment_char``, ``suffix``) raise pydantic's error, which this
    class does not catch. A bad kind token raises ``InvalidKindError``.
    """

    pass


class ConfigurationError(VidarError):
    """Base for configuration and setup errors."""

    pass


class InvalidKindError(ValidationError):
    """Raised when a string is not one of the canonical kind tokens."""

    def __init__(self, token: Any):
        self.token = token
        super().__init__(
            code="INVALID_KIND",
            message=f"Invalid kind {token!r} supplied",
            details={"token": token},
        )


class InvalidPropertyError(ValidationError):
    """Raised when a property line does not split into exactly key and value.

    The offending line itself is not recorded, values are often secrets.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, line_number: Optional[int] = None):
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        details: Dict[str, Any] = {}
        if self.path is not None:
            details["path"] = str(self.path)
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(
            code="INVALID_PROPERTY",
            message="Invalid property found",
            details=details,
        )


class EnvFileIOError(VidarError):
    """Raised when an environment file cannot be opened or read.

    Attributes:
        path: The file that failed
        cause: The originating OS-level (or decoding) error
    """

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(
            code="IO_FAILURE",
            message=f"Unable to read {self.path}: {cause}",
            details={"path": str(self.path), "error": type(cause).__name__},
        )


class ConfigPathError(ConfigurationError):
    """Raised when no configuration directory can be determined."""

    def __init__(self, message: str = "Unable to determine the configuration path for your application"):
        super().__init__(code="CONFIG_PATH", message=message)
