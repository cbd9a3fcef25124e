"""
Logger interface for vidar.

The loader accepts any implementation of this contract; it never creates
one on its own.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logging interface.

    Extra keyword arguments are structured fields attached to the record.

    Example:
        class ListLogger(Logger):
            def debug(self, message: str, **kwargs: Any) -> None:
                self.records.append(("DEBUG", message, kwargs))
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Identifier shared by every record of this logger instance."""
