"""
Error hierarchy for XML-Comp.

Every failure of a comparison run surfaces as one of these types so the
command-line wrapper can report it and exit with a non-zero status.
"""

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class XMLCompError(Exception):
    """
    Base exception for all XML-Comp errors.

    Carries a machine-readable code and context so a failed walk can be
    logged as a single structured event.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.user_message = user_message or "Comparison failed."
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)
        self.traceback_str = traceback.format_exc()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "user_message": self.user_message,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }

    def requires_user_action(self) -> bool:
        """Determine if this error requires user intervention."""
        return isinstance(self, (InvalidArgumentError, ConfigurationError))


class InvalidArgumentError(XMLCompError):
    """An empty file or path name was passed to the comparer."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs):
        super().__init__(
            message,
            context={"field": field, "value": str(value) if value is not None else None},
            user_message="Invalid argument. Check the paths you passed.",
            **kwargs
        )


class FileAccessError(XMLCompError):
    """Open, create or write failure on a path."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs
    ):
        super().__init__(
            message,
            context={"path": str(path) if path is not None else None, "operation": operation},
            user_message="File access error. Check permissions on both trees.",
            **kwargs
        )


class ConfigurationError(XMLCompError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"config_key": config_key},
            user_message="Configuration error. Please check your settings.",
            **kwargs
        )
