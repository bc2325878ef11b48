"""
Error handling for XML-Comp.

- Structured error hierarchy
- Logging decorator for operation entry points
"""

from .exceptions import (
    XMLCompError,
    InvalidArgumentError,
    FileAccessError,
    ConfigurationError,
)

from .decorators import (
    log_errors,
)

__all__ = [
    # Exceptions
    "XMLCompError",
    "InvalidArgumentError",
    "FileAccessError",
    "ConfigurationError",

    # Decorators
    "log_errors",
]
