# utils/__init__.py

from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    DataShapeError,
    EnumerationLimitError,
    ExtractorError,
    ValidationRules,
)
from .logger import get_logger, setup_logger
from .filesystem import FileSystemProvider

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "DataShapeError",
    "EnumerationLimitError",
    "ExtractorError",
    "ValidationRules",
    "get_logger",
    "setup_logger",
    "FileSystemProvider",
]
