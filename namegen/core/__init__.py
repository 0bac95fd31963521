"""Error types and Result helpers shared across the generator."""

from .error_handling import (
    BaseError,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    IdentifierConflictError,
    InvalidParameterError,
    NamePoolExhaustedError,
    ResourceError,
    ThemeConfigurationError,
    ThemeDataInvalidError,
    ThemeLoadError,
    ThemeNotFoundError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "ErrorSeverity",
    "ErrorCategory",
    "ValidationError",
    "InvalidParameterError",
    "ThemeDataInvalidError",
    "ThemeNotFoundError",
    "IdentifierConflictError",
    "ResourceError",
    "NamePoolExhaustedError",
    "ThemeLoadError",
    "ConfigurationError",
    "ThemeConfigurationError",
]
