"""
Error hierarchy for the TTRPG name generator.

Every failure the generator surfaces to callers derives from ``BaseError`` so
it carries a severity, a category, a stable error code and a context
dictionary that can be serialized with ``to_dict()``.
"""

import time
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    CRITICAL = auto()  # Generator cannot be constructed or used
    HIGH = auto()  # A requested operation cannot complete
    MEDIUM = auto()  # Expected outcome the caller can recover from
    LOW = auto()  # Caller supplied bad input


class ErrorCategory(Enum):
    """Error categories for classification and routing."""

    VALIDATION = auto()  # Caller input or theme data failed validation
    NOT_FOUND = auto()  # Unknown theme identifier
    CONFLICT = auto()  # Identifier already taken
    CONFIGURATION = auto()  # Generator configuration could not be applied
    RESOURCE = auto()  # Built-in theme data or name pools unavailable


class BaseError(Exception):
    """Base exception class with enhanced error information."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """
        Initialize base error with comprehensive metadata.

        Args:
            message: Human-readable error message
            severity: Error severity level
            category: Error category for classification
            error_code: Unique error code for tracking
            context: Additional context information
            recoverable: Whether the caller can recover without code changes
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.category = category
        self.error_code = error_code or self._generate_error_code()
        self.context = context or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now(timezone.utc)

    def _generate_error_code(self) -> str:
        """Generate unique error code based on category and timestamp."""
        timestamp = int(time.time() * 1000) % 100000
        return f"{self.category.name[:3]}-{self.severity.name[:3]}-{timestamp}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code,
            "error_type": type(self).__name__,
            "message": self.message,
            "severity": self.severity.name,
            "category": self.category.name,
            "context": self.context,
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
        }


class ValidationError(BaseError):
    """Input validation errors."""

    def __init__(
        self, message: str, field: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        super().__init__(
            message,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            context=context,
            recoverable=False,
            **kwargs,
        )


class InvalidParameterError(ValidationError, ValueError):
    """A caller supplied a value outside the legal set for a parameter."""

    def __init__(
        self,
        message: str,
        parameter: str,
        value: Any = None,
        expected: Optional[Sequence[str]] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", {})
        context["value"] = repr(value)
        if expected is not None:
            context["expected"] = list(expected)
        super().__init__(message, field=parameter, context=context, **kwargs)
        self.parameter = parameter
        self.value = value
        self.expected = list(expected) if expected is not None else []

    @classmethod
    def for_choice(
        cls, parameter: str, value: Any, expected: Sequence[str]
    ) -> "InvalidParameterError":
        """Build the standard 'invalid <parameter> value' error."""
        shown = f"'{value}'" if isinstance(value, str) else repr(value)
        return cls(
            f"Invalid {parameter} value: {shown}. "
            f"Expected values are: {', '.join(expected)}.",
            parameter=parameter,
            value=value,
            expected=expected,
        )


class ThemeDataInvalidError(ValidationError):
    """Theme data failed validation; every problem found is listed."""

    def __init__(self, label: str, errors: Sequence[str], **kwargs: Any) -> None:
        self.label = label
        self.errors: List[str] = list(errors)
        message = (
            f"Theme data validation failed for '{label}' theme. "
            "The following issues were found:\n- " + "\n- ".join(self.errors)
        )
        context = kwargs.pop("context", {})
        context["theme"] = label
        context["errors"] = list(self.errors)
        super().__init__(message, context=context, **kwargs)


class ThemeNotFoundError(BaseError, LookupError):
    """A theme identifier matches neither a custom nor a built-in theme."""

    def __init__(
        self, identifier: str, available_themes: Sequence[str], **kwargs: Any
    ) -> None:
        self.identifier = identifier
        self.available_themes = list(available_themes)
        super().__init__(
            f"Theme '{identifier}' is not registered. "
            f"Available themes: {', '.join(self.available_themes)}",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.NOT_FOUND,
            context={"identifier": identifier, "available_themes": self.available_themes},
            recoverable=False,
            **kwargs,
        )


class IdentifierConflictError(BaseError):
    """A custom theme identifier is already registered or reserved."""

    def __init__(self, message: str, identifier: str, **kwargs: Any) -> None:
        self.identifier = identifier
        super().__init__(
            message,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.CONFLICT,
            context={"identifier": identifier},
            recoverable=False,
            **kwargs,
        )


class ResourceError(BaseError):
    """Resource availability errors."""

    def __init__(self, message: str, resource_type: str, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["resource_type"] = resource_type
        kwargs.setdefault("severity", ErrorSeverity.MEDIUM)
        super().__init__(
            message,
            category=ErrorCategory.RESOURCE,
            context=context,
            **kwargs,
        )


class NamePoolExhaustedError(ResourceError):
    """No unique name could be produced within the attempt budget."""

    def __init__(self, entity_type: Any, theme: Any, attempts: int, **kwargs: Any) -> None:
        self.entity_type = entity_type
        self.theme = theme
        self.attempts = attempts
        entity_label = getattr(entity_type, "display_name", entity_type)
        theme_label = getattr(theme, "display_name", theme)
        super().__init__(
            f"Unable to generate unique {entity_label} name for {theme_label} theme "
            f"after {attempts} attempts. "
            "Consider resetting the session or using a different seed.",
            resource_type="name_pool",
            context={
                "entity_type": str(entity_label),
                "theme": str(theme_label),
                "attempts": attempts,
            },
            recoverable=True,
            **kwargs,
        )


class ThemeLoadError(ResourceError):
    """Theme data could not be read or parsed."""

    def __init__(self, message: str, resource: Optional[str] = None, **kwargs: Any) -> None:
        self.resource = resource
        context = kwargs.pop("context", {})
        if resource:
            context["resource"] = resource
        super().__init__(
            message,
            resource_type="theme_data",
            severity=ErrorSeverity.HIGH,
            context=context,
            recoverable=False,
            **kwargs,
        )


class ConfigurationError(BaseError):
    """Configuration errors."""

    def __init__(self, message: str, config_key: str, **kwargs: Any) -> None:
        context = kwargs.pop("context", {})
        context["config_key"] = config_key
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            context=context,
            recoverable=False,
            **kwargs,
        )


class ThemeConfigurationError(ConfigurationError):
    """One or more custom themes or extensions could not be registered."""

    def __init__(self, errors: Sequence[str], **kwargs: Any) -> None:
        self.errors: List[str] = list(errors)
        message = (
            f"Theme configuration failed with {len(self.errors)} error(s):\n"
            + "\n".join(self.errors)
        )
        context = kwargs.pop("context", {})
        context["errors"] = list(self.errors)
        super().__init__(message, config_key="themes", context=context, **kwargs)
