"""
Result pattern helpers built on the returns library.

Operations that can fail in expected ways (validation, lookup, registration
conflicts) may return ``Result[T, AppError]`` instead of raising, so batch
callers can gather every problem before deciding what to do with them.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import wraps
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from returns.result import Failure, Result, Success

from namegen.core.error_handling import BaseError, ErrorCategory

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of application error carried in a Failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    CONFIGURATION = "configuration"
    RESOURCE = "resource"
    UNKNOWN = "unknown"


_CATEGORY_KINDS = {
    ErrorCategory.VALIDATION: ErrorKind.VALIDATION,
    ErrorCategory.NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCategory.CONFLICT: ErrorKind.CONFLICT,
    ErrorCategory.CONFIGURATION: ErrorKind.CONFIGURATION,
    ErrorCategory.RESOURCE: ErrorKind.RESOURCE,
}


@dataclass(frozen=True)
class AppError:
    """Structured error record carried by a Failure."""

    kind: ErrorKind
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    recoverable: bool = False

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error": self.kind.value,
            "message": self.message,
            "details": dict(self.details),
            "recoverable": self.recoverable,
        }

    @classmethod
    def from_exception(
        cls, exc: Exception, kind: Optional[ErrorKind] = None
    ) -> "AppError":
        """
        Create an AppError from an exception.

        ``BaseError`` subclasses keep their category and context; anything
        else becomes ``kind`` (default UNKNOWN).
        """
        details: Dict[str, Any] = {"exception_type": type(exc).__name__}
        if isinstance(exc, BaseError):
            details.update(exc.context)
            resolved = kind or _CATEGORY_KINDS.get(exc.category, ErrorKind.UNKNOWN)
            return cls(resolved, exc.message, details, exc.recoverable)
        return cls(kind or ErrorKind.UNKNOWN, str(exc), details)


def validation_error(message: str, field: Optional[str] = None, **details: Any) -> AppError:
    """Create a validation error."""
    if field:
        details["field"] = field
    return AppError(ErrorKind.VALIDATION, message, details)


def not_found_error(resource: str, identifier: str, **details: Any) -> AppError:
    """Create a not found error."""
    details.update({"resource": resource, "id": identifier})
    return AppError(ErrorKind.NOT_FOUND, f"{resource} not found: {identifier}", details)


def conflict_error(message: str, identifier: str, **details: Any) -> AppError:
    """Create an identifier conflict error."""
    details["identifier"] = identifier
    return AppError(ErrorKind.CONFLICT, message, details)


def from_exception(exc: Exception, kind: Optional[ErrorKind] = None) -> AppError:
    """Module-level alias for :meth:`AppError.from_exception`."""
    return AppError.from_exception(exc, kind=kind)


def with_result(
    error_kind: ErrorKind = ErrorKind.UNKNOWN,
    catch: tuple = (BaseError, ValueError, OSError),
) -> Callable[[Callable[..., T]], Callable[..., Result[T, AppError]]]:
    """
    Wrap a raising function so it returns ``Result[T, AppError]``.

    Only the exception types in ``catch`` are converted; anything else
    propagates. A function that already returns a Result is passed through.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, AppError]]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, AppError]:
            try:
                value = func(*args, **kwargs)
            except catch as exc:
                return Failure(AppError.from_exception(exc, kind=_kind_for(exc, error_kind)))
            if isinstance(value, (Success, Failure)):
                return value
            return Success(value)

        return wrapper

    return decorator


def _kind_for(exc: Exception, default: ErrorKind) -> Optional[ErrorKind]:
    # Domain errors keep their own kind; the decorator default covers the rest.
    if isinstance(exc, BaseError):
        return None
    return default


def collect_results(results: Iterable[Result[T, AppError]]) -> Result[List[T], List[AppError]]:
    """
    Collect a sequence of Results.

    Returns every value when all succeeded, otherwise every failure in
    order, never just the first.
    """
    values: List[T] = []
    errors: List[AppError] = []
    for result in results:
        if isinstance(result, Failure):
            errors.append(result.failure())
        else:
            values.append(result.unwrap())
    if errors:
        return Failure(errors)
    return Success(values)


__all__ = [
    "AppError",
    "ErrorKind",
    "collect_results",
    "conflict_error",
    "from_exception",
    "not_found_error",
    "validation_error",
    "with_result",
]
