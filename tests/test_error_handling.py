"""
Tests for the name generator error hierarchy.
"""

import pytest

from namegen.core.error_handling import (
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
from namegen.generation.models import EntityType, Theme


class TestBaseError:
    """Test BaseError class and hierarchy."""

    def test_base_error_initialization(self):
        """Test BaseError initialization with all parameters."""
        error = BaseError(
            message="Test error",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.RESOURCE,
            error_code="TEST-001",
            context={"key": "value"},
            recoverable=False,
        )

        assert error.message == "Test error"
        assert error.severity == ErrorSeverity.HIGH
        assert error.category == ErrorCategory.RESOURCE
        assert error.error_code == "TEST-001"
        assert error.context == {"key": "value"}
        assert error.recoverable is False
        assert error.timestamp is not None

    def test_error_code_generation(self):
        error = BaseError("Test", category=ErrorCategory.CONFLICT, severity=ErrorSeverity.LOW)
        assert error.error_code.startswith("CON-LOW-")

    def test_to_dict(self):
        error = ValidationError("Bad value", field="seed")
        data = error.to_dict()

        assert data["error_type"] == "ValidationError"
        assert data["message"] == "Bad value"
        assert data["severity"] == "LOW"
        assert data["category"] == "VALIDATION"
        assert data["context"] == {"field": "seed"}
        assert data["recoverable"] is False
        assert "timestamp" in data


class TestDomainErrors:
    """Test messages and metadata of the generator's errors."""

    def test_invalid_parameter_for_choice(self):
        error = InvalidParameterError.for_choice("gender", "robot", ["Male", "Female", "Neutral"])

        assert isinstance(error, ValidationError)
        assert isinstance(error, ValueError)
        assert error.message == (
            "Invalid gender value: 'robot'. Expected values are: Male, Female, Neutral."
        )
        assert error.context["field"] == "gender"
        assert error.context["expected"] == ["Male", "Female", "Neutral"]
        assert error.value == "robot"

    def test_theme_data_invalid(self):
        error = ThemeDataInvalidError("steampunk", ["City Prefixes is null or empty", "x"])

        assert error.errors == ["City Prefixes is null or empty", "x"]
        assert error.message == (
            "Theme data validation failed for 'steampunk' theme. "
            "The following issues were found:\n- City Prefixes is null or empty\n- x"
        )
        assert error.context["theme"] == "steampunk"

    def test_theme_not_found(self):
        error = ThemeNotFoundError("atlantis", ["Cyberpunk", "Elves", "Orcs"])

        assert isinstance(error, LookupError)
        assert error.category == ErrorCategory.NOT_FOUND
        assert error.message == (
            "Theme 'atlantis' is not registered. Available themes: Cyberpunk, Elves, Orcs"
        )

    def test_identifier_conflict(self):
        error = IdentifierConflictError("taken", identifier="steampunk")

        assert error.category == ErrorCategory.CONFLICT
        assert error.identifier == "steampunk"

    def test_name_pool_exhausted(self):
        error = NamePoolExhaustedError(EntityType.NPC, Theme.ELVES, 1000)

        assert isinstance(error, ResourceError)
        assert error.recoverable
        assert error.attempts == 1000
        assert error.message == (
            "Unable to generate unique NPC name for Elves theme after 1000 attempts. "
            "Consider resetting the session or using a different seed."
        )
        assert error.context["resource_type"] == "name_pool"

    def test_name_pool_exhausted_with_identifier(self):
        error = NamePoolExhaustedError(EntityType.CITY, "steampunk", 1000)
        assert "unique City name for steampunk theme" in error.message

    def test_theme_load_error(self):
        error = ThemeLoadError("Broken", resource="namegen.themes.data/orcs.json")

        assert error.resource == "namegen.themes.data/orcs.json"
        assert error.context["resource_type"] == "theme_data"
        assert error.severity == ErrorSeverity.HIGH
        assert not error.recoverable

    def test_theme_configuration_error(self):
        error = ThemeConfigurationError(["first", "second"])

        assert isinstance(error, ConfigurationError)
        assert error.errors == ["first", "second"]
        assert error.message == "Theme configuration failed with 2 error(s):\nfirst\nsecond"
        assert error.context["config_key"] == "themes"
        assert error.severity == ErrorSeverity.CRITICAL

    def test_errors_can_be_raised_and_caught_as_base(self):
        with pytest.raises(BaseError):
            raise ThemeNotFoundError("x", [])
