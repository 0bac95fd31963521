"""Validation utilities for theme data."""

from typing import List, Optional, Sequence

from returns.result import Failure, Result, Success

from config.logging_config import get_logger
from namegen.core.error_handling import ThemeDataInvalidError
from namegen.core.result_pattern import AppError, validation_error

from .models import BuildingType, Gender, ThemeData

logger = get_logger(__name__)

_SECTIONS = (
    ("npc_names", "NPC"),
    ("building_names", "Building"),
    ("city_names", "City"),
    ("district_names", "District"),
    ("street_names", "Street"),
    ("faction_names", "Faction"),
)


class ThemeValidator:
    """Validates theme data against the complete-theme and extension rules."""

    @classmethod
    def validate_pool(cls, values: Optional[Sequence[Optional[str]]], field_label: str) -> List[str]:
        """
        Validate a single pool that must be present and non-empty.

        Args:
            values: Pool to validate
            field_label: Human-readable pool name used in messages

        Returns:
            List of validation errors (empty if valid)
        """
        if not values:
            return [f"{field_label} is null or empty"]
        return cls._validate_entries(values, field_label)

    @classmethod
    def _validate_entries(cls, values: Sequence[Optional[str]], field_label: str) -> List[str]:
        invalid = []
        # "" is allowed: it stands for an omitted syllable.
        for index, value in enumerate(values):
            if value is None:
                invalid.append(f"index {index} (null)")
            elif not isinstance(value, str):
                invalid.append(f"index {index} (not a string: {value!r})")
            elif value and not value.strip():
                invalid.append(f"index {index} (whitespace-only: '{value}')")
        if invalid:
            return [f"{field_label} contains invalid entries at {', '.join(invalid)}"]
        return []

    @classmethod
    def validate_theme(cls, data: ThemeData) -> List[str]:
        """
        Validate a complete theme.

        Every section must be present, every pool non-empty with no blank
        entries, and every building type must have data.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: List[str] = []

        for attribute, section in _SECTIONS:
            if getattr(data, attribute) is None:
                errors.append(f"{section} names are missing from theme data")

        if data.npc_names is not None:
            for gender in Gender:
                if data.npc_names.for_gender(gender) is None:
                    errors.append(
                        f"NPC {gender.display_name} names are missing from theme data"
                    )

        if data.building_names is not None:
            for building_type in BuildingType:
                if data.building_names.for_type(building_type) is None:
                    errors.append(
                        f"Building type '{building_type.display_name}' is missing from theme data"
                    )

        for field_label, pool in data.iter_pools():
            errors.extend(cls.validate_pool(pool, field_label))

        return errors

    @classmethod
    def validate_extension(cls, data: ThemeData) -> List[str]:
        """
        Validate an extension fragment.

        Absent or empty pools are allowed; non-empty pools must not hold
        null or blank entries.
        """
        errors: List[str] = []
        for field_label, pool in data.iter_pools():
            if pool:
                errors.extend(cls._validate_entries(pool, field_label))
        return errors

    @classmethod
    def check_theme(cls, data: ThemeData) -> Result[ThemeData, AppError]:
        """Validate a complete theme, returning every problem in a Failure."""
        return cls._as_result(data, cls.validate_theme(data))

    @classmethod
    def check_extension(cls, data: ThemeData) -> Result[ThemeData, AppError]:
        """Validate an extension fragment, returning every problem in a Failure."""
        return cls._as_result(data, cls.validate_extension(data))

    @classmethod
    def require_valid_theme(cls, data: ThemeData) -> ThemeData:
        """
        Raise unless ``data`` is a valid complete theme.

        Raises:
            ThemeDataInvalidError: listing every problem found
        """
        return cls._require(data, cls.validate_theme(data))

    @classmethod
    def require_valid_extension(cls, data: ThemeData) -> ThemeData:
        """Raise unless ``data`` is a structurally valid extension."""
        return cls._require(data, cls.validate_extension(data))

    @staticmethod
    def _as_result(data: ThemeData, errors: List[str]) -> Result[ThemeData, AppError]:
        if errors:
            return Failure(
                validation_error(
                    ThemeDataInvalidError(data.label, errors).message,
                    field="theme_data",
                    theme=data.label,
                    errors=errors,
                )
            )
        return Success(data)

    @staticmethod
    def _require(data: ThemeData, errors: List[str]) -> ThemeData:
        if errors:
            logger.debug("theme_validation_failed", theme=data.label, error_count=len(errors))
            raise ThemeDataInvalidError(data.label, errors)
        return data

