"""Seeded, theme-driven procedural name generator for tabletop RPGs."""

__version__ = "0.1.0"

from .core import (
    IdentifierConflictError,
    InvalidParameterError,
    NamePoolExhaustedError,
    ThemeConfigurationError,
    ThemeDataInvalidError,
    ThemeLoadError,
    ThemeNotFoundError,
)
from .generation import BuildingType, EntityType, Gender, NameGenerator, Theme, ThemeData
from .themes import (
    BuildingNameDataBuilder,
    CustomThemeData,
    NpcNameDataBuilder,
    ThemeConfig,
    ThemeDataBuilder,
    ThemeExtension,
)

__all__ = [
    "NameGenerator",
    "Theme",
    "Gender",
    "BuildingType",
    "EntityType",
    "ThemeData",
    "ThemeConfig",
    "ThemeDataBuilder",
    "NpcNameDataBuilder",
    "BuildingNameDataBuilder",
    "CustomThemeData",
    "ThemeExtension",
    "InvalidParameterError",
    "ThemeNotFoundError",
    "ThemeDataInvalidError",
    "IdentifierConflictError",
    "NamePoolExhaustedError",
    "ThemeLoadError",
    "ThemeConfigurationError",
]
