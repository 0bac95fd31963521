"""Deterministic name generation: data model, session state and assembly."""

from .coordinator import MAX_RETRY_ATTEMPTS, GenerationCoordinator
from .duplicate_tracker import DuplicateTracker
from .models import (
    BuildingNameData,
    BuildingType,
    BuildingTypeData,
    CityNameData,
    DistrictNameData,
    EntityType,
    FactionNameData,
    Gender,
    GenderNameData,
    NpcNameData,
    StreetNameData,
    Theme,
    ThemeData,
)
from .name_builder import NameBuilder, SyllableSelector
from .name_generator import NameGenerator
from .random_source import SeededRandom
from .session import SessionState
from .validators import ThemeValidator

__all__ = [
    "NameGenerator",
    "GenerationCoordinator",
    "MAX_RETRY_ATTEMPTS",
    "NameBuilder",
    "SyllableSelector",
    "SeededRandom",
    "DuplicateTracker",
    "SessionState",
    "ThemeValidator",
    "Theme",
    "Gender",
    "BuildingType",
    "EntityType",
    "ThemeData",
    "GenderNameData",
    "NpcNameData",
    "BuildingTypeData",
    "BuildingNameData",
    "CityNameData",
    "DistrictNameData",
    "StreetNameData",
    "FactionNameData",
]
