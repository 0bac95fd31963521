"""Pydantic schema for theme JSON documents."""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as SchemaValidationError
from pydantic.alias_generators import to_camel

from namegen.core.error_handling import ThemeLoadError
from namegen.generation.models import (
    BuildingNameData,
    BuildingType,
    BuildingTypeData,
    CityNameData,
    DistrictNameData,
    FactionNameData,
    GenderNameData,
    NpcNameData,
    StreetNameData,
    ThemeData,
)

PoolField = Optional[List[Optional[str]]]


class _Section(BaseModel):
    """Accepts camelCase or snake_case keys and ignores unknown ones."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class GenderNamesSchema(_Section):
    prefixes: PoolField = None
    cores: PoolField = None
    suffixes: PoolField = None

    def to_model(self) -> GenderNameData:
        return GenderNameData(self.prefixes, self.cores, self.suffixes)


class NpcNamesSchema(_Section):
    male: Optional[GenderNamesSchema] = None
    female: Optional[GenderNamesSchema] = None
    neutral: Optional[GenderNamesSchema] = None

    def to_model(self) -> NpcNameData:
        return NpcNameData(
            male=self.male.to_model() if self.male else None,
            female=self.female.to_model() if self.female else None,
            neutral=self.neutral.to_model() if self.neutral else None,
        )


class BuildingTypeSchema(_Section):
    prefixes: PoolField = None
    descriptors: PoolField = None
    suffixes: PoolField = None

    def to_model(self) -> BuildingTypeData:
        return BuildingTypeData(self.prefixes, self.descriptors, self.suffixes)


class BuildingNamesSchema(_Section):
    generic_prefixes: PoolField = None
    generic_suffixes: PoolField = None
    type_data: Optional[Dict[str, Optional[BuildingTypeSchema]]] = None

    @field_validator("type_data")
    @classmethod
    def _known_building_types(cls, value):
        if value is None:
            return value
        unknown = [key for key in value if BuildingType.lookup(key) is None]
        if unknown:
            raise ValueError(
                f"Unknown building type(s): {', '.join(unknown)}. "
                f"Expected values are: {', '.join(BuildingType.choices())}."
            )
        return value

    def to_model(self) -> BuildingNameData:
        type_data = None
        if self.type_data is not None:
            type_data = {
                BuildingType.lookup(key): entry.to_model()
                for key, entry in self.type_data.items()
                if entry is not None
            }
        return BuildingNameData(self.generic_prefixes, self.generic_suffixes, type_data)


class CityNamesSchema(_Section):
    prefixes: PoolField = None
    cores: PoolField = None
    suffixes: PoolField = None

    def to_model(self) -> CityNameData:
        return CityNameData(self.prefixes, self.cores, self.suffixes)


class DistrictNamesSchema(_Section):
    descriptors: PoolField = None
    location_types: PoolField = None

    def to_model(self) -> DistrictNameData:
        return DistrictNameData(self.descriptors, self.location_types)


class StreetNamesSchema(_Section):
    prefixes: PoolField = None
    cores: PoolField = None
    street_suffixes: PoolField = None

    def to_model(self) -> StreetNameData:
        return StreetNameData(self.prefixes, self.cores, self.street_suffixes)


class FactionNamesSchema(_Section):
    prefixes: PoolField = None
    cores: PoolField = None
    suffixes: PoolField = None

    def to_model(self) -> FactionNameData:
        return FactionNameData(self.prefixes, self.cores, self.suffixes)


class ThemeSchema(_Section):
    """Top-level theme document."""

    theme: Optional[str] = None
    npc_names: Optional[NpcNamesSchema] = None
    building_names: Optional[BuildingNamesSchema] = None
    city_names: Optional[CityNamesSchema] = None
    district_names: Optional[DistrictNamesSchema] = None
    street_names: Optional[StreetNamesSchema] = None
    faction_names: Optional[FactionNamesSchema] = None

    def to_model(self, label: Optional[str] = None) -> ThemeData:
        return ThemeData(
            label=label or self.theme or "custom",
            npc_names=self.npc_names.to_model() if self.npc_names else None,
            building_names=self.building_names.to_model() if self.building_names else None,
            city_names=self.city_names.to_model() if self.city_names else None,
            district_names=self.district_names.to_model() if self.district_names else None,
            street_names=self.street_names.to_model() if self.street_names else None,
            faction_names=self.faction_names.to_model() if self.faction_names else None,
        )


def parse_theme_document(document: Any, label: Optional[str] = None) -> ThemeData:
    """
    Convert an already-decoded JSON document into theme data.

    Raises:
        ThemeLoadError: If the document does not match the theme schema
    """
    name = label or "custom"
    if not isinstance(document, dict):
        raise ThemeLoadError(
            f"Failed to parse {name} theme data. "
            "The JSON root must be an object.",
            context={"theme": name},
        )
    try:
        schema = ThemeSchema.model_validate(document)
    except SchemaValidationError as e:
        raise ThemeLoadError(
            f"Failed to parse {name} theme data. "
            f"The JSON contains invalid structure: {e}",
            context={"theme": name},
        ) from e
    return schema.to_model(label)


def parse_theme_json(text: str, label: Optional[str] = None) -> ThemeData:
    """
    Parse a theme JSON string into theme data.

    Only syntax and structure are checked here; completeness is left to
    ``ThemeValidator``.

    Raises:
        ThemeLoadError: If the text is not valid JSON or not a theme document
    """
    name = label or "custom"
    if not text or not text.strip():
        raise ThemeLoadError(
            f"Failed to parse {name} theme data. The JSON text is empty.",
            context={"theme": name},
        )
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ThemeLoadError(
            f"Failed to parse {name} theme data. "
            f"The JSON contains invalid syntax: {e}",
            context={"theme": name},
        ) from e
    return parse_theme_document(document, label)
