"""
Builders for authoring custom themes and theme extensions in code.

Setters check their own arguments straight away. Completeness is checked
afterwards by ``validate()``, which lists everything still missing, and
``build()``/``build_extension()`` refuse to produce data while that list
is non-empty.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from namegen.core.error_handling import (
    InvalidParameterError,
    ThemeDataInvalidError,
    ValidationError,
)
from namegen.generation.models import (
    BuildingNameData,
    BuildingType,
    BuildingTypeData,
    CityNameData,
    DistrictNameData,
    FactionNameData,
    Gender,
    GenderNameData,
    NpcNameData,
    StreetNameData,
    ThemeData,
    ThemeRef,
)

from .config import CustomThemeData, ThemeExtension, normalize_base_identifier

Names = Tuple[str, ...]


def checked_pool(values: Any, field_name: str, parameter: str) -> Names:
    """
    Validate a pool argument and return an immutable copy.

    Raises:
        InvalidParameterError: If the pool is missing, empty or holds blank entries
    """
    if values is None:
        raise InvalidParameterError(
            f"{field_name} cannot be null.", parameter=parameter, value=values
        )
    if isinstance(values, str):
        raise InvalidParameterError(
            f"{field_name} must be a sequence of strings, not a single string.",
            parameter=parameter,
            value=values,
        )
    pool = tuple(values)
    if not pool:
        raise InvalidParameterError(
            f"{field_name} cannot be empty. At least one element is required.",
            parameter=parameter,
            value=pool,
        )
    for index, value in enumerate(pool):
        if value is None:
            raise InvalidParameterError(
                f"{field_name} contains null value at index {index}.",
                parameter=parameter,
                value=pool,
            )
        if not isinstance(value, str) or not value.strip():
            raise InvalidParameterError(
                f"{field_name} contains whitespace-only value at index {index}.",
                parameter=parameter,
                value=pool,
            )
    return pool


class NpcNameDataBuilder:
    """Collects NPC name pools per gender."""

    _SLOTS = ("prefixes", "cores", "suffixes")

    def __init__(self):
        self._pools: Dict[Gender, Dict[str, Names]] = {gender: {} for gender in Gender}

    def _set(self, gender: Gender, prefixes, cores, suffixes) -> "NpcNameDataBuilder":
        label = gender.display_name
        self._pools[gender] = {
            "prefixes": checked_pool(prefixes, f"{label} name prefixes", "prefixes"),
            "cores": checked_pool(cores, f"{label} name cores", "cores"),
            "suffixes": checked_pool(suffixes, f"{label} name suffixes", "suffixes"),
        }
        return self

    def _append(self, gender: Gender, slot: str, values: Sequence[str]) -> "NpcNameDataBuilder":
        checked = checked_pool(values, f"{gender.display_name} name {slot}", slot)
        pools = self._pools[gender]
        pools[slot] = pools.get(slot, ()) + checked
        return self

    def with_male_names(self, prefixes, cores, suffixes) -> "NpcNameDataBuilder":
        return self._set(Gender.MALE, prefixes, cores, suffixes)

    def with_female_names(self, prefixes, cores, suffixes) -> "NpcNameDataBuilder":
        return self._set(Gender.FEMALE, prefixes, cores, suffixes)

    def with_neutral_names(self, prefixes, cores, suffixes) -> "NpcNameDataBuilder":
        return self._set(Gender.NEUTRAL, prefixes, cores, suffixes)

    def add_male_prefixes(self, *prefixes: str) -> "NpcNameDataBuilder":
        return self._append(Gender.MALE, "prefixes", prefixes)

    def add_male_cores(self, *cores: str) -> "NpcNameDataBuilder":
        return self._append(Gender.MALE, "cores", cores)

    def add_male_suffixes(self, *suffixes: str) -> "NpcNameDataBuilder":
        return self._append(Gender.MALE, "suffixes", suffixes)

    def add_female_prefixes(self, *prefixes: str) -> "NpcNameDataBuilder":
        return self._append(Gender.FEMALE, "prefixes", prefixes)

    def add_female_cores(self, *cores: str) -> "NpcNameDataBuilder":
        return self._append(Gender.FEMALE, "cores", cores)

    def add_female_suffixes(self, *suffixes: str) -> "NpcNameDataBuilder":
        return self._append(Gender.FEMALE, "suffixes", suffixes)

    def add_neutral_prefixes(self, *prefixes: str) -> "NpcNameDataBuilder":
        return self._append(Gender.NEUTRAL, "prefixes", prefixes)

    def add_neutral_cores(self, *cores: str) -> "NpcNameDataBuilder":
        return self._append(Gender.NEUTRAL, "cores", cores)

    def add_neutral_suffixes(self, *suffixes: str) -> "NpcNameDataBuilder":
        return self._append(Gender.NEUTRAL, "suffixes", suffixes)

    def validate(self) -> List[str]:
        """List what a complete theme still needs; empty when complete."""
        missing = [
            f"{gender.display_name} names (prefixes, cores, and suffixes required)"
            for gender in Gender
            if any(slot not in self._pools[gender] for slot in self._SLOTS)
        ]
        if missing:
            return [f"Missing required NPC name data: {', '.join(missing)}"]
        return []

    def to_data(self) -> NpcNameData:
        """Snapshot the collected pools; unset pools are empty."""
        return NpcNameData(
            **{
                gender.value: GenderNameData(**self._pools[gender])
                for gender in Gender
            }
        )

    def build(self) -> NpcNameData:
        """
        Return complete NPC data.

        Raises:
            ThemeDataInvalidError: If any gender is incomplete
        """
        errors = self.validate()
        if errors:
            raise ThemeDataInvalidError("NPC names", errors)
        return self.to_data()


class BuildingNameDataBuilder:
    """Collects generic and per-type building pools."""

    _SLOTS = ("prefixes", "descriptors", "suffixes")

    def __init__(self):
        self._generic_prefixes: Optional[Names] = None
        self._generic_suffixes: Optional[Names] = None
        self._types: Dict[BuildingType, Dict[str, Names]] = {}

    def with_generic_names(self, prefixes, suffixes) -> "BuildingNameDataBuilder":
        self._generic_prefixes = checked_pool(prefixes, "Generic building prefixes", "prefixes")
        self._generic_suffixes = checked_pool(suffixes, "Generic building suffixes", "suffixes")
        return self

    def with_type_names(
        self, building_type, prefixes, descriptors, suffixes
    ) -> "BuildingNameDataBuilder":
        building_type = BuildingType.parse(building_type)
        label = building_type.display_name
        self._types[building_type] = {
            "prefixes": checked_pool(prefixes, f"{label} building prefixes", "prefixes"),
            "descriptors": checked_pool(
                descriptors, f"{label} building descriptors", "descriptors"
            ),
            "suffixes": checked_pool(suffixes, f"{label} building suffixes", "suffixes"),
        }
        return self

    def add_generic_prefixes(self, *prefixes: str) -> "BuildingNameDataBuilder":
        checked = checked_pool(prefixes, "Generic building prefixes", "prefixes")
        self._generic_prefixes = (self._generic_prefixes or ()) + checked
        return self

    def add_generic_suffixes(self, *suffixes: str) -> "BuildingNameDataBuilder":
        checked = checked_pool(suffixes, "Generic building suffixes", "suffixes")
        self._generic_suffixes = (self._generic_suffixes or ()) + checked
        return self

    def _append_type(self, building_type, slot: str, values) -> "BuildingNameDataBuilder":
        building_type = BuildingType.parse(building_type)
        checked = checked_pool(
            values, f"{building_type.display_name} building {slot}", slot
        )
        pools = self._types.setdefault(building_type, {})
        pools[slot] = pools.get(slot, ()) + checked
        return self

    def add_type_prefixes(self, building_type, *prefixes: str) -> "BuildingNameDataBuilder":
        return self._append_type(building_type, "prefixes", prefixes)

    def add_type_descriptors(self, building_type, *descriptors: str) -> "BuildingNameDataBuilder":
        return self._append_type(building_type, "descriptors", descriptors)

    def add_type_suffixes(self, building_type, *suffixes: str) -> "BuildingNameDataBuilder":
        return self._append_type(building_type, "suffixes", suffixes)

    def validate(self) -> List[str]:
        """List what a complete theme still needs; empty when complete."""
        missing = []
        if self._generic_prefixes is None or self._generic_suffixes is None:
            missing.append("Generic building names (prefixes and suffixes required)")
        missing_types = [
            building_type.display_name
            for building_type in BuildingType
            if any(slot not in self._types.get(building_type, {}) for slot in self._SLOTS)
        ]
        if missing_types:
            missing.append(f"Building type data for: {', '.join(missing_types)}")
        if missing:
            return [f"Missing required building name data: {', '.join(missing)}"]
        return []

    def to_data(self) -> BuildingNameData:
        """Snapshot the collected pools; unset pools are empty."""
        return BuildingNameData(
            generic_prefixes=self._generic_prefixes or (),
            generic_suffixes=self._generic_suffixes or (),
            type_data={
                building_type: BuildingTypeData(**pools)
                for building_type, pools in self._types.items()
            },
        )

    def build(self) -> BuildingNameData:
        """
        Return complete building data.

        Raises:
            ThemeDataInvalidError: If generic pools or any type are incomplete
        """
        errors = self.validate()
        if errors:
            raise ThemeDataInvalidError("Building names", errors)
        return self.to_data()


class ThemeDataBuilder:
    """
    Assembles a complete custom theme, or an extension via :meth:`extend`.

    Example::

        builder = ThemeDataBuilder()
        builder.with_npc_names(npc_builder)
        builder.with_city_names(["Gear"], ["wick"], ["ton"])
        ...
        theme = builder.build()
    """

    def __init__(self):
        self._base_identifier: Optional[str] = None
        self._npc: Optional[NpcNameData] = None
        self._npc_errors: List[str] = []
        self._buildings: Optional[BuildingNameData] = None
        self._building_errors: List[str] = []
        self._city: Optional[CityNameData] = None
        self._district: Optional[DistrictNameData] = None
        self._street: Optional[StreetNameData] = None
        self._faction: Optional[FactionNameData] = None

    @classmethod
    def extend(cls, base: ThemeRef) -> "ThemeDataBuilder":
        """Start an extension of a built-in theme or custom identifier."""
        builder = cls()
        builder._base_identifier = normalize_base_identifier(base)
        return builder

    @property
    def is_extension(self) -> bool:
        return self._base_identifier is not None

    def with_npc_names(self, npc_builder: NpcNameDataBuilder) -> "ThemeDataBuilder":
        if not isinstance(npc_builder, NpcNameDataBuilder):
            raise InvalidParameterError(
                "NPC names must be supplied as an NpcNameDataBuilder.",
                parameter="npc_builder",
                value=npc_builder,
            )
        self._npc = npc_builder.to_data()
        self._npc_errors = npc_builder.validate()
        return self

    def with_building_names(self, building_builder: BuildingNameDataBuilder) -> "ThemeDataBuilder":
        if not isinstance(building_builder, BuildingNameDataBuilder):
            raise InvalidParameterError(
                "Building names must be supplied as a BuildingNameDataBuilder.",
                parameter="building_builder",
                value=building_builder,
            )
        self._buildings = building_builder.to_data()
        self._building_errors = building_builder.validate()
        return self

    def with_city_names(self, prefixes, cores, suffixes) -> "ThemeDataBuilder":
        self._city = CityNameData(
            checked_pool(prefixes, "City name prefixes", "prefixes"),
            checked_pool(cores, "City name cores", "cores"),
            checked_pool(suffixes, "City name suffixes", "suffixes"),
        )
        return self

    def with_district_names(self, descriptors, location_types) -> "ThemeDataBuilder":
        self._district = DistrictNameData(
            checked_pool(descriptors, "District descriptors", "descriptors"),
            checked_pool(location_types, "District location types", "location_types"),
        )
        return self

    def with_street_names(self, prefixes, cores, street_suffixes) -> "ThemeDataBuilder":
        self._street = StreetNameData(
            checked_pool(prefixes, "Street name prefixes", "prefixes"),
            checked_pool(cores, "Street name cores", "cores"),
            checked_pool(street_suffixes, "Street suffixes", "street_suffixes"),
        )
        return self

    def with_faction_names(self, prefixes, cores, suffixes) -> "ThemeDataBuilder":
        self._faction = FactionNameData(
            checked_pool(prefixes, "Faction name prefixes", "prefixes"),
            checked_pool(cores, "Faction name cores", "cores"),
            checked_pool(suffixes, "Faction name suffixes", "suffixes"),
        )
        return self

    def _sections(self) -> Dict[str, Any]:
        return {
            "NPC names": self._npc,
            "Building names": self._buildings,
            "City names": self._city,
            "District names": self._district,
            "Street names": self._street,
            "Faction names": self._faction,
        }

    def validate(self) -> List[str]:
        """
        List every problem that would stop a build.

        For a complete theme that is each missing section plus anything the
        NPC and building builders still need; an extension only needs one
        section.
        """
        sections = self._sections()
        if self.is_extension:
            if all(section is None for section in sections.values()):
                return [
                    "At least one entity type must be provided when creating a theme extension."
                ]
            return []

        errors = []
        missing = [name for name, section in sections.items() if section is None]
        if missing:
            errors.append(
                f"Missing required fields for custom theme: {', '.join(missing)}. "
                "All entity types must be provided when creating a new theme."
            )
        if self._npc is not None:
            errors.extend(self._npc_errors)
        if self._buildings is not None:
            errors.extend(self._building_errors)
        return errors

    def _theme_data(self, label: str) -> ThemeData:
        return ThemeData(
            label=label,
            npc_names=self._npc,
            building_names=self._buildings,
            city_names=self._city,
            district_names=self._district,
            street_names=self._street,
            faction_names=self._faction,
        )

    def build(self, label: str = "custom") -> CustomThemeData:
        """
        Build a complete custom theme.

        Raises:
            ValidationError: If called on an extension builder
            ThemeDataInvalidError: Listing everything still missing
        """
        if self.is_extension:
            raise ValidationError(
                "Cannot call build() on an extension builder. Use build_extension() instead.",
                field="builder",
            )
        errors = self.validate()
        if errors:
            raise ThemeDataInvalidError(label, errors)
        return CustomThemeData(self._theme_data(label))

    def build_extension(self) -> ThemeExtension:
        """
        Build an extension fragment for the base given to :meth:`extend`.

        Raises:
            ValidationError: If called on a complete-theme builder
            ThemeDataInvalidError: If no section was supplied
        """
        if not self.is_extension:
            raise ValidationError(
                "Cannot call build_extension() on a new theme builder. Use build() instead.",
                field="builder",
            )
        errors = self.validate()
        if errors:
            raise ThemeDataInvalidError(f"{self._base_identifier} extension", errors)
        return ThemeExtension(
            self._base_identifier,
            self._theme_data(f"{self._base_identifier} extension"),
        )
