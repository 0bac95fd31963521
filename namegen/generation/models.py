"""Data models for themed name generation."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from namegen.core.error_handling import InvalidParameterError

# A pool may be None (absent) and may hold None entries until validated.
Pool = Optional[Tuple[Optional[str], ...]]


class _ChoiceEnum(Enum):
    """Enum with case-insensitive parsing and a human-facing label."""

    @property
    def display_name(self) -> str:
        return self.name.title()

    @classmethod
    def choices(cls) -> List[str]:
        return [member.display_name for member in cls]

    @classmethod
    def lookup(cls, value: Any) -> Optional["_ChoiceEnum"]:
        """Return the member matching ``value`` by member, value or name, else None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        return None

    @classmethod
    def parse(cls, value: Any, parameter: Optional[str] = None):
        """
        Parse a member from a member, its value or its name (case-insensitive).

        Raises:
            InvalidParameterError: naming the value and every legal choice
        """
        member = cls.lookup(value)
        if member is None:
            raise InvalidParameterError.for_choice(
                parameter or cls._parameter_name(), value, cls.choices()
            )
        return member

    @classmethod
    def _parameter_name(cls) -> str:
        return cls.__name__[0].lower() + cls.__name__[1:]


class Theme(_ChoiceEnum):
    """Built-in themes."""

    CYBERPUNK = "cyberpunk"
    ELVES = "elves"
    ORCS = "orcs"


class Gender(_ChoiceEnum):
    """NPC gender categories, in auto-selection order."""

    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"


class BuildingType(_ChoiceEnum):
    """Building classifications."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    GOVERNMENT = "government"
    ENTERTAINMENT = "entertainment"
    MEDICAL = "medical"
    EDUCATIONAL = "educational"


class EntityType(_ChoiceEnum):
    """Kinds of entity that can be named."""

    NPC = "npc"
    BUILDING = "building"
    CITY = "city"
    DISTRICT = "district"
    STREET = "street"
    FACTION = "faction"

    @property
    def display_name(self) -> str:
        return "NPC" if self is EntityType.NPC else self.name.title()


ThemeRef = Union[Theme, str]


def freeze_pool(values: Optional[Iterable[Optional[str]]]) -> Pool:
    """Copy a caller sequence into an immutable pool."""
    if values is None:
        return None
    if isinstance(values, str):
        raise TypeError("A name pool must be a sequence of strings, not a single string")
    return tuple(values)


def _freeze_fields(instance: Any, *names: str) -> None:
    for name in names:
        object.__setattr__(instance, name, freeze_pool(getattr(instance, name)))


def concat_pools(*pools: Pool) -> Tuple[Optional[str], ...]:
    """Concatenate pools in order, keeping duplicates; absent pools add nothing."""
    merged: List[Optional[str]] = []
    for pool in pools:
        if pool:
            merged.extend(pool)
    return tuple(merged)


@dataclass(frozen=True)
class GenderNameData:
    """Syllable pools for one NPC gender."""

    prefixes: Pool = ()
    cores: Pool = ()
    suffixes: Pool = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "prefixes", "cores", "suffixes")


@dataclass(frozen=True)
class NpcNameData:
    """NPC name pools for every gender."""

    male: Optional[GenderNameData] = None
    female: Optional[GenderNameData] = None
    neutral: Optional[GenderNameData] = None

    def for_gender(self, gender: Gender) -> Optional[GenderNameData]:
        return getattr(self, gender.value)


@dataclass(frozen=True)
class BuildingTypeData:
    """Pools for one building classification."""

    prefixes: Pool = ()
    descriptors: Pool = ()
    suffixes: Pool = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "prefixes", "descriptors", "suffixes")


@dataclass(frozen=True)
class BuildingNameData:
    """Generic building pools plus per-type pools."""

    generic_prefixes: Pool = ()
    generic_suffixes: Pool = ()
    type_data: Optional[Mapping[BuildingType, BuildingTypeData]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        _freeze_fields(self, "generic_prefixes", "generic_suffixes")
        if self.type_data is not None:
            object.__setattr__(
                self, "type_data", MappingProxyType(dict(self.type_data))
            )

    def for_type(self, building_type: BuildingType) -> Optional[BuildingTypeData]:
        if not self.type_data:
            return None
        return self.type_data.get(building_type)


@dataclass(frozen=True)
class CityNameData:
    prefixes: Pool = ()
    cores: Pool = ()
    suffixes: Pool = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "prefixes", "cores", "suffixes")


@dataclass(frozen=True)
class DistrictNameData:
    descriptors: Pool = ()
    location_types: Pool = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "descriptors", "location_types")


@dataclass(frozen=True)
class StreetNameData:
    prefixes: Pool = ()
    cores: Pool = ()
    street_suffixes: Pool = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "prefixes", "cores", "street_suffixes")


@dataclass(frozen=True)
class FactionNameData:
    prefixes: Pool = ()
    cores: Pool = ()
    suffixes: Pool = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "prefixes", "cores", "suffixes")


@dataclass(frozen=True)
class ThemeData:
    """
    All name pools for one theme.

    A complete theme has every section; an extension fragment may leave
    any section as None.
    """

    label: str = "custom"
    npc_names: Optional[NpcNameData] = None
    building_names: Optional[BuildingNameData] = None
    city_names: Optional[CityNameData] = None
    district_names: Optional[DistrictNameData] = None
    street_names: Optional[StreetNameData] = None
    faction_names: Optional[FactionNameData] = None

    @classmethod
    def empty(cls, label: str = "custom") -> "ThemeData":
        """Return a fragment with no sections."""
        return cls(label=label)

    def iter_pools(self) -> Iterator[Tuple[str, Pool]]:
        """Yield ``(field_label, pool)`` for every pool present, in a fixed order."""
        if self.npc_names is not None:
            for gender in Gender:
                data = self.npc_names.for_gender(gender)
                if data is None:
                    continue
                yield f"NPC {gender.display_name} Prefixes", data.prefixes
                yield f"NPC {gender.display_name} Cores", data.cores
                yield f"NPC {gender.display_name} Suffixes", data.suffixes

        if self.building_names is not None:
            yield "Building Generic Prefixes", self.building_names.generic_prefixes
            yield "Building Generic Suffixes", self.building_names.generic_suffixes
            for building_type in BuildingType:
                data = self.building_names.for_type(building_type)
                if data is None:
                    continue
                label = building_type.display_name
                yield f"Building {label} Prefixes", data.prefixes
                yield f"Building {label} Descriptors", data.descriptors
                yield f"Building {label} Suffixes", data.suffixes

        if self.city_names is not None:
            yield "City Prefixes", self.city_names.prefixes
            yield "City Cores", self.city_names.cores
            yield "City Suffixes", self.city_names.suffixes

        if self.district_names is not None:
            yield "District Descriptors", self.district_names.descriptors
            yield "District Location Types", self.district_names.location_types

        if self.street_names is not None:
            yield "Street Prefixes", self.street_names.prefixes
            yield "Street Cores", self.street_names.cores
            yield "Street Suffixes", self.street_names.street_suffixes

        if self.faction_names is not None:
            yield "Faction Prefixes", self.faction_names.prefixes
            yield "Faction Cores", self.faction_names.cores
            yield "Faction Suffixes", self.faction_names.suffixes
