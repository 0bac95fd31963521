"""Assembles names from syllable pools using a seeded stream."""

from typing import List, Optional

from .models import (
    BuildingNameData,
    BuildingType,
    CityNameData,
    DistrictNameData,
    FactionNameData,
    GenderNameData,
    Pool,
    StreetNameData,
)
from .random_source import SeededRandom


class SyllableSelector:
    """Picks entries from pools, one draw per pick."""

    def select_from(self, pool: Pool, random: SeededRandom) -> str:
        """Pick one entry; an empty or absent pool yields "" without a draw."""
        if not pool:
            return ""
        return pool[random.next(len(pool))] or ""

    def select_multiple(self, pool: Pool, count: int, random: SeededRandom) -> List[str]:
        if not pool or count <= 0:
            return []
        return [self.select_from(pool, random) for _ in range(count)]


class NameBuilder:
    """
    Per-entity name templates.

    Each method draws from its pools in a fixed order, one draw per pool,
    and concatenates the picks:

    ========  =========================================
    NPC       prefix + core + suffix
    Building  prefix + " " + descriptor + suffix (typed)
              prefix + suffix (generic)
    City      prefix + core + suffix
    District  descriptor + " " + location_type
    Street    prefix + core + " " + street_suffix
    Faction   prefix + " " + core + suffix
    ========  =========================================
    """

    def __init__(self, selector: Optional[SyllableSelector] = None):
        self._selector = selector or SyllableSelector()

    def build_npc_name(self, data: Optional[GenderNameData], random: SeededRandom) -> str:
        data = data or GenderNameData()
        prefix = self._selector.select_from(data.prefixes, random)
        core = self._selector.select_from(data.cores, random)
        suffix = self._selector.select_from(data.suffixes, random)
        return prefix + core + suffix

    def build_building_name(
        self,
        data: Optional[BuildingNameData],
        building_type: Optional[BuildingType],
        random: SeededRandom,
    ) -> str:
        """
        Build a building name.

        With a type present in ``data`` the typed template is used; with no
        type, or a type missing from the data, the generic pools are used.
        """
        data = data or BuildingNameData()
        type_data = data.for_type(building_type) if building_type is not None else None
        if type_data is not None:
            prefix = self._selector.select_from(type_data.prefixes, random)
            descriptor = self._selector.select_from(type_data.descriptors, random)
            suffix = self._selector.select_from(type_data.suffixes, random)
            return prefix + " " + descriptor + suffix

        prefix = self._selector.select_from(data.generic_prefixes, random)
        suffix = self._selector.select_from(data.generic_suffixes, random)
        return prefix + suffix

    def build_city_name(self, data: Optional[CityNameData], random: SeededRandom) -> str:
        data = data or CityNameData()
        prefix = self._selector.select_from(data.prefixes, random)
        core = self._selector.select_from(data.cores, random)
        suffix = self._selector.select_from(data.suffixes, random)
        return prefix + core + suffix

    def build_district_name(self, data: Optional[DistrictNameData], random: SeededRandom) -> str:
        data = data or DistrictNameData()
        descriptor = self._selector.select_from(data.descriptors, random)
        location_type = self._selector.select_from(data.location_types, random)
        return descriptor + " " + location_type

    def build_street_name(self, data: Optional[StreetNameData], random: SeededRandom) -> str:
        data = data or StreetNameData()
        prefix = self._selector.select_from(data.prefixes, random)
        core = self._selector.select_from(data.cores, random)
        street_suffix = self._selector.select_from(data.street_suffixes, random)
        return prefix + core + " " + street_suffix

    def build_faction_name(self, data: Optional[FactionNameData], random: SeededRandom) -> str:
        data = data or FactionNameData()
        prefix = self._selector.select_from(data.prefixes, random)
        core = self._selector.select_from(data.cores, random)
        suffix = self._selector.select_from(data.suffixes, random)
        return prefix + " " + core + suffix
