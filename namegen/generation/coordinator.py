"""Drives one name request from theme resolution to an accepted name."""

from typing import Callable, Dict, Optional

from config.logging_config import get_logger
from namegen.core.error_handling import NamePoolExhaustedError

from .models import BuildingType, EntityType, Gender, ThemeData, ThemeRef
from .name_builder import NameBuilder
from .session import SessionState

logger = get_logger(__name__)

MAX_RETRY_ATTEMPTS = 1000

ThemeResolver = Callable[[ThemeRef], ThemeData]


class GenerationCoordinator:
    """
    Resolves the theme, then assembles candidates until one is unique.

    Each call gets its own budget of ``MAX_RETRY_ATTEMPTS``. Rejected
    candidates still consume draws, so a replayed call sequence rejects and
    accepts the same candidates.
    """

    def __init__(self, resolve_theme: ThemeResolver, name_builder: Optional[NameBuilder] = None):
        self._resolve_theme = resolve_theme
        self._builder = name_builder or NameBuilder()
        self._assemblers: Dict[EntityType, Callable[..., str]] = {
            EntityType.NPC: self._npc,
            EntityType.BUILDING: self._building,
            EntityType.CITY: self._city,
            EntityType.DISTRICT: self._district,
            EntityType.STREET: self._street,
            EntityType.FACTION: self._faction,
        }

    def generate_name(
        self,
        entity_type: EntityType,
        theme: ThemeRef,
        session: SessionState,
        gender: Optional[Gender] = None,
        building_type: Optional[BuildingType] = None,
    ) -> str:
        """
        Generate a name unique within ``session`` for ``entity_type``.

        Raises:
            InvalidParameterError: For an unknown entity type, gender or building type
            ThemeNotFoundError: If the theme is unknown
            NamePoolExhaustedError: After MAX_RETRY_ATTEMPTS collisions
        """
        entity_type = EntityType.parse(entity_type)
        if gender is not None:
            gender = Gender.parse(gender)
        if building_type is not None:
            building_type = BuildingType.parse(building_type)

        theme_data = self._resolve_theme(theme)
        assemble = self._assemblers[entity_type]
        tracker = session.tracker

        for attempt in range(1, MAX_RETRY_ATTEMPTS + 1):
            candidate = assemble(theme_data, session, gender, building_type)
            if tracker.is_unique(entity_type, candidate):
                tracker.track(entity_type, candidate)
                logger.debug(
                    "name_generated",
                    entity_type=entity_type.display_name,
                    theme=str(getattr(theme, "display_name", theme)),
                    attempts=attempt,
                )
                return candidate

        logger.warning(
            "name_pool_exhausted",
            entity_type=entity_type.display_name,
            theme=str(getattr(theme, "display_name", theme)),
            attempts=MAX_RETRY_ATTEMPTS,
        )
        raise NamePoolExhaustedError(entity_type, theme, MAX_RETRY_ATTEMPTS)

    def _npc(self, data: ThemeData, session: SessionState, gender, building_type) -> str:
        if gender is None:
            genders = list(Gender)
            gender = genders[session.random.next(len(genders))]
        npc_names = data.npc_names
        gender_data = npc_names.for_gender(gender) if npc_names else None
        return self._builder.build_npc_name(gender_data, session.random)

    def _building(self, data: ThemeData, session: SessionState, gender, building_type) -> str:
        return self._builder.build_building_name(data.building_names, building_type, session.random)

    def _city(self, data: ThemeData, session: SessionState, gender, building_type) -> str:
        return self._builder.build_city_name(data.city_names, session.random)

    def _district(self, data: ThemeData, session: SessionState, gender, building_type) -> str:
        return self._builder.build_district_name(data.district_names, session.random)

    def _street(self, data: ThemeData, session: SessionState, gender, building_type) -> str:
        return self._builder.build_street_name(data.street_names, session.random)

    def _faction(self, data: ThemeData, session: SessionState, gender, building_type) -> str:
        return self._builder.build_faction_name(data.faction_names, session.random)
