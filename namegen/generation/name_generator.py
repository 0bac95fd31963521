"""Seeded, theme-driven name generation for TTRPG entities."""

import random
from dataclasses import replace
from typing import List, Optional, Union

from returns.result import Failure

from config.logging_config import get_logger
from config.settings import settings
from namegen.core.error_handling import InvalidParameterError, ThemeConfigurationError
from namegen.core.result_pattern import AppError, collect_results
from namegen.themes.config import ThemeConfig
from namegen.themes.registry import BuiltinLoader, ThemeRegistry

from .coordinator import GenerationCoordinator
from .models import BuildingType, EntityType, Gender, Theme, ThemeRef
from .session import SessionState

logger = get_logger(__name__)

_SEED_BOUND = 2**31 - 1


def _label_error(prefix: str):
    def relabel(error: AppError) -> AppError:
        return replace(error, message=f"{prefix}: {error.message}")

    return relabel


class NameGenerator:
    """
    Generates names for NPCs, buildings, cities, districts, streets and factions.

    A generator owns one session: names are unique per entity type until
    :meth:`reset_session`, and two generators with the same seed, themes and
    call sequence produce the same names.

    Instances are not thread-safe; give each thread its own generator or
    serialize access.
    """

    def __init__(
        self,
        config: Optional[ThemeConfig] = None,
        seed: Optional[int] = None,
        builtin_loader: Optional[BuiltinLoader] = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Custom themes and extensions to register
            seed: Seed for the random stream; falls back to
                ``settings.default_seed`` and then to OS entropy
            builtin_loader: Override for loading built-in theme data

        Raises:
            InvalidParameterError: If the seed is not an integer
            ThemeConfigurationError: Listing every theme or extension that
                could not be registered, and every extension whose base
                theme does not exist
        """
        if seed is None:
            seed = settings.default_seed
        if seed is None:
            seed = random.SystemRandom().randrange(_SEED_BOUND)
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidParameterError(
                f"Seed must be an integer, got {type(seed).__name__}",
                parameter="seed",
                value=seed,
            )

        if config is None and settings.custom_themes_dir is not None:
            config = ThemeConfig.from_directory(settings.custom_themes_dir)

        self._registry = ThemeRegistry(builtin_loader)
        if config is not None:
            self._apply_config(config)

        self._session = SessionState(seed)
        self._coordinator = GenerationCoordinator(self._registry.get_theme)
        logger.info(
            "name_generator_initialized",
            seed=seed,
            themes=self._registry.get_registered_theme_names(),
        )

    def _apply_config(self, config: ThemeConfig) -> None:
        results = [
            self._registry.try_register_custom_theme(identifier, data).alt(
                _label_error(f"Custom theme '{identifier}'")
            )
            for identifier, data in config.theme_data_items()
        ]
        results.extend(
            self._registry.try_register_extension(
                extension.base_theme_identifier, extension.data
            ).alt(_label_error(f"Extension of '{extension.base_theme_identifier}'"))
            for extension in config.theme_extensions
        )
        # All custom themes are registered at this point
        results.extend(
            self._registry.check_theme_exists(base).alt(_label_error(f"Extension of '{base}'"))
            for base in dict.fromkeys(e.base_theme_identifier for e in config.theme_extensions)
        )

        collected = collect_results(results)
        if isinstance(collected, Failure):
            errors = [error.message for error in collected.failure()]
            logger.error("theme_configuration_failed", error_count=len(errors))
            raise ThemeConfigurationError(errors)

    @property
    def seed(self) -> int:
        return self._session.seed

    @staticmethod
    def _check_theme(theme: ThemeRef) -> ThemeRef:
        if isinstance(theme, (Theme, str)):
            return theme
        raise InvalidParameterError.for_choice("theme", theme, Theme.choices())

    def _generate(
        self,
        entity_type: EntityType,
        theme: ThemeRef,
        gender: Optional[Gender] = None,
        building_type: Optional[BuildingType] = None,
    ) -> str:
        return self._coordinator.generate_name(
            entity_type,
            self._check_theme(theme),
            self._session,
            gender=gender,
            building_type=building_type,
        )

    def generate_npc_name(
        self, theme: ThemeRef, gender: Optional[Union[Gender, str]] = None
    ) -> str:
        """
        Generate a unique NPC name.

        Args:
            theme: Built-in Theme or custom theme identifier
            gender: Gender pools to use; drawn from the stream when None

        Returns:
            A name not yet returned for an NPC in this session
        """
        return self._generate(EntityType.NPC, theme, gender=gender)

    def generate_building_name(
        self, theme: ThemeRef, building_type: Optional[Union[BuildingType, str]] = None
    ) -> str:
        """Generate a unique building name; without a type the generic pools are used."""
        return self._generate(EntityType.BUILDING, theme, building_type=building_type)

    def generate_city_name(self, theme: ThemeRef) -> str:
        return self._generate(EntityType.CITY, theme)

    def generate_district_name(self, theme: ThemeRef) -> str:
        return self._generate(EntityType.DISTRICT, theme)

    def generate_street_name(self, theme: ThemeRef) -> str:
        return self._generate(EntityType.STREET, theme)

    def generate_faction_name(self, theme: ThemeRef) -> str:
        return self._generate(EntityType.FACTION, theme)

    def generate_batch(
        self,
        count: int,
        entity_type: Union[EntityType, str],
        theme: ThemeRef,
        **kwargs,
    ) -> List[str]:
        """Generate ``count`` names of one entity type with the same parameters."""
        return [
            self._generate(EntityType.parse(entity_type), theme, **kwargs)
            for _ in range(count)
        ]

    def reset_session(self) -> None:
        """Forget emitted names and rewind the stream to the original seed."""
        self._session.reset()

    def get_available_themes(self) -> List[str]:
        """Built-in theme names followed by registered custom identifiers."""
        return self._registry.get_registered_theme_names()
