"""
Theme registry.

Holds built-in themes (loaded lazily), custom themes and extension
fragments, and serves a merged view per identifier. Merged views are
memoized and dropped whenever the identifier gains an extension or a
custom theme.
"""

from dataclasses import fields
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from returns.result import Failure, Result, Success

from config.logging_config import get_logger
from namegen.core.error_handling import (
    IdentifierConflictError,
    InvalidParameterError,
    ThemeNotFoundError,
)
from namegen.core.result_pattern import (
    AppError,
    conflict_error,
    not_found_error,
    with_result,
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
    Theme,
    ThemeData,
    ThemeRef,
    concat_pools,
)
from namegen.generation.validators import ThemeValidator

from .provider import ThemeProvider

logger = get_logger(__name__)

BuiltinLoader = Callable[[Theme], ThemeData]
S = TypeVar("S")

RESERVED_IDENTIFIERS = frozenset(theme.value for theme in Theme)


def require_identifier(identifier: Any, parameter: str) -> str:
    """
    Return ``identifier`` unchanged if it is a non-blank string.

    Raises:
        InvalidParameterError: naming ``parameter``
    """
    if not isinstance(identifier, str):
        raise InvalidParameterError(
            f"{parameter} must be a string, got {type(identifier).__name__}",
            parameter=parameter,
            value=identifier,
        )
    if not identifier.strip():
        raise InvalidParameterError(
            f"{parameter} cannot be empty or whitespace-only.",
            parameter=parameter,
            value=identifier,
        )
    return identifier


_checked_identifier = with_result()(require_identifier)


def _merge_pools(section_type: Type[S], sections: Sequence[Optional[S]]) -> Optional[S]:
    """Concatenate every pool field of same-typed sections, skipping absent ones."""
    present = [section for section in sections if section is not None]
    if not present:
        return None
    return section_type(
        **{
            f.name: concat_pools(*(getattr(section, f.name) for section in present))
            for f in fields(section_type)
        }
    )


def _merge_npc(sections: Sequence[Optional[NpcNameData]]) -> Optional[NpcNameData]:
    present = [section for section in sections if section is not None]
    if not present:
        return None
    return NpcNameData(
        **{
            gender.value: _merge_pools(
                GenderNameData, [section.for_gender(gender) for section in present]
            )
            for gender in Gender
        }
    )


def _merge_buildings(
    sections: Sequence[Optional[BuildingNameData]],
) -> Optional[BuildingNameData]:
    present = [section for section in sections if section is not None]
    if not present:
        return None
    type_data: Dict[BuildingType, BuildingTypeData] = {}
    for building_type in BuildingType:
        merged = _merge_pools(
            BuildingTypeData, [section.for_type(building_type) for section in present]
        )
        if merged is not None:
            type_data[building_type] = merged
    return BuildingNameData(
        generic_prefixes=concat_pools(*(s.generic_prefixes for s in present)),
        generic_suffixes=concat_pools(*(s.generic_suffixes for s in present)),
        type_data=type_data,
    )


def merge_theme_data(base: ThemeData, extensions: Sequence[ThemeData]) -> ThemeData:
    """
    Merge extension fragments onto a base theme.

    Every pool becomes ``base ++ ext1 ++ ... ++ extN``; duplicates are kept.
    Building types are merged per type, and a type only an extension
    provides is added.
    """
    if not extensions:
        return base
    layers = [base, *extensions]

    def sections(attribute: str) -> List[Any]:
        return [getattr(layer, attribute) for layer in layers]

    return ThemeData(
        label=base.label,
        npc_names=_merge_npc(sections("npc_names")),
        building_names=_merge_buildings(sections("building_names")),
        city_names=_merge_pools(CityNameData, sections("city_names")),
        district_names=_merge_pools(DistrictNameData, sections("district_names")),
        street_names=_merge_pools(StreetNameData, sections("street_names")),
        faction_names=_merge_pools(FactionNameData, sections("faction_names")),
    )


class ThemeRegistry:
    """
    Resolves theme identifiers to merged theme data.

    Identifiers are case-insensitive. Custom themes shadow nothing: the
    built-in identifiers are reserved.
    """

    def __init__(self, builtin_loader: Optional[BuiltinLoader] = None):
        self._builtin_loader = builtin_loader or ThemeProvider().get_theme_data
        self._builtin_cache: Dict[Theme, ThemeData] = {}
        self._custom_themes: Dict[str, ThemeData] = {}
        self._custom_names: Dict[str, str] = {}
        self._extensions: Dict[str, List[ThemeData]] = {}
        self._merged_cache: Dict[str, ThemeData] = {}

    @staticmethod
    def _key(identifier: str) -> str:
        return identifier.lower()

    def _identifier_conflict(self, identifier: str) -> Optional[AppError]:
        key = self._key(identifier)
        if key in self._custom_themes:
            return conflict_error(
                f"A custom theme with identifier '{identifier}' has already been "
                "registered. Please use a different identifier.",
                identifier,
            )
        if key in RESERVED_IDENTIFIERS:
            return conflict_error(
                f"The identifier '{identifier}' is reserved for built-in themes. "
                "Please use a different identifier.",
                identifier,
            )
        return None

    def _check_available(self, identifier: str) -> Result[str, AppError]:
        conflict = self._identifier_conflict(identifier)
        return Success(identifier) if conflict is None else Failure(conflict)

    def _store_custom_theme(self, identifier: str, data: ThemeData) -> None:
        key = self._key(identifier)
        self._custom_themes[key] = data
        self._custom_names[key] = identifier
        self._merged_cache.pop(key, None)
        logger.info("custom_theme_registered", identifier=identifier)

    def _store_extension(self, base_identifier: str, fragment: ThemeData) -> None:
        key = self._key(base_identifier)
        self._extensions.setdefault(key, []).append(fragment)
        self._merged_cache.pop(key, None)
        logger.info(
            "theme_extension_registered",
            base=base_identifier,
            extension_count=len(self._extensions[key]),
        )

    def register_custom_theme(self, identifier: str, data: ThemeData) -> None:
        """
        Register a complete custom theme under ``identifier``.

        Raises:
            InvalidParameterError: If the identifier is blank
            IdentifierConflictError: If the identifier is taken or reserved
            ThemeDataInvalidError: If the data is not a complete theme
        """
        require_identifier(identifier, "Theme identifier")
        conflict = self._identifier_conflict(identifier)
        if conflict is not None:
            raise IdentifierConflictError(conflict.message, identifier=identifier)

        ThemeValidator.require_valid_theme(data)
        self._store_custom_theme(identifier, data)

    def register_extension(self, base_identifier: ThemeRef, fragment: ThemeData) -> None:
        """
        Append an extension fragment to ``base_identifier``.

        The base does not need to exist yet; it is resolved when the theme
        is requested.

        Raises:
            InvalidParameterError: If the identifier is blank
            ThemeDataInvalidError: If a non-empty pool holds blank entries
        """
        if isinstance(base_identifier, Theme):
            base_identifier = base_identifier.value
        require_identifier(base_identifier, "Base theme identifier")
        ThemeValidator.require_valid_extension(fragment)
        self._store_extension(base_identifier, fragment)

    def try_register_custom_theme(self, identifier: str, data: ThemeData) -> Result[None, AppError]:
        """Result-returning form of :meth:`register_custom_theme`."""
        return (
            _checked_identifier(identifier, "Theme identifier")
            .bind(self._check_available)
            .bind(lambda _: ThemeValidator.check_theme(data))
            .map(lambda checked: self._store_custom_theme(identifier, checked))
        )

    def try_register_extension(
        self, base_identifier: ThemeRef, fragment: ThemeData
    ) -> Result[None, AppError]:
        """Result-returning form of :meth:`register_extension`."""
        if isinstance(base_identifier, Theme):
            base_identifier = base_identifier.value
        return (
            _checked_identifier(base_identifier, "Base theme identifier")
            .bind(lambda _: ThemeValidator.check_extension(fragment))
            .map(lambda checked: self._store_extension(base_identifier, checked))
        )

    def check_theme_exists(self, theme: ThemeRef) -> Result[str, AppError]:
        """
        Succeed with the lower-cased identifier when ``theme`` names a custom or
        built-in theme; data is not loaded.
        """
        key = theme.value if isinstance(theme, Theme) else self._key(theme)
        if key in self._custom_themes or Theme.lookup(key) is not None:
            return Success(key)
        return Failure(
            not_found_error(
                "Theme", str(theme), available_themes=self.get_registered_theme_names()
            )
        )

    def get_theme(self, theme: ThemeRef) -> ThemeData:
        """
        Return the merged theme data for a built-in theme or identifier.

        Custom themes are checked first, then built-ins.

        Raises:
            InvalidParameterError: If ``theme`` is neither a Theme nor a string
            ThemeNotFoundError: If no theme matches
            ThemeLoadError: If built-in data cannot be loaded
        """
        if isinstance(theme, Theme):
            key = theme.value
        elif isinstance(theme, str):
            key = self._key(theme)
        else:
            raise InvalidParameterError.for_choice("theme", theme, Theme.choices())

        cached = self._merged_cache.get(key)
        if cached is not None:
            return cached

        base = self._custom_themes.get(key)
        if base is None:
            builtin = Theme.lookup(key)
            if builtin is None:
                raise ThemeNotFoundError(str(theme), self.get_registered_theme_names())
            base = self._load_builtin(builtin)

        merged = merge_theme_data(base, self._extensions.get(key, ()))
        self._merged_cache[key] = merged
        return merged

    def _load_builtin(self, theme: Theme) -> ThemeData:
        data = self._builtin_cache.get(theme)
        if data is None:
            data = self._builtin_loader(theme)
            self._builtin_cache[theme] = data
        return data

    def get_registered_theme_names(self) -> List[str]:
        """Built-in theme names followed by custom identifiers in registration order."""
        return Theme.choices() + list(self._custom_names.values())

    def has_custom_theme(self, identifier: Optional[str]) -> bool:
        if not isinstance(identifier, str):
            return False
        return self._key(identifier) in self._custom_themes

    def extension_count(self, identifier: ThemeRef) -> int:
        key = identifier.value if isinstance(identifier, Theme) else self._key(identifier)
        return len(self._extensions.get(key, ()))
