"""Tests for theme registration, lookup and extension merging."""

from dataclasses import replace

import pytest
from hypothesis import given, settings, strategies as st
from returns.result import Failure, Success

from namegen.core.error_handling import (
    IdentifierConflictError,
    InvalidParameterError,
    ThemeDataInvalidError,
    ThemeNotFoundError,
)
from namegen.core.result_pattern import ErrorKind
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
    Theme,
    ThemeData,
)
from namegen.themes.registry import ThemeRegistry, merge_theme_data

from factories import single_entry_theme, steampunk_theme


class CountingLoader:
    """Built-in loader stand-in that serves one theme and counts calls."""

    def __init__(self, data: ThemeData):
        self.data = data
        self.calls = []

    def __call__(self, theme: Theme) -> ThemeData:
        self.calls.append(theme)
        return replace(self.data, label=theme.display_name)


@pytest.fixture
def loader():
    return CountingLoader(single_entry_theme())


@pytest.fixture
def registry(loader):
    return ThemeRegistry(loader)


def city_fragment(*prefixes: str) -> ThemeData:
    return ThemeData(label="fragment", city_names=CityNameData(prefixes, (), ()))


class TestRegistration:
    """Test custom theme registration rules."""

    def test_register_and_get(self, registry, steampunk):
        registry.register_custom_theme("Steampunk", steampunk)

        assert registry.get_theme("steampunk") is registry.get_theme("STEAMPUNK")
        assert registry.get_theme("Steampunk").city_names == steampunk.city_names
        assert registry.has_custom_theme("STEAMPUNK")

    def test_registered_names_keep_original_casing(self, registry, steampunk):
        registry.register_custom_theme("Steampunk", steampunk)
        registry.register_custom_theme("gaslight", steampunk)

        assert registry.get_registered_theme_names() == [
            "Cyberpunk",
            "Elves",
            "Orcs",
            "Steampunk",
            "gaslight",
        ]

    def test_duplicate_identifier_ignores_case(self, registry, steampunk):
        registry.register_custom_theme("steampunk", steampunk)

        with pytest.raises(IdentifierConflictError, match="has already been registered"):
            registry.register_custom_theme("STEAMPUNK", steampunk)

    @pytest.mark.parametrize("identifier", ["elves", "Cyberpunk", "ORCS"])
    def test_reserved_identifiers(self, registry, steampunk, identifier):
        with pytest.raises(IdentifierConflictError, match="reserved for built-in themes"):
            registry.register_custom_theme(identifier, steampunk)

    @pytest.mark.parametrize("identifier", ["", "   "])
    def test_blank_identifier(self, registry, steampunk, identifier):
        with pytest.raises(InvalidParameterError):
            registry.register_custom_theme(identifier, steampunk)

    def test_incomplete_theme_is_rejected(self, registry):
        with pytest.raises(ThemeDataInvalidError):
            registry.register_custom_theme("broken", ThemeData.empty("broken"))

        assert not registry.has_custom_theme("broken")

    def test_try_register_returns_results(self, registry, steampunk):
        assert registry.try_register_custom_theme("steampunk", steampunk) == Success(None)

        result = registry.try_register_custom_theme("steampunk", steampunk)

        assert isinstance(result, Failure)
        assert result.failure().kind == ErrorKind.CONFLICT
        assert result.failure().details["identifier"] == "steampunk"

    def test_try_register_reserved_identifier(self, registry, steampunk):
        result = registry.try_register_custom_theme("Orcs", steampunk)

        assert result.failure().kind == ErrorKind.CONFLICT
        assert result.failure().message.startswith("The identifier 'Orcs' is reserved")
        assert not registry.has_custom_theme("orcs")

    def test_try_register_incomplete_theme(self, registry):
        result = registry.try_register_custom_theme("broken", ThemeData.empty("broken"))

        error = result.failure()
        assert error.kind == ErrorKind.VALIDATION
        assert len(error.details["errors"]) == 6
        assert error.message.startswith("Theme data validation failed for 'broken' theme.")
        assert not registry.has_custom_theme("broken")


class TestLookup:
    """Test resolution of theme identifiers."""

    def test_builtin_loaded_once(self, registry, loader):
        first = registry.get_theme(Theme.ELVES)
        registry.get_theme("elves")
        registry.get_theme("ELVES")

        assert loader.calls == [Theme.ELVES]
        assert first.label == "Elves"

    def test_unknown_theme(self, registry):
        with pytest.raises(ThemeNotFoundError) as exc_info:
            registry.get_theme("steampunk")

        error = exc_info.value
        assert error.identifier == "steampunk"
        assert error.available_themes == ["Cyberpunk", "Elves", "Orcs"]
        assert "Theme 'steampunk' is not registered" in error.message

    def test_invalid_theme_type(self, registry):
        with pytest.raises(InvalidParameterError, match="Invalid theme value"):
            registry.get_theme(42)


class TestExtensions:
    """Test extension registration and merged views."""

    def test_extension_appends_to_builtin(self, registry):
        registry.register_extension(Theme.CYBERPUNK, city_fragment("Neo", "Chrome"))

        merged = registry.get_theme("Cyberpunk")

        assert merged.city_names.prefixes == ("Cog", "Neo", "Chrome")
        assert merged.city_names.cores == ("wick",)
        assert registry.extension_count(Theme.CYBERPUNK) == 1

    def test_extensions_apply_in_registration_order(self, registry):
        registry.register_extension("orcs", city_fragment("A"))
        registry.register_extension("ORCS", city_fragment("B", "A"))

        assert registry.get_theme(Theme.ORCS).city_names.prefixes == ("Cog", "A", "B", "A")

    def test_new_extension_invalidates_merged_view(self, registry):
        before = registry.get_theme(Theme.ELVES)
        registry.register_extension(Theme.ELVES, city_fragment("Sil"))
        after = registry.get_theme(Theme.ELVES)

        assert after is not before
        assert after.city_names.prefixes == ("Cog", "Sil")

    def test_extension_before_custom_theme(self, registry, steampunk):
        registry.register_extension("steampunk", city_fragment("Gas"))
        registry.register_custom_theme("Steampunk", steampunk)

        merged = registry.get_theme("steampunk")

        assert merged.city_names.prefixes == steampunk.city_names.prefixes + ("Gas",)

    def test_extension_of_unknown_theme_fails_on_lookup(self, registry):
        registry.register_extension("nowhere", city_fragment("A"))

        with pytest.raises(ThemeNotFoundError):
            registry.get_theme("nowhere")

    def test_invalid_extension(self, registry):
        with pytest.raises(ThemeDataInvalidError):
            registry.register_extension(Theme.ORCS, city_fragment("A", "  "))

        assert registry.extension_count("orcs") == 0

    def test_blank_base_identifier(self, registry):
        result = registry.try_register_extension("  ", city_fragment("A"))

        assert isinstance(result, Failure)
        assert result.failure().kind == ErrorKind.VALIDATION

    def test_try_register_extension(self, registry):
        assert registry.try_register_extension(Theme.ORCS, city_fragment("Gor")) == Success(None)

        result = registry.try_register_extension("orcs", city_fragment("A", "  "))

        assert result.failure().kind == ErrorKind.VALIDATION
        assert registry.extension_count(Theme.ORCS) == 1

    def test_check_theme_exists(self, registry, steampunk, loader):
        registry.register_custom_theme("Steampunk", steampunk)

        assert registry.check_theme_exists("STEAMPUNK") == Success("steampunk")
        assert registry.check_theme_exists(Theme.ELVES) == Success("elves")

        error = registry.check_theme_exists("Atlantis").failure()
        assert error.kind == ErrorKind.NOT_FOUND
        assert error.message == "Theme not found: Atlantis"
        assert error.details["available_themes"] == ["Cyberpunk", "Elves", "Orcs", "Steampunk"]
        assert loader.calls == []


class TestMergeThemeData:
    """Test the pool merge itself."""

    def test_no_extensions_returns_base(self, steampunk):
        assert merge_theme_data(steampunk, []) is steampunk

    def test_building_type_only_in_extension_is_added(self):
        base = ThemeData(building_names=BuildingNameData(("Brass",), ("works",), {}))
        fragment = ThemeData(
            building_names=BuildingNameData(
                (), (), {BuildingType.MEDICAL: BuildingTypeData(("Mend",), ("Ward",), ("",))}
            )
        )

        merged = merge_theme_data(base, [fragment])

        assert merged.building_names.generic_prefixes == ("Brass",)
        assert merged.building_names.for_type(BuildingType.MEDICAL).prefixes == ("Mend",)

    def test_gender_only_in_extension_is_added(self):
        base = ThemeData(npc_names=NpcNameData(male=GenderNameData(("Al",), ("do",), ("n",))))
        fragment = ThemeData(npc_names=NpcNameData(female=GenderNameData(("Be",), (), ())))

        merged = merge_theme_data(base, [fragment])

        assert merged.npc_names.male.prefixes == ("Al",)
        assert merged.npc_names.female.prefixes == ("Be",)
        assert merged.npc_names.neutral is None

    def test_label_comes_from_base(self, steampunk):
        assert merge_theme_data(steampunk, [city_fragment("A")]).label == "steampunk"


pool_entries = st.lists(st.sampled_from(["", "a", "b", "Cog", "wick"]), max_size=4)


@st.composite
def fragments(draw):
    """Extension fragments with a random subset of sections."""

    def maybe(build):
        return build() if draw(st.booleans()) else None

    def pools(count):
        return [tuple(draw(pool_entries)) for _ in range(count)]

    return ThemeData(
        label="fragment",
        npc_names=maybe(
            lambda: NpcNameData(
                male=GenderNameData(*pools(3)),
                neutral=maybe(lambda: GenderNameData(*pools(3))),
            )
        ),
        building_names=maybe(
            lambda: BuildingNameData(
                *pools(2),
                type_data={
                    building_type: BuildingTypeData(*pools(3))
                    for building_type in draw(st.sets(st.sampled_from(list(BuildingType))))
                },
            )
        ),
        city_names=maybe(lambda: CityNameData(*pools(3))),
        district_names=maybe(lambda: DistrictNameData(*pools(2))),
        street_names=maybe(lambda: StreetNameData(*pools(3))),
        faction_names=maybe(lambda: FactionNameData(*pools(3))),
    )


class TestMergeProperties:
    """Property: every merged pool is the base pool followed by each extension's pool."""

    @settings(max_examples=50)
    @given(extensions=st.lists(fragments(), max_size=3))
    def test_merge_completeness(self, extensions):
        base = steampunk_theme()
        merged = merge_theme_data(base, extensions)

        expected = {label: tuple(pool) for label, pool in base.iter_pools()}
        for fragment in extensions:
            for label, pool in fragment.iter_pools():
                expected[label] = expected[label] + tuple(pool or ())

        assert dict(merged.iter_pools()) == expected
