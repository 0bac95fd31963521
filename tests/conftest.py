"""Shared fixtures for the name generator test suite."""

import sys
from pathlib import Path

import pytest

# Make the repository root importable without an install
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import settings  # noqa: E402
from namegen.generation.name_generator import NameGenerator  # noqa: E402
from namegen.generation.random_source import SeededRandom  # noqa: E402
from namegen.themes.builders import (  # noqa: E402
    BuildingNameDataBuilder,
    NpcNameDataBuilder,
    ThemeDataBuilder,
)
from namegen.generation.models import BuildingType  # noqa: E402

from factories import single_entry_theme, steampunk_theme  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep environment-driven defaults out of every test."""
    monkeypatch.setattr(settings, "default_seed", None)
    monkeypatch.setattr(settings, "custom_themes_dir", None)


@pytest.fixture
def steampunk():
    return steampunk_theme()


@pytest.fixture
def tiny_theme():
    return single_entry_theme()


@pytest.fixture
def generator():
    """Generator over the built-in themes with a fixed seed."""
    return NameGenerator(seed=42)


@pytest.fixture
def npc_builder():
    """An NPC builder with every gender filled in."""
    return (
        NpcNameDataBuilder()
        .with_male_names(["Cog", "Gear"], ["wick", "ton"], ["er", "son"])
        .with_female_names(["Ada", "Ro"], ["le", "sa"], ["ria", "na"])
        .with_neutral_names(["Ash", "Quill"], ["by", "er"], ["s", "worth"])
    )


@pytest.fixture
def building_builder():
    """A building builder with generic pools and every type filled in."""
    builder = BuildingNameDataBuilder().with_generic_names(
        ["Brass", "Steam"], ["works", "hall"]
    )
    for building_type in BuildingType:
        builder.with_type_names(
            building_type, [building_type.display_name], ["Foundry"], [" & Sons", " Ltd."]
        )
    return builder


@pytest.fixture
def theme_builder(npc_builder, building_builder):
    """A complete-theme builder ready to build."""
    return (
        ThemeDataBuilder()
        .with_npc_names(npc_builder)
        .with_building_names(building_builder)
        .with_city_names(["Cog", "Smog"], ["wick", "ton"], ["ford", "shire"])
        .with_district_names(["Old", "Smoky"], ["Quarter", "Docks"])
        .with_street_names(["Brass", "Valve"], ["pipe", "gate"], ["Lane", "Mews"])
        .with_faction_names(["The", "Royal"], ["Gear", "Aether"], [" Guild", " Society"])
    )


@pytest.fixture
def draw_log(monkeypatch):
    """Bounds of every draw made from any seeded stream while the test runs."""
    bounds = []
    draw = SeededRandom.next

    def recording_next(self, max_exclusive):
        bounds.append(max_exclusive)
        return draw(self, max_exclusive)

    monkeypatch.setattr(SeededRandom, "next", recording_next)
    return bounds
