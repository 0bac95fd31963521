"""
TTRPG Name Generator - Demo

Shows seeded generation for every built-in theme, a custom theme authored
with the builders, and an extension of a built-in theme.

Requirements:
- pydantic
- structlog
- rich
- returns
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rich.console import Console
from rich.table import Table

from config.logging_config import setup_logging
from config.settings import settings
from namegen import (
    BuildingNameDataBuilder,
    BuildingType,
    Gender,
    NameGenerator,
    NamePoolExhaustedError,
    NpcNameDataBuilder,
    Theme,
    ThemeConfig,
    ThemeDataBuilder,
)

console = Console()


def build_steampunk_config() -> ThemeConfig:
    """A custom theme plus an extension of the cyberpunk theme."""
    npc = (
        NpcNameDataBuilder()
        .with_male_names(["Cog", "Brass", "Gear"], ["wick", "ton", "ley"], ["ly", "son", "er"])
        .with_female_names(["Ada", "Vic", "Ell"], ["le", "to", "sa"], ["ria", "na", "ine"])
        .with_neutral_names(["Ash", "Flint", "Quill"], ["by", "er", "wyn"], ["ford", "s", "worth"])
    )
    buildings = BuildingNameDataBuilder().with_generic_names(
        ["Brass", "Copper", "Steam"], ["works", "hall", "house"]
    )
    for building_type in BuildingType:
        buildings.with_type_names(
            building_type,
            [building_type.display_name, "Gilded", "Iron"],
            ["Foundry", "Exchange", "Hall"],
            [" Works", " & Sons", " Ltd."],
        )

    steampunk = (
        ThemeDataBuilder()
        .with_npc_names(npc)
        .with_building_names(buildings)
        .with_city_names(["Cog", "Smog", "Rivet"], ["wick", "mouth", "haven"], ["by", "shire", "ford"])
        .with_district_names(["Old", "Smoky", "Gilded"], ["Quarter", "Docks", "Row"])
        .with_street_names(["Brass", "Valve", "Boiler"], ["pipe", "gate", "wheel"], ["Lane", "Mews"])
        .with_faction_names(["The", "Royal", "Secret"], ["Gear", "Aether", "Clockwork"], [" Guild", " Society"])
        .build("steampunk")
    )

    neon_extension = (
        ThemeDataBuilder.extend(Theme.CYBERPUNK)
        .with_city_names(["Kowloon", "Lagos"], ["-"], ["Arcology", "Stack"])
        .build_extension()
    )

    return ThemeConfig().add_theme("Steampunk", steampunk).extend_theme(neon_extension)


def themes_table(generator: NameGenerator) -> Table:
    table = Table(title=f"Names for seed {generator.seed}")
    table.add_column("Theme", style="cyan")
    table.add_column("NPC", style="white")
    table.add_column("Building", style="white")
    table.add_column("City", style="yellow")
    table.add_column("District", style="white")
    table.add_column("Street", style="white")
    table.add_column("Faction", style="magenta")

    for theme in generator.get_available_themes():
        table.add_row(
            theme,
            generator.generate_npc_name(theme),
            generator.generate_building_name(theme, BuildingType.COMMERCIAL),
            generator.generate_city_name(theme),
            generator.generate_district_name(theme),
            generator.generate_street_name(theme),
            generator.generate_faction_name(theme),
        )
    return table


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate themed TTRPG names")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random stream")
    parser.add_argument("--count", type=int, default=5, help="NPC names per gender")
    args = parser.parse_args()

    setup_logging(settings.log_level, settings.log_file)

    generator = NameGenerator(build_steampunk_config(), seed=args.seed)
    console.print(themes_table(generator))

    npc_table = Table(title="Elven NPCs by gender")
    for gender in Gender:
        npc_table.add_column(gender.display_name, style="green")
    columns = [
        generator.generate_batch(args.count, "npc", Theme.ELVES, gender=gender) for gender in Gender
    ]
    for row in zip(*columns):
        npc_table.add_row(*row)
    console.print(npc_table)

    try:
        districts = generator.generate_batch(200, "district", Theme.ORCS)
        console.print(f"Generated {len(districts)} unique orc districts")
    except NamePoolExhaustedError as e:
        console.print(f"[yellow]{e.message}[/yellow]")

    generator.reset_session()
    console.print(f"After reset the first Elves city is again: {generator.generate_city_name(Theme.ELVES)}")


if __name__ == "__main__":
    main()
