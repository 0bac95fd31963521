"""Built-in theme loading, the theme registry and custom theme authoring."""

from .builders import BuildingNameDataBuilder, NpcNameDataBuilder, ThemeDataBuilder
from .config import CustomThemeData, ThemeConfig, ThemeExtension
from .provider import ThemeProvider
from .registry import ThemeRegistry, merge_theme_data
from .schema import parse_theme_json

__all__ = [
    "ThemeRegistry",
    "ThemeProvider",
    "ThemeDataBuilder",
    "NpcNameDataBuilder",
    "BuildingNameDataBuilder",
    "CustomThemeData",
    "ThemeExtension",
    "ThemeConfig",
    "merge_theme_data",
    "parse_theme_json",
]
