"""Loads the built-in themes shipped as package data."""

from functools import lru_cache
from importlib import resources
from typing import Dict

from config.logging_config import get_logger
from namegen.core.error_handling import ThemeLoadError
from namegen.generation.models import Theme, ThemeData
from namegen.generation.validators import ThemeValidator

from .schema import parse_theme_json

logger = get_logger(__name__)

DATA_PACKAGE = "namegen.themes.data"


def resource_name(theme: Theme) -> str:
    """File name of the JSON resource holding ``theme``."""
    return f"{theme.value}.json"


@lru_cache(maxsize=None)
def _read_resource(name: str) -> str:
    # Raw text is shared across providers; parsed data stays per provider.
    return resources.files(DATA_PACKAGE).joinpath(name).read_text(encoding="utf-8")


class ThemeProvider:
    """
    Supplies validated built-in theme data.

    Data is parsed and validated once per theme and kept for the
    provider's lifetime.
    """

    def __init__(self):
        self._cache: Dict[Theme, ThemeData] = {}

    def get_theme_data(self, theme: Theme) -> ThemeData:
        """
        Return the built-in data for ``theme``.

        Raises:
            ThemeLoadError: If the resource is missing or malformed
            ThemeDataInvalidError: If the data is not a complete theme
        """
        cached = self._cache.get(theme)
        if cached is not None:
            return cached

        data = self._load(theme)
        ThemeValidator.require_valid_theme(data)
        self._cache[theme] = data
        logger.debug("builtin_theme_loaded", theme=theme.display_name)
        return data

    def _load(self, theme: Theme) -> ThemeData:
        name = resource_name(theme)
        resource = f"{DATA_PACKAGE}/{name}"
        try:
            text = _read_resource(name)
        except (FileNotFoundError, ModuleNotFoundError) as e:
            raise ThemeLoadError(
                f"Unable to load theme data for '{theme.display_name}' theme. "
                f"The resource '{resource}' was not found. "
                "Ensure the theme JSON file is installed as package data.",
                resource=resource,
            ) from e

        try:
            return parse_theme_json(text, theme.display_name)
        except ThemeLoadError as e:
            e.resource = resource
            e.context["resource"] = resource
            raise
