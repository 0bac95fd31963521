"""Custom theme containers and the configuration handed to a generator."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from config.logging_config import get_logger
from namegen.core.error_handling import InvalidParameterError, ThemeLoadError
from namegen.generation.models import Theme, ThemeData, ThemeRef
from namegen.generation.validators import ThemeValidator

from .schema import parse_theme_json

logger = get_logger(__name__)

PathLike = Union[str, Path]


def normalize_base_identifier(base: ThemeRef) -> str:
    """Turn a Theme or identifier string into a lower-cased base identifier."""
    if isinstance(base, Theme):
        return base.value
    if not isinstance(base, str) or not base.strip():
        raise InvalidParameterError(
            "Base theme identifier cannot be empty or whitespace-only.",
            parameter="base_theme_identifier",
            value=base,
        )
    return base.lower()


class CustomThemeData:
    """
    A validated, complete custom theme.

    Construction runs the complete-theme validation, so holding an instance
    means every pool and building type is present.
    """

    def __init__(self, data: ThemeData):
        self.data = ThemeValidator.require_valid_theme(data)

    def __repr__(self) -> str:
        return f"CustomThemeData(label={self.data.label!r})"

    @classmethod
    def from_json_string(cls, text: str, label: Optional[str] = None) -> "CustomThemeData":
        """
        Parse and validate a custom theme from JSON text.

        Raises:
            ThemeLoadError: If the JSON is malformed
            ThemeDataInvalidError: If the theme is incomplete
        """
        if not isinstance(text, str):
            raise InvalidParameterError(
                "Theme JSON content must be a string.", parameter="text", value=text
            )
        return cls(parse_theme_json(text, label or "custom"))

    @classmethod
    def from_json(cls, path: PathLike, label: Optional[str] = None) -> "CustomThemeData":
        """
        Load a custom theme from a JSON file.

        Raises:
            ThemeLoadError: If the file cannot be read or parsed
            ThemeDataInvalidError: If the theme is incomplete
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ThemeLoadError(
                f"Unable to load custom theme from file '{path}'. The file was not found.",
                resource=str(path),
            ) from e
        except PermissionError as e:
            raise ThemeLoadError(
                f"Unable to load custom theme from file '{path}'. Access to the file was denied.",
                resource=str(path),
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ThemeLoadError(
                f"Unable to load custom theme from file '{path}'. An I/O error occurred: {e}",
                resource=str(path),
            ) from e

        try:
            return cls.from_json_string(text, label or path.stem)
        except ThemeLoadError as e:
            e.resource = str(path)
            e.context["resource"] = str(path)
            raise


@dataclass(frozen=True)
class ThemeExtension:
    """Pools to append to an existing theme, keyed by its identifier."""

    base_theme_identifier: str
    data: ThemeData

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "base_theme_identifier",
            normalize_base_identifier(self.base_theme_identifier),
        )


class ThemeConfig:
    """
    Custom themes and extensions to register when a generator is created.

    Entries are only collected here; they are validated and registered
    together by ``NameGenerator`` so every problem is reported at once.
    """

    def __init__(self):
        self.custom_themes: Dict[str, Union[CustomThemeData, ThemeData]] = {}
        self.theme_extensions: List[ThemeExtension] = []

    def add_theme(self, identifier: str, data: Union[CustomThemeData, ThemeData]) -> "ThemeConfig":
        if not isinstance(identifier, str) or not identifier.strip():
            raise InvalidParameterError(
                "Theme identifier cannot be empty or whitespace-only.",
                parameter="identifier",
                value=identifier,
            )
        if not isinstance(data, (CustomThemeData, ThemeData)):
            raise InvalidParameterError(
                f"Theme data must be CustomThemeData or ThemeData, got {type(data).__name__}",
                parameter="data",
                value=data,
            )
        self.custom_themes[identifier] = data
        return self

    def add_theme_from_json(self, identifier: str, path: PathLike) -> "ThemeConfig":
        return self.add_theme(identifier, CustomThemeData.from_json(path, label=identifier))

    def extend_theme(
        self, extension: ThemeExtension, base: Optional[ThemeRef] = None
    ) -> "ThemeConfig":
        """
        Queue an extension.

        When ``base`` is given it replaces the identifier the extension was
        built for.
        """
        if not isinstance(extension, ThemeExtension):
            raise InvalidParameterError(
                f"Expected a ThemeExtension, got {type(extension).__name__}",
                parameter="extension",
                value=extension,
            )
        if base is not None:
            extension = ThemeExtension(normalize_base_identifier(base), extension.data)
        self.theme_extensions.append(extension)
        return self

    @classmethod
    def from_directory(cls, directory: PathLike) -> "ThemeConfig":
        """
        Build a config holding every ``*.json`` file in ``directory``.

        Each file becomes a custom theme keyed by its file stem.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ThemeLoadError(
                f"Unable to load custom themes from '{directory}'. The directory was not found.",
                resource=str(directory),
            )
        config = cls()
        for path in sorted(directory.glob("*.json")):
            config.add_theme_from_json(path.stem, path)
        logger.info(
            "custom_themes_loaded",
            directory=str(directory),
            count=len(config.custom_themes),
        )
        return config

    def theme_data_items(self):
        """Yield ``(identifier, ThemeData)`` for every custom theme."""
        for identifier, data in self.custom_themes.items():
            yield identifier, data.data if isinstance(data, CustomThemeData) else data
