"""Tests for theme JSON parsing and the built-in theme provider."""

import json

import pytest

from namegen.core.error_handling import ThemeLoadError
from namegen.generation.models import BuildingType, Gender, Theme
from namegen.generation.validators import ThemeValidator
from namegen.themes import provider as provider_module
from namegen.themes.provider import ThemeProvider, resource_name
from namegen.themes.schema import parse_theme_document, parse_theme_json


class TestParseThemeJson:
    """Test conversion of theme documents into theme data."""

    def test_camel_case_document(self):
        text = json.dumps(
            {
                "theme": "Steampunk",
                "cityNames": {"prefixes": ["Cog"], "cores": ["wick"], "suffixes": ["", "ton"]},
                "districtNames": {"descriptors": ["Old"], "locationTypes": ["Quarter"]},
                "buildingNames": {
                    "genericPrefixes": ["Brass"],
                    "genericSuffixes": ["works"],
                    "typeData": {
                        "Residential": {
                            "prefixes": ["Iron"],
                            "descriptors": ["Row"],
                            "suffixes": [""],
                        }
                    },
                },
            }
        )

        data = parse_theme_json(text)

        assert data.label == "Steampunk"
        assert data.city_names.suffixes == ("", "ton")
        assert data.district_names.location_types == ("Quarter",)
        assert data.building_names.generic_prefixes == ("Brass",)
        assert data.building_names.for_type(BuildingType.RESIDENTIAL).descriptors == ("Row",)
        assert data.npc_names is None

    def test_snake_case_keys_are_accepted(self):
        data = parse_theme_document(
            {"street_names": {"prefixes": ["Brass"], "cores": ["pipe"], "street_suffixes": ["Lane"]}}
        )

        assert data.street_names.street_suffixes == ("Lane",)

    def test_label_overrides_theme_key(self):
        data = parse_theme_json('{"theme": "Steampunk"}', label="gaslight")
        assert data.label == "gaslight"

    def test_building_type_keys_are_case_insensitive(self):
        data = parse_theme_document(
            {"buildingNames": {"typeData": {"medical": {"prefixes": ["Mend"]}}}}
        )
        assert data.building_names.for_type(BuildingType.MEDICAL).prefixes == ("Mend",)

    def test_null_entries_survive_parsing(self):
        data = parse_theme_document({"cityNames": {"prefixes": ["Cog", None]}})
        assert data.city_names.prefixes == ("Cog", None)

    def test_unknown_keys_are_ignored(self):
        data = parse_theme_document({"version": 2, "cityNames": {"prefixes": ["Cog"], "extra": 1}})
        assert data.city_names.prefixes == ("Cog",)

    def test_unknown_building_type(self):
        with pytest.raises(ThemeLoadError, match="Unknown building type"):
            parse_theme_document({"buildingNames": {"typeData": {"Castle": {}}}})

    def test_invalid_syntax(self):
        with pytest.raises(ThemeLoadError, match="invalid syntax") as exc_info:
            parse_theme_json("{", label="broken")

        assert exc_info.value.message.startswith("Failed to parse broken theme data.")

    def test_wrong_structure(self):
        with pytest.raises(ThemeLoadError, match="invalid structure"):
            parse_theme_json('{"cityNames": {"prefixes": "Cog"}}')

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text(self, text):
        with pytest.raises(ThemeLoadError, match="empty"):
            parse_theme_json(text)

    def test_root_must_be_object(self):
        with pytest.raises(ThemeLoadError, match="root must be an object"):
            parse_theme_json("[]")


class TestThemeProvider:
    """Test loading of the packaged built-in themes."""

    @pytest.mark.parametrize("theme", list(Theme))
    def test_builtin_themes_are_complete(self, theme):
        data = ThemeProvider().get_theme_data(theme)

        assert data.label == theme.display_name
        assert ThemeValidator.validate_theme(data) == []
        for building_type in BuildingType:
            assert data.building_names.for_type(building_type) is not None
        for gender in Gender:
            assert data.npc_names.for_gender(gender) is not None

    def test_data_is_cached_per_provider(self):
        provider = ThemeProvider()

        assert provider.get_theme_data(Theme.ELVES) is provider.get_theme_data(Theme.ELVES)

    def test_resource_name(self):
        assert resource_name(Theme.ORCS) == "orcs.json"

    def test_missing_resource(self, monkeypatch):
        def missing(name):
            raise FileNotFoundError(name)

        monkeypatch.setattr(provider_module, "_read_resource", missing)

        with pytest.raises(ThemeLoadError) as exc_info:
            ThemeProvider().get_theme_data(Theme.ORCS)

        error = exc_info.value
        assert error.resource == "namegen.themes.data/orcs.json"
        assert "Unable to load theme data for 'Orcs' theme" in error.message
        assert "was not found" in error.message

    def test_malformed_resource(self, monkeypatch):
        monkeypatch.setattr(provider_module, "_read_resource", lambda name: "{")

        with pytest.raises(ThemeLoadError) as exc_info:
            ThemeProvider().get_theme_data(Theme.CYBERPUNK)

        assert exc_info.value.resource == "namegen.themes.data/cyberpunk.json"
        assert exc_info.value.context["resource"] == "namegen.themes.data/cyberpunk.json"
