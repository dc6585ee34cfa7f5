"""Unit tests for modules.export.configuration module."""

import pytest
import yaml
from pydantic import ValidationError

from modules.export.configuration import (
    ExportConfiguration,
    OutputType,
    from_env,
    load_configuration,
)
from modules.export.errors import ConfigurationError


@pytest.mark.unit
class TestFromEnv:
    """Test suite for from_env()."""

    def test_literal_value(self):
        assert from_env("12345") == "12345"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("POEDITOR_API_KEY", "secret-token")
        assert from_env("$POEDITOR_API_KEY") == "secret-token"

    def test_missing_variable(self, monkeypatch):
        monkeypatch.delenv("POEDITOR_MISSING", raising=False)
        with pytest.raises(ValueError, match="POEDITOR_MISSING is not set"):
            from_env("$POEDITOR_MISSING")


@pytest.mark.unit
class TestExportConfiguration:
    """Test suite for ExportConfiguration validation."""

    def test_defaults(self, make_configuration):
        configuration = make_configuration()

        assert configuration.type == OutputType.APPLE_STRINGS
        assert configuration.tags == ()
        assert configuration.filters == ()
        assert configuration.language_alias == {}
        assert configuration.path_replace == {}
        assert configuration.context_path is None
        assert configuration.has_context_paths is False
        assert configuration.has_plural_paths is False

    def test_is_frozen(self, make_configuration):
        configuration = make_configuration()
        with pytest.raises(ValidationError):
            configuration.path = "other"

    def test_api_key_from_environment(self, monkeypatch, make_configuration):
        monkeypatch.setenv("MY_TOKEN", "abc")
        monkeypatch.setenv("MY_PROJECT", "987")

        configuration = make_configuration(api_key="$MY_TOKEN", project_id="$MY_PROJECT")

        assert configuration.api_key == "abc"
        assert configuration.project_id == "987"

    def test_numeric_project_id(self, make_configuration):
        assert make_configuration(project_id=12345).project_id == "12345"

    def test_single_tag_string(self, make_configuration):
        configuration = make_configuration(tags="ios", filters=None)
        assert configuration.tags == ("ios",)
        assert configuration.filters == ()

    def test_null_mappings_are_empty(self, make_configuration):
        configuration = make_configuration(language_alias=None, path_replace=None)
        assert configuration.language_alias == {}
        assert configuration.path_replace == {}

    @pytest.mark.parametrize("missing", ["api_key", "project_id", "type", "path"])
    def test_required_fields(self, missing):
        values = {
            "api_key": "TEST",
            "project_id": "1",
            "type": "apple_strings",
            "languages": ["en"],
            "path": "{LANGUAGE}.strings",
        }
        del values[missing]
        with pytest.raises(ValidationError):
            ExportConfiguration(**values)

    def test_languages_must_not_be_empty(self, make_configuration):
        with pytest.raises(ValidationError):
            make_configuration(languages=[])

    def test_unknown_type(self, make_configuration):
        with pytest.raises(ValidationError):
            make_configuration(type="gettext")

    def test_unknown_key(self, make_configuration):
        with pytest.raises(ValidationError):
            make_configuration(paths="typo")

    def test_header_only_for_source_table(self, make_configuration):
        with pytest.raises(ValidationError, match="header"):
            make_configuration(header="package app")

        configuration = make_configuration(
            type="source_table", path="Strings.kt", header="package app"
        )
        assert configuration.header == "package app"

    def test_has_context_paths(self, make_configuration):
        assert make_configuration(context_path="{CONTEXT}/x").has_context_paths
        assert make_configuration(
            context_path_replace={"en": "{CONTEXT}/en"}
        ).has_context_paths

    def test_has_plural_paths(self, make_configuration):
        assert make_configuration(path_plural="x.stringsdict").has_plural_paths
        assert make_configuration(context_path_plural="y").has_plural_paths

    def test_aliases_for(self, make_configuration):
        configuration = make_configuration(
            languages=["zh-Hans", "en"],
            language_alias={"zh": "zh-Hans", "zh-CN": "zh-Hans", "en-GB": "en"},
        )
        assert configuration.aliases_for("zh-Hans") == ["zh", "zh-CN"]
        assert configuration.aliases_for("en") == ["en-GB"]
        assert configuration.aliases_for("ko") == []

    def test_describe_excludes_secrets(self, make_configuration):
        configuration = make_configuration(api_key="very-secret", tags=["ios"])

        described = yaml.safe_load(configuration.describe())

        assert "api_key" not in described
        assert "project_id" not in described
        assert described["type"] == "apple_strings"
        assert described["tags"] == ["ios"]


@pytest.mark.unit
class TestLoadConfiguration:
    """Test suite for load_configuration()."""

    def test_loads_yaml(self, tmp_path):
        config_file = tmp_path / "poeditor.yml"
        config_file.write_text(
            "api_key: TEST\n"
            "project_id: 12345\n"
            "type: android_strings\n"
            "languages: [en, ko]\n"
            "language_alias:\n"
            "  ko-KR: ko\n"
            "path: 'values-{LANGUAGE}/strings.xml'\n"
            "path_replace:\n"
            "  en: values/strings.xml\n"
        )

        configuration = load_configuration(config_file)

        assert configuration.type == OutputType.ANDROID_STRINGS
        assert configuration.project_id == "12345"
        assert configuration.languages == ("en", "ko")
        assert configuration.path_replace == {"en": "values/strings.xml"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_configuration(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "poeditor.yml"
        config_file.write_text("languages: [en\n")
        with pytest.raises(ConfigurationError, match="Failed to parse"):
            load_configuration(config_file)

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "poeditor.yml"
        config_file.write_text("- en\n- ko\n")
        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_configuration(config_file)

    def test_invalid_values(self, tmp_path):
        config_file = tmp_path / "poeditor.yml"
        config_file.write_text("api_key: TEST\nproject_id: 1\ntype: nope\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_configuration(config_file)
