"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- PoEditorSettings defaults and normalization
- LoggingSettings validation
- Settings aggregator initialization
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration.infrastructure import LoggingSettings
from infrastructure.configuration.integrations import PoEditorSettings
from infrastructure.configuration.settings import Settings


@pytest.fixture(autouse=True)
def no_env_file(monkeypatch, tmp_path):
    """Run each test away from any local .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "POEDITOR_API_URL",
        "POEDITOR_REQUEST_TIMEOUT",
        "POEDITOR_CONFIG_PATH",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestPoEditorSettings:
    """Test suite for PoEditorSettings."""

    def test_defaults(self):
        poeditor = PoEditorSettings()

        assert poeditor.POEDITOR_API_URL == "https://api.poeditor.com/v2"
        assert poeditor.POEDITOR_REQUEST_TIMEOUT == 60
        assert poeditor.POEDITOR_CONFIG_PATH == "poeditor.yml"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("POEDITOR_API_URL", "http://localhost:8080/v2/")
        monkeypatch.setenv("POEDITOR_REQUEST_TIMEOUT", "5")

        poeditor = PoEditorSettings()

        assert poeditor.POEDITOR_API_URL == "http://localhost:8080/v2"
        assert poeditor.POEDITOR_REQUEST_TIMEOUT == 5

    def test_env_file_is_read(self, tmp_path):
        (tmp_path / ".env").write_text("POEDITOR_CONFIG_PATH=config/poeditor.yml\n")

        assert PoEditorSettings().POEDITOR_CONFIG_PATH == "config/poeditor.yml"


@pytest.mark.unit
class TestLoggingSettings:
    """Test suite for LoggingSettings."""

    def test_defaults(self):
        logging_settings = LoggingSettings()

        assert logging_settings.LOG_LEVEL == "INFO"
        assert logging_settings.json_output is False

    def test_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingSettings().LOG_LEVEL == "DEBUG"

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert LoggingSettings().json_output is True

    def test_invalid_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            LoggingSettings()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_are_instantiated(self):
        settings = Settings()

        assert isinstance(settings.poeditor, PoEditorSettings)
        assert isinstance(settings.logging, LoggingSettings)

    def test_subsettings_can_be_overridden(self):
        custom = PoEditorSettings(POEDITOR_REQUEST_TIMEOUT=10)

        settings = Settings(poeditor=custom)

        assert settings.poeditor.POEDITOR_REQUEST_TIMEOUT == 10
