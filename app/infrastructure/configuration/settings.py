"""poeditor-pull configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import PoEditorSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import LoggingSettings


class Settings(BaseSettings):
    """Process settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object. The export itself (languages, paths, output type) is described
    by the YAML export configuration, not by these settings.

    - **Integrations**: How the POEditor API is reached
    - **Infrastructure**: Log level and rendering

    Example:
        ```python
        from infrastructure.configuration import settings

        api_url = settings.poeditor.POEDITOR_API_URL
        level = settings.logging.LOG_LEVEL
        ```
    """

    # Integration settings
    poeditor: PoEditorSettings

    # Infrastructure settings
    logging: LoggingSettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "poeditor": PoEditorSettings,
            # Infrastructure
            "logging": LoggingSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
