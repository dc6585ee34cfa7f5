"""POEditor integration settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import IntegrationSettings


class PoEditorSettings(IntegrationSettings):
    """POEditor API configuration.

    Project credentials live in the export configuration file; these
    settings only cover how the API is reached.

    Environment Variables:
        POEDITOR_API_URL: POEditor API base URL
        POEDITOR_REQUEST_TIMEOUT: Timeout in seconds for each HTTP request
        POEDITOR_CONFIG_PATH: Path to the export configuration file

    Example:
        ```python
        from infrastructure.configuration import settings

        api_url = settings.poeditor.POEDITOR_API_URL
        config_path = settings.poeditor.POEDITOR_CONFIG_PATH
        ```
    """

    POEDITOR_API_URL: str = Field(
        default="https://api.poeditor.com/v2", alias="POEDITOR_API_URL"
    )
    POEDITOR_REQUEST_TIMEOUT: int = Field(default=60, alias="POEDITOR_REQUEST_TIMEOUT")
    POEDITOR_CONFIG_PATH: str = Field(
        default="poeditor.yml", alias="POEDITOR_CONFIG_PATH"
    )

    @field_validator("POEDITOR_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths can be appended."""
        return v.rstrip("/")
