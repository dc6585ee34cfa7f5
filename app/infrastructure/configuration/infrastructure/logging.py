"""Logging infrastructure settings."""

from typing import Literal

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class LoggingSettings(InfrastructureSettings):
    """Log output configuration.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: Renderer, ``console`` for humans or ``json`` for CI logs

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.logging.json_output:
            ...
        ```
    """

    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    LOG_FORMAT: Literal["console", "json"] = Field(
        default="console", alias="LOG_FORMAT"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case the level name."""
        return v.upper()

    @property
    def json_output(self) -> bool:
        """Whether logs are rendered as JSON lines."""
        return self.LOG_FORMAT == "json"
