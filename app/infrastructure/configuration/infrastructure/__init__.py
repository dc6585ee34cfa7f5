"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.logging import LoggingSettings

__all__ = [
    "LoggingSettings",
]
