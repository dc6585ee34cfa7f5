"""Infrastructure configuration module - public API.

Centralized process configuration using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)

Example:
    ```python
    from infrastructure.configuration import settings

    timeout = settings.poeditor.POEDITOR_REQUEST_TIMEOUT
    ```
"""

from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings"]
