"""Export configuration.

The export configuration describes one pull: which project and languages
to fetch, the output format and where each rendered file goes. It is read
from a YAML file (``poeditor.yml`` by default), validated once and frozen
before the pipeline starts.

Example ``poeditor.yml``:

    api_key: $POEDITOR_API_KEY
    project_id: 12345
    type: android_strings
    languages: [en, ko, zh-rCN]
    language_alias:
      zh: zh-rCN
    path: app/src/main/res/values-{LANGUAGE}/strings.xml
    path_replace:
      en: app/src/main/res/values/strings.xml
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from infrastructure.logging import get_module_logger
from modules.export.errors import ConfigurationError

logger = get_module_logger()


class OutputType(str, Enum):
    """Supported output formats."""

    APPLE_STRINGS = "apple_strings"
    ANDROID_STRINGS = "android_strings"
    SOURCE_TABLE = "source_table"


def from_env(value: str) -> str:
    """Resolve ``$NAME`` references to the value of environment variable NAME.

    Args:
        value: Literal value, or ``$`` followed by a variable name.

    Returns:
        The literal value, or the variable's value.

    Raises:
        ValueError: If the referenced variable is not set.
    """
    if not value.startswith("$"):
        return value
    key = value[1:]
    resolved = os.environ.get(key)
    if resolved is None:
        raise ValueError(f"environment variable {key} is not set")
    return resolved


class ExportConfiguration(BaseModel):
    """Immutable, validated description of a pull.

    Attributes:
        api_key: POEditor API token (``$NAME`` reads it from the environment)
        project_id: POEditor project ID (``$NAME`` reads it from the environment)
        type: Output format
        tags: Tag filters passed to the export
        filters: Status filters passed to the export (translated, fuzzy, ...)
        languages: Languages to fetch, in processing order
        language_alias: Alias language -> source language
        path: Default-context path template containing ``{LANGUAGE}``
        path_plural: Default-context plural path template
        path_replace: Language -> default-context path override
        context_path: Context path template with ``{LANGUAGE}`` and ``{CONTEXT}``
        context_path_plural: Context plural path template
        context_path_replace: Language -> context path template with ``{CONTEXT}``
        header: Literal header line for generated source tables
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str
    project_id: str
    type: OutputType
    tags: Tuple[str, ...] = ()
    filters: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = Field(min_length=1)
    language_alias: Dict[str, str] = Field(default_factory=dict)
    path: str
    path_plural: Optional[str] = None
    path_replace: Dict[str, str] = Field(default_factory=dict)
    context_path: Optional[str] = None
    context_path_plural: Optional[str] = None
    context_path_replace: Dict[str, str] = Field(default_factory=dict)
    header: Optional[str] = None

    @field_validator("api_key", "project_id", mode="before")
    @classmethod
    def resolve_from_env(cls, v: Any) -> Any:
        """Read ``$NAME`` values from the environment."""
        if v is None:
            return v
        return from_env(str(v))

    @field_validator("tags", "filters", mode="before")
    @classmethod
    def default_empty_list(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator(
        "language_alias", "path_replace", "context_path_replace", mode="before"
    )
    @classmethod
    def default_empty_mapping(cls, v: Any) -> Any:
        if v is None:
            return {}
        return v

    @model_validator(mode="after")
    def check_header_type(self) -> "ExportConfiguration":
        if self.header is not None and self.type != OutputType.SOURCE_TABLE:
            raise ValueError("header is only supported for the source_table type")
        return self

    @property
    def has_context_paths(self) -> bool:
        """Whether any destination is configured for named contexts."""
        return self.context_path is not None or bool(self.context_path_replace)

    @property
    def has_plural_paths(self) -> bool:
        """Whether any plural destination template is configured."""
        return self.path_plural is not None or self.context_path_plural is not None

    def aliases_for(self, language: str) -> List[str]:
        """Return the alias languages that mirror a language, in config order."""
        return [
            alias_to
            for alias_to, alias_from in self.language_alias.items()
            if alias_from == language
        ]

    def describe(self) -> str:
        """Render the non-secret settings as YAML for the startup log."""
        values = self.model_dump(
            mode="json", exclude={"api_key", "project_id"}, exclude_none=True
        )
        return yaml.safe_dump(values, sort_keys=False, allow_unicode=True)


def load_configuration(path: str | Path) -> ExportConfiguration:
    """Load and validate an export configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated ExportConfiguration.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML or
            does not describe a valid export.
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"Configuration file not found: {config_path}"
        ) from None
    except yaml.YAMLError as e:
        logger.error("configuration_parse_error", file=str(config_path), error=str(e))
        raise ConfigurationError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in {config_path}: expected a mapping"
        )

    try:
        configuration = ExportConfiguration.model_validate(data)
    except ValidationError as e:
        logger.error(
            "configuration_invalid", file=str(config_path), errors=e.error_count()
        )
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e

    logger.info("configuration_loaded", file=str(config_path))
    return configuration
