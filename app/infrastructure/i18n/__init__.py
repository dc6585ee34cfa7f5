"""i18n system - translation catalog model and transforms.

Provides the records fetched from the localization service, their
per-context grouping, catalog parsing and placeholder resolution.

Main components:
- models: TranslationRecord, PlainDefinition, PluralDefinition, PluralForm, ContextGroup
- loader: JSONCatalogLoader and the printf placeholder rewrites
- placeholders: PlaceholderResolver for ``$name`` cross-references
"""

from infrastructure.i18n.loader import (
    JSONCatalogLoader,
    to_apple_placeholders,
    to_printf_placeholders,
)
from infrastructure.i18n.models import (
    DEFAULT_CONTEXT,
    ContextGroup,
    Definition,
    PlainDefinition,
    PluralDefinition,
    PluralForm,
    Plurality,
    TranslationRecord,
    group_by_context,
)
from infrastructure.i18n.placeholders import PlaceholderResolver

__all__ = [
    "DEFAULT_CONTEXT",
    "ContextGroup",
    "Definition",
    "PlainDefinition",
    "PluralDefinition",
    "PluralForm",
    "Plurality",
    "TranslationRecord",
    "group_by_context",
    "JSONCatalogLoader",
    "to_apple_placeholders",
    "to_printf_placeholders",
    "PlaceholderResolver",
]
