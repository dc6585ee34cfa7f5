"""Catalog parsing and printf placeholder rewriting.

Turns the raw JSON text downloaded from the localization service into
TranslationRecords. The printf rewrites operate on the raw text, before
parsing, so every definition of a language is converted in one pass.
"""

import json
import re
from typing import Any, List, Optional

from infrastructure.i18n.models import (
    DEFAULT_CONTEXT,
    TranslationRecord,
    definition_from_payload,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# %s, %1$s -> %@, %1$@
STRING_SPECIFIER_PATTERN = re.compile(r"(%(\d+\$)?)s")
# %@, %1$@ -> %s, %1$s
OBJECT_SPECIFIER_PATTERN = re.compile(r"(%(\d+\$)?)@")


def to_apple_placeholders(text: str) -> str:
    """Rewrite printf string specifiers to Apple object specifiers."""
    return STRING_SPECIFIER_PATTERN.sub(r"\1@", text)


def to_printf_placeholders(text: str) -> str:
    """Rewrite Apple object specifiers to printf string specifiers."""
    return OBJECT_SPECIFIER_PATTERN.sub(r"\1s", text)


class JSONCatalogLoader:
    """Parser for the JSON export of a localization catalog.

    Expects a top-level array of objects:

        [{"term": "greeting", "definition": "Hi, %s!", "context": ""}, ...]

    A null or missing context is the default context. Items without a
    term are ignored.
    """

    def parse(self, content: str) -> List[TranslationRecord]:
        """Parse catalog text into records, preserving catalog order.

        Args:
            content: Raw JSON text.

        Returns:
            List of TranslationRecords.

        Raises:
            ValueError: If the text is not JSON or not a list of items.
        """
        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("catalog_parse_error", error=str(e))
            raise ValueError(f"Failed to parse catalog: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            logger.error(
                "invalid_catalog_format",
                expected="list",
                received=type(data).__name__,
            )
            raise ValueError(
                f"Invalid catalog format: expected a JSON array, got {type(data).__name__}"
            )

        records = []
        for item in data:
            record = self._record_from_item(item)
            if record is not None:
                records.append(record)

        logger.debug("parsed_catalog", item_count=len(data), record_count=len(records))
        return records

    def _record_from_item(self, item: Any) -> Optional[TranslationRecord]:
        if not isinstance(item, dict) or not item.get("term"):
            logger.warning("invalid_catalog_item", item=repr(item))
            return None

        context = item.get("context")
        return TranslationRecord(
            term=str(item["term"]),
            context=DEFAULT_CONTEXT if context is None else str(context),
            definition=definition_from_payload(item.get("definition")),
        )

