"""Cross-context placeholder resolution.

Default-context definitions may reference other terms with ``$name``
tokens (e.g. "Thank you for downloading $app_name."). Each named context
receives its own copy of those definitions with the tokens substituted,
so one default string can be reused by several apps.
"""

import re
from typing import Dict, List, Optional

from infrastructure.i18n.models import (
    ContextGroup,
    Definition,
    TranslationRecord,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\$([a-z_]{3,})")


def has_placeholder(definition: Optional[Definition]) -> bool:
    """Check whether any text of a definition contains a ``$name`` token."""
    if definition is None:
        return False
    return any(PLACEHOLDER_PATTERN.search(text) for text in definition.texts())


class PlaceholderResolver:
    """Copies placeholder-bearing default items into context groups.

    Substitution is a single, non-recursive pass. Token values are looked
    up in the target context's own plain items first, then in the default
    group; unknown names are left as written, ``$`` included.

    Attributes:
        default_group: The language's default-context group.
    """

    def __init__(self, default_group: ContextGroup):
        self.default_group = default_group
        self.default_values = default_group.plain_values()
        self.candidates: List[TranslationRecord] = [
            record for record in default_group if has_placeholder(record.definition)
        ]

    def resolve(self, group: ContextGroup) -> ContextGroup:
        """Return an augmented copy of a named context group.

        Args:
            group: Context group to augment. Not modified.

        Returns:
            New ContextGroup with the group's own records followed by the
            resolved copies of default items it does not define itself.
        """
        values: Dict[str, str] = dict(self.default_values)
        values.update(group.plain_values())

        records = list(group.records)
        copied = []
        for candidate in self.candidates:
            if group.has_term(candidate.term):
                continue
            definition = candidate.definition.map_text(
                lambda text: self.substitute(text, values)
            )
            records.append(
                candidate.with_context(group.context).with_definition(definition)
            )
            copied.append(candidate.term)

        if copied:
            logger.debug(
                "placeholders_resolved",
                context=group.context,
                terms=copied,
            )
        return ContextGroup(context=group.context, records=records)

    @staticmethod
    def substitute(text: str, values: Dict[str, str]) -> str:
        """Replace each ``$name`` token whose name is in values."""

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name in values:
                return values[name]
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(replace, text)
