"""Renderers for platform string-resource formats.

Each output type maps to one renderer class per artifact it produces. All
renderers take an already placeholder-resolved ContextGroup and return the
file content as text; records without a definition are skipped.

- apple_strings: AppleStringsRenderer (``.strings``) and, for plurals,
  AppleStringsDictRenderer (``.stringsdict``)
- android_strings: AndroidStringsRenderer (``strings.xml``, plurals inline)
- source_table: SourceTableRenderer (generated Kotlin accessors)
"""

import plistlib
import re
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Dict, Optional

from infrastructure.i18n import (
    ContextGroup,
    PlainDefinition,
    PluralDefinition,
    PluralForm,
    Plurality,
    to_apple_placeholders,
    to_printf_placeholders,
)
from modules.export.configuration import OutputType


def escape_quotes(text: str) -> str:
    return text.replace('"', '\\"')


# Characters XML 1.0 cannot carry, which the plist serializer rejects
CONTROL_CHARACTER_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def strip_control_characters(text: str) -> str:
    return CONTROL_CHARACTER_PATTERN.sub("", text)


def escape_android(text: str) -> str:
    return escape_quotes(text).replace("&", "&amp;")


def to_camel_case(term: str) -> str:
    """Convert a snake_case term to a camelCase identifier.

    The first segment is lower-cased, later segments are capitalized.

    Example:
        >>> to_camel_case("thank_you_title")
        'thankYouTitle'
    """
    first, *rest = term.split("_")
    return first.lower() + "".join(segment.capitalize() for segment in rest)


class FormatRenderer(ABC):
    """Base class for all renderers.

    Attributes:
        output_type: Output type the renderer belongs to.
        plurality: Kind of artifact the renderer produces.
    """

    output_type: ClassVar[OutputType]
    plurality: ClassVar[Plurality] = Plurality.SINGULAR

    @abstractmethod
    def render(self, group: ContextGroup) -> str:
        """Render a context group into file content.

        Args:
            group: Records of one context, placeholders already resolved.

        Returns:
            Full file content.
        """
        pass


class AppleStringsRenderer(FormatRenderer):
    """Renders plain records as ``"term" = "definition";`` lines."""

    output_type = OutputType.APPLE_STRINGS

    def render(self, group: ContextGroup) -> str:
        content = ""
        for record in group:
            if not isinstance(record.definition, PlainDefinition):
                continue
            definition = escape_quotes(record.definition.text)
            content += f'"{record.term}" = "{definition}";\n'
        return content


class AppleStringsDictRenderer(FormatRenderer):
    """Renders plural records as a ``.stringsdict`` property list.

    Every entry carries all six CLDR forms; missing forms are empty
    strings. When a term appears twice the first record wins. Control
    characters that XML cannot carry are removed.
    """

    output_type = OutputType.APPLE_STRINGS
    plurality = Plurality.PLURAL

    FORMAT_KEY = "%#@value@"

    def render(self, group: ContextGroup) -> str:
        entries: Dict[str, dict] = {}
        for record in group:
            if not isinstance(record.definition, PluralDefinition):
                continue
            key = strip_control_characters(record.term)
            if key in entries:
                continue
            value = {
                "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
                "NSStringFormatValueTypeKey": "d",
            }
            for form in PluralForm:
                value[form.value] = strip_control_characters(
                    record.definition.get(form) or ""
                )
            entries[key] = {
                "NSStringLocalizedFormatKey": self.FORMAT_KEY,
                "value": value,
            }
        return plistlib.dumps(entries, sort_keys=False).decode("utf-8")


class AndroidStringsRenderer(FormatRenderer):
    """Renders a ``<resources>`` document with strings and plurals.

    Plural items are emitted only for the forms that have a value.
    """

    output_type = OutputType.ANDROID_STRINGS

    def render(self, group: ContextGroup) -> str:
        content = '<?xml version="1.0" encoding="utf-8"?>\n<resources>\n'
        for record in group:
            definition = record.definition
            if isinstance(definition, PlainDefinition):
                text = escape_android(definition.text)
                content += f'  <string name="{record.term}">"{text}"</string>\n'
            elif isinstance(definition, PluralDefinition):
                content += f'  <plurals name="{record.term}">\n'
                for form, text in definition.present_forms():
                    content += (
                        f'    <item quantity="{form.value}">"{escape_android(text)}"</item>\n'
                    )
                content += "  </plurals>\n"
        content += "</resources>\n"
        return content


class SourceTableRenderer(FormatRenderer):
    """Renders a Kotlin ``object`` with one accessor per term.

    Each accessor looks the term up at runtime through ``localized()``,
    which the consuming app provides. Plurality is ignored: plain and
    plural terms both get an accessor.

    Attributes:
        header: Optional literal line emitted first (package, imports).
    """

    output_type = OutputType.SOURCE_TABLE

    OBJECT_NAME = "Strings"
    LOOKUP_FUNCTION = "localized"

    def __init__(self, header: Optional[str] = None):
        self.header = header

    def render(self, group: ContextGroup) -> str:
        content = ""
        if self.header:
            content += f"{self.header}\n\n"
        content += f"object {self.OBJECT_NAME} {{\n"
        seen = set()
        for record in group:
            if record.definition is None or record.term in seen:
                continue
            seen.add(record.term)
            name = to_camel_case(record.term)
            term = escape_quotes(record.term)
            content += (
                f'    val {name}: String get() = {self.LOOKUP_FUNCTION}("{term}")\n'
            )
        content += "}\n"
        return content


PLACEHOLDER_REWRITES: Dict[OutputType, Callable[[str], str]] = {
    OutputType.APPLE_STRINGS: to_apple_placeholders,
    OutputType.ANDROID_STRINGS: to_printf_placeholders,
    OutputType.SOURCE_TABLE: to_printf_placeholders,
}


def rewrite_placeholders(output_type: OutputType, content: str) -> str:
    """Apply the output type's printf rewrite to a raw catalog payload."""
    return PLACEHOLDER_REWRITES[output_type](content)


def renderer_for(output_type: OutputType, header: Optional[str] = None) -> FormatRenderer:
    """Create the singular renderer for an output type.

    Args:
        output_type: Configured output type.
        header: Header line, used by the source table renderer only.

    Returns:
        FormatRenderer producing the type's main artifact.
    """
    if output_type == OutputType.APPLE_STRINGS:
        return AppleStringsRenderer()
    if output_type == OutputType.ANDROID_STRINGS:
        return AndroidStringsRenderer()
    if output_type == OutputType.SOURCE_TABLE:
        return SourceTableRenderer(header=header)
    raise ValueError(f"Unsupported output type: {output_type}")


def plural_renderer_for(output_type: OutputType) -> Optional[FormatRenderer]:
    """Create the plural renderer for an output type.

    Returns:
        FormatRenderer for the separate plural artifact, or None when the
        type keeps plurals in its main file (Android) or has none.
    """
    if output_type == OutputType.APPLE_STRINGS:
        return AppleStringsDictRenderer()
    return None
