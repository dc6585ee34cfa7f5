"""Translation models for the export pipeline.

Defines the records fetched from the localization service and the
per-context grouping the renderers work on.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

DEFAULT_CONTEXT = ""


class Plurality(str, Enum):
    """Whether an artifact carries singular strings or plural-form strings."""

    SINGULAR = "singular"
    PLURAL = "plural"


class PluralForm(str, Enum):
    """CLDR plural categories, in rendering order."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @classmethod
    def from_string(cls, form: str) -> "PluralForm":
        """Convert string to PluralForm enum.

        Args:
            form: Form name (e.g., "one", "other").

        Returns:
            Matching PluralForm enum value.

        Raises:
            ValueError: If the form name is not a CLDR category.
        """
        try:
            return cls(form)
        except ValueError as e:
            raise ValueError(f"Unsupported plural form: {form}") from e


@dataclass(frozen=True)
class PlainDefinition:
    """A single translated string."""

    text: str

    def map_text(self, fn: Callable[[str], str]) -> "PlainDefinition":
        return PlainDefinition(fn(self.text))

    def texts(self) -> List[str]:
        return [self.text]


@dataclass(frozen=True)
class PluralDefinition:
    """Translated strings keyed by plural form.

    Forms may be missing; renderers decide whether a missing form is
    emitted empty or omitted.

    Attributes:
        forms: Mapping of PluralForm to text.
    """

    forms: Dict[PluralForm, str] = field(default_factory=dict)

    def get(self, form: PluralForm) -> Optional[str]:
        return self.forms.get(form)

    def present_forms(self) -> List[Tuple[PluralForm, str]]:
        """Return the forms that have a value, in CLDR order."""
        return [(form, self.forms[form]) for form in PluralForm if form in self.forms]

    def map_text(self, fn: Callable[[str], str]) -> "PluralDefinition":
        return PluralDefinition({form: fn(text) for form, text in self.forms.items()})

    def texts(self) -> List[str]:
        return [text for _, text in self.present_forms()]


Definition = Union[PlainDefinition, PluralDefinition]


def definition_from_payload(value: Any) -> Optional[Definition]:
    """Build a Definition from the JSON value of a catalog item.

    Strings become plain definitions, objects become plural definitions
    (unknown form names are ignored) and null stays None (untranslated).

    Args:
        value: Raw "definition" value from the catalog payload.

    Returns:
        Definition, or None when the term has no translation.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        forms: Dict[PluralForm, str] = {}
        for key, text in value.items():
            try:
                form = PluralForm.from_string(str(key))
            except ValueError:
                continue
            if text is not None:
                forms[form] = str(text)
        return PluralDefinition(forms)
    return PlainDefinition(str(value))


@dataclass(frozen=True)
class TranslationRecord:
    """One catalog entry.

    Attributes:
        term: Translation key as defined in the localization service.
        context: Namespace of the term; "" is the default context.
        definition: Translated value, or None when untranslated.
    """

    term: str
    context: str = DEFAULT_CONTEXT
    definition: Optional[Definition] = None

    @property
    def is_plural(self) -> bool:
        return isinstance(self.definition, PluralDefinition)

    def with_definition(self, definition: Optional[Definition]) -> "TranslationRecord":
        return replace(self, definition=definition)

    def with_context(self, context: str) -> "TranslationRecord":
        return replace(self, context=context)


@dataclass
class ContextGroup:
    """Records of one language sharing the same context, in catalog order.

    Attributes:
        context: Context key; "" for the default group.
        records: Records in catalog order.
    """

    context: str
    records: List[TranslationRecord] = field(default_factory=list)

    @property
    def is_default(self) -> bool:
        return self.context == DEFAULT_CONTEXT

    def has_term(self, term: str) -> bool:
        return any(record.term == term for record in self.records)

    def plain_values(self) -> Dict[str, str]:
        """Map each term with a plain definition to its text.

        The first occurrence of a term wins.
        """
        values: Dict[str, str] = {}
        for record in self.records:
            if isinstance(record.definition, PlainDefinition):
                values.setdefault(record.term, record.definition.text)
        return values

    def __iter__(self):
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


def group_by_context(records: Iterable[TranslationRecord]) -> Dict[str, ContextGroup]:
    """Partition records by context.

    The default group always exists and comes first; the other groups
    follow in the order their context is first encountered.

    Args:
        records: Records of a single language, in catalog order.

    Returns:
        Ordered mapping of context key to ContextGroup.
    """
    groups: Dict[str, ContextGroup] = {DEFAULT_CONTEXT: ContextGroup(DEFAULT_CONTEXT)}
    for record in records:
        group = groups.get(record.context)
        if group is None:
            group = groups[record.context] = ContextGroup(record.context)
        group.records.append(record)
    return groups
