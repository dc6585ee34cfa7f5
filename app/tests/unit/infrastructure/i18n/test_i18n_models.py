"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n.models import (
    DEFAULT_CONTEXT,
    ContextGroup,
    PlainDefinition,
    PluralDefinition,
    PluralForm,
    TranslationRecord,
    definition_from_payload,
    group_by_context,
)


class TestPluralForm:
    """Tests for PluralForm enum."""

    def test_forms_are_in_cldr_order(self):
        """PluralForm iterates zero, one, two, few, many, other."""
        assert [form.value for form in PluralForm] == [
            "zero",
            "one",
            "two",
            "few",
            "many",
            "other",
        ]

    def test_from_string_valid(self):
        """from_string() converts a known form name."""
        assert PluralForm.from_string("few") == PluralForm.FEW

    def test_from_string_invalid(self):
        """from_string() raises ValueError for unknown names."""
        with pytest.raises(ValueError, match="Unsupported plural form"):
            PluralForm.from_string("several")


class TestDefinitionFromPayload:
    """Tests for definition_from_payload()."""

    def test_string_becomes_plain(self):
        assert definition_from_payload("Hello") == PlainDefinition("Hello")

    def test_null_is_untranslated(self):
        assert definition_from_payload(None) is None

    def test_object_becomes_plural(self):
        definition = definition_from_payload({"one": "1 file", "other": "%d files"})
        assert isinstance(definition, PluralDefinition)
        assert definition.get(PluralForm.ONE) == "1 file"
        assert definition.get(PluralForm.OTHER) == "%d files"
        assert definition.get(PluralForm.FEW) is None

    def test_unknown_plural_keys_are_ignored(self):
        definition = definition_from_payload({"one": "a", "plenty": "b"})
        assert definition.present_forms() == [(PluralForm.ONE, "a")]

    def test_null_plural_forms_are_missing(self):
        definition = definition_from_payload({"one": "a", "other": None})
        assert definition.get(PluralForm.OTHER) is None

    def test_numbers_become_plain_text(self):
        assert definition_from_payload(42) == PlainDefinition("42")


class TestPluralDefinition:
    """Tests for PluralDefinition helpers."""

    def test_present_forms_follow_cldr_order(self):
        definition = PluralDefinition(
            {PluralForm.OTHER: "many", PluralForm.ONE: "one"}
        )
        assert definition.present_forms() == [
            (PluralForm.ONE, "one"),
            (PluralForm.OTHER, "many"),
        ]

    def test_map_text_applies_to_every_form(self):
        definition = PluralDefinition({PluralForm.ONE: "a", PluralForm.OTHER: "b"})
        mapped = definition.map_text(str.upper)
        assert mapped.texts() == ["A", "B"]


class TestTranslationRecord:
    """Tests for TranslationRecord."""

    def test_default_context(self):
        record = TranslationRecord(term="greeting")
        assert record.context == DEFAULT_CONTEXT
        assert record.definition is None

    def test_is_plural(self):
        plural = TranslationRecord("apples", definition=PluralDefinition({}))
        plain = TranslationRecord("apple", definition=PlainDefinition("Apple"))
        assert plural.is_plural is True
        assert plain.is_plural is False

    def test_with_helpers_return_copies(self):
        record = TranslationRecord("greeting", definition=PlainDefinition("Hi"))
        moved = record.with_context("context1").with_definition(PlainDefinition("Yo"))
        assert record.context == ""
        assert record.definition == PlainDefinition("Hi")
        assert moved.context == "context1"
        assert moved.definition == PlainDefinition("Yo")


class TestGroupByContext:
    """Tests for group_by_context()."""

    def test_groups_preserve_encounter_order(self):
        records = [
            TranslationRecord("a", "ctx2"),
            TranslationRecord("b", ""),
            TranslationRecord("c", "ctx1"),
            TranslationRecord("d", "ctx2"),
        ]
        groups = group_by_context(records)
        assert list(groups) == ["", "ctx2", "ctx1"]
        assert [r.term for r in groups["ctx2"]] == ["a", "d"]

    def test_default_group_always_exists(self):
        groups = group_by_context([TranslationRecord("a", "ctx1")])
        assert list(groups) == ["", "ctx1"]
        assert len(groups[""]) == 0

    def test_empty_catalog(self):
        groups = group_by_context([])
        assert list(groups) == [""]
        assert groups[""].is_default is True


class TestContextGroup:
    """Tests for ContextGroup."""

    def test_has_term(self):
        group = ContextGroup("ctx", [TranslationRecord("a", "ctx")])
        assert group.has_term("a") is True
        assert group.has_term("b") is False

    def test_plain_values_first_occurrence_wins(self):
        group = ContextGroup(
            "",
            [
                TranslationRecord("a", definition=PlainDefinition("first")),
                TranslationRecord("a", definition=PlainDefinition("second")),
                TranslationRecord("p", definition=PluralDefinition({})),
                TranslationRecord("n"),
            ],
        )
        assert group.plain_values() == {"a": "first"}
