"""Feature-level fixtures for i18n tests.

Provides catalog payloads and record groups shaped like the JSON export of
the localization service.
"""

import json

import pytest

from infrastructure.i18n import (
    ContextGroup,
    PlainDefinition,
    TranslationRecord,
)


@pytest.fixture
def catalog_items():
    """Catalog items for one language, mixing contexts."""
    return [
        {"term": "greeting", "definition": "Hi, %s!", "context": ""},
        {"term": "welcome", "definition": "Welcome!", "context": ""},
        {"term": "welcome", "definition": "Welcome to App 1!", "context": "context1"},
        {"term": "welcome", "definition": "Welcome to App 2!", "context": "context2"},
        {
            "term": "thank_you",
            "definition": "Thank you for downloading $app_name.",
            "context": "",
        },
        {"term": "app_name", "definition": "App 1 in EN", "context": "context1"},
        {"term": "app_name", "definition": "App 2 in EN", "context": "context2"},
        {
            "term": "apples",
            "definition": {"one": "%d apple", "other": "%d apples"},
            "context": "",
        },
    ]


@pytest.fixture
def catalog_payload(catalog_items):
    """Raw JSON text of catalog_items."""
    return json.dumps(catalog_items)


def plain(term, text, context=""):
    return TranslationRecord(term=term, context=context, definition=PlainDefinition(text))


@pytest.fixture
def default_group():
    """Default-context group with one placeholder-bearing definition."""
    return ContextGroup(
        context="",
        records=[
            plain("app_name", "App 1"),
            plain("welcome", "Welcome!"),
            plain("thank_you", "Thanks $app_name"),
        ],
    )
