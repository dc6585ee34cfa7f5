"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.poeditor import PoEditorSettings

__all__ = [
    "PoEditorSettings",
]
