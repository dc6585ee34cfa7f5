"""POEditor integration module."""

from .client import PoEditorClient, convert_to_poeditor_language

__all__ = [
    "PoEditorClient",
    "convert_to_poeditor_language",
]
