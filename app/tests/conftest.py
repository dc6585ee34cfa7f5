import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

# Ensure the application root is on sys.path so importing application
# modules (e.g. `modules.export`) works during pytest collection regardless
# of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from modules.export.configuration import ExportConfiguration  # noqa: E402
from modules.export.sink import FileSink  # noqa: E402


class InMemoryFileSink(FileSink):
    """FileSink double keeping files in a dict.

    Only paths present in ``files`` exist; writes to other paths are
    reported as not found by FileSink.save().
    """

    def __init__(self, existing: Optional[Sequence[str]] = None):
        self.files: Dict[str, str] = {path: "" for path in existing or []}
        self.writes: List[str] = []

    def exists(self, path: str) -> bool:
        return path in self.files

    def write_text(self, path: str, content: str) -> None:
        self.files[path] = content
        self.writes.append(path)


class FakeFetcher:
    """Catalog fetcher returning canned payloads per language."""

    def __init__(self, payloads: Dict[str, str]):
        self.payloads = payloads
        self.calls: List[tuple] = []

    def fetch(self, language, tags=None, filters=None) -> str:
        self.calls.append((language, tuple(tags or ()), tuple(filters or ())))
        return self.payloads[language]


@pytest.fixture
def make_configuration():
    """Factory building an ExportConfiguration with test defaults."""

    def _make(**overrides) -> ExportConfiguration:
        values = {
            "api_key": "TEST",
            "project_id": "12345",
            "type": "apple_strings",
            "languages": ["en"],
            "path": "{LANGUAGE}.lproj/Localizable.strings",
        }
        values.update(overrides)
        return ExportConfiguration(**values)

    return _make


@pytest.fixture
def memory_sink():
    """Factory for InMemoryFileSink with a set of existing paths."""

    def _make(*existing: str) -> InMemoryFileSink:
        return InMemoryFileSink(existing)

    return _make


@pytest.fixture
def fake_fetcher():
    """Factory for FakeFetcher."""

    def _make(payloads: Dict[str, str]) -> FakeFetcher:
        return FakeFetcher(payloads)

    return _make
