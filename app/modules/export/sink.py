"""File sinks.

A sink is the only component that touches the file system. It overwrites
existing files and never creates files or directories: a missing
destination is reported as NOT_FOUND and the pull continues.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from infrastructure.operations import OperationResult


class FileSink(ABC):
    """Abstract write capability injected into the export pipeline."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a destination file exists."""
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Overwrite an existing destination file.

        Raises:
            OSError: If the file cannot be written.
        """
        pass

    def save(self, path: str, content: str) -> OperationResult:
        """Overwrite a destination if it exists.

        Args:
            path: Destination path.
            content: Rendered file content.

        Returns:
            SUCCESS when written, NOT_FOUND when the file does not exist.
            The path is returned as the result data in both cases.

        Raises:
            OSError: If an existing file cannot be written.
        """
        if not self.exists(path):
            return OperationResult.not_found(f"{path} doesn't exist", data=path)
        self.write_text(path, content)
        return OperationResult.success(data=path, message=f"Saved at '{path}'")


class LocalFileSink(FileSink):
    """Sink writing UTF-8 files on the local file system.

    Attributes:
        root: Directory that relative paths are resolved against. Defaults
            to the current working directory.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else None

    def _resolve(self, path: str) -> Path:
        target = Path(path)
        if self.root is not None and not target.is_absolute():
            return self.root / target
        return target

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def write_text(self, path: str, content: str) -> None:
        # Bytes keep line endings exactly as rendered on every platform
        self._resolve(path).write_bytes(content.encode("utf-8"))
