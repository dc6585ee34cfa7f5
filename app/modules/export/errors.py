"""Errors for the export module."""

from typing import Optional


class PoEditorError(Exception):
    """Base exception for fatal pull errors.

    Any PoEditorError aborts the whole pull; the command line entry point
    reports it once and exits with a non-zero status.
    """

    pass


class RemoteError(PoEditorError):
    """Raised when the localization service rejects or fails a request.

    Attributes:
        message: Message reported by the service (or transport error text)
        code: Status code reported by the service, when available
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        if code is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} ({code})")


class ConfigurationError(PoEditorError):
    """Raised when the export configuration cannot produce a required output.

    Covers invalid configuration files and a default-context output whose
    destination path cannot be resolved.
    """

    pass


class WriteError(PoEditorError):
    """Raised when an existing destination file cannot be overwritten.

    Attributes:
        path: Destination that failed
    """

    def __init__(self, path: str, error: OSError):
        self.path = path
        super().__init__(f"Failed to write '{path}': {error.strerror or error}")
