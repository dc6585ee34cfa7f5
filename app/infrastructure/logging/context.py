"""Run context binding for structured logging.

This module provides utilities for binding run-scoped and language-scoped
context to logs, so every entry emitted while exporting a language carries
the run ID and the language code.

Usage:
    from infrastructure.logging import bind_export_context

    with bind_export_context(language="fr"):
        # All logs within this block will include the context
        logger.info("language_export_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_export_context(
    run_id: Optional[str] = None,
    language: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind export-scoped context to all logs within the context manager.

    Args:
        run_id: Identifier of the pull run. Auto-generated if not provided
            and no run ID is bound yet.
        language: Language code being exported.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is automatically bound to structlog's context vars.

    Example:
        with bind_export_context(run_id="pull-1"):
            for language in languages:
                with bind_export_context(language=language):
                    export(language)
    """
    context: dict[str, Any] = {}

    if run_id is not None:
        context["run_id"] = run_id
    elif get_run_id() is None:
        context["run_id"] = str(uuid.uuid4())

    if language is not None:
        context["language"] = language

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_run_id() -> Optional[str]:
    """Get the current run ID from the logging context.

    Returns:
        The run ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("run_id")


def clear_export_context() -> None:
    """Clear all export-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
