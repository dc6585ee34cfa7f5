"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for poeditor-pull using structlog.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_export_context(): Context manager for run/language-scoped logging
    - get_run_id(): Get current run ID from context
    - clear_export_context(): Clear all export context

Formatters:
    - mask_sensitive_data(): Processor to redact sensitive fields
    - truncate_large_values(): Processor to limit string lengths

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_export_context,
    )

    configure_logging()

    logger = get_module_logger()
    with bind_export_context(language="de"):
        logger.info("language_export_started")
"""

# Core logging setup
from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

# Export context binding
from infrastructure.logging.context import (
    bind_export_context,
    get_run_id,
    clear_export_context,
)

# Log formatters/processors
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_export_context",
    "get_run_id",
    "clear_export_context",
    # Formatters
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
