"""Infrastructure modules for poeditor-pull.

Centralized infrastructure components:
- configuration: Settings management (settings)
- logging: Structured logging (get_module_logger, configure_logging)
- i18n: Translation catalog model, parsing and placeholder resolution
- operations: Operation results for per-file reporting
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import configure_logging, get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "settings",
    # Observability
    "configure_logging",
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
]
