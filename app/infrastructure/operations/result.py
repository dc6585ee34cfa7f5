"""Operation result dataclass.

Uniform result type returned from operations across the application,
including status, data, and error information.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (can be dict, list, or object)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a non-success OperationResult.

        Args:
            status: OperationStatus indicating the outcome
            message: Human-friendly message
            error_code: Optional machine error code
            data: Optional payload to include with the result

        Returns:
            OperationResult with specified status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def not_found(
        cls, message: str, data: Optional[Any] = None
    ) -> "OperationResult":
        """Create a NOT_FOUND result for a missing target.

        Args:
            message: Human-friendly message
            data: Optional payload to include with the result

        Returns:
            OperationResult with NOT_FOUND status
        """
        return cls.error(OperationStatus.NOT_FOUND, message, "NOT_FOUND", data)

    @classmethod
    def skipped(
        cls, message: str, data: Optional[Any] = None
    ) -> "OperationResult":
        """Create a SKIPPED result when there is nothing to do.

        Args:
            message: Human-friendly message
            data: Optional payload to include with the result

        Returns:
            OperationResult with SKIPPED status
        """
        return cls.error(OperationStatus.SKIPPED, message, "SKIPPED", data)
