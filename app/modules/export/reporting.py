"""Per-file reporting for pulls.

Every save attempt produces an OperationResult that is handed to a
Reporter and collected in the PullReport returned by the pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus

logger = get_module_logger()


class Reporter(ABC):
    """Receives the outcome of each file operation."""

    @abstractmethod
    def report(self, result: OperationResult) -> None:
        pass


class LoggingReporter(Reporter):
    """Reporter that emits one structured log event per file."""

    def report(self, result: OperationResult) -> None:
        if result.is_success:
            logger.info("file_saved", path=result.data)
        elif result.status == OperationStatus.NOT_FOUND:
            logger.warning("file_skipped", path=result.data, reason=result.message)
        else:
            logger.info("file_skipped", path=result.data, reason=result.message)


@dataclass
class PullReport:
    """Results of one pull, in write order.

    Attributes:
        results: One OperationResult per attempted file operation.
    """

    results: List[OperationResult] = field(default_factory=list)

    def add(self, result: OperationResult) -> None:
        self.results.append(result)

    @property
    def saved(self) -> List[str]:
        """Paths that were written."""
        return [r.data for r in self.results if r.is_success]

    @property
    def skipped(self) -> List[OperationResult]:
        """Results for files that were not written."""
        return [r for r in self.results if not r.is_success]
