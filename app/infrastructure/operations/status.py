"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of each
file operation in a pull so it can be reported without aborting the run.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: Target resource does not exist (e.g. destination file)
        SKIPPED: Nothing to do (e.g. no destination configured)
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    SKIPPED = "skipped"
