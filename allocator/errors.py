"""
Error kinds and operation results.

Lookup and registration failures are returned to the caller as data,
the same way a rejected slot comes back as a violation instead of an exception.
Only the log sink raises, and the service converts that into a result too.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    DUPLICATE_ID = "DuplicateId"
    INELIGIBLE_FOR_MAINTENANCE = "IneligibleForMaintenance"
    INVALID_INPUT = "InvalidInput"
    PERSISTENCE = "PersistenceError"


@dataclass
class AllocationError:
    """Detailed reason for rejection."""
    kind: ErrorKind
    reason: str
    entity_id: str


@dataclass
class OperationResult:
    """
    Outcome of one service call.
    'message' is the human-readable line the shell prints,
    'value' carries the payload of read operations (e.g. the state description).
    """
    message: str = ""
    value: Optional[str] = None
    error: Optional[AllocationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: AllocationError) -> "OperationResult":
        return cls(message=error.reason, error=error)


class PersistenceError(Exception):
    """The transaction log could not be written."""


def not_found(kind: str, entity_id: str) -> AllocationError:
    return AllocationError(
        kind=ErrorKind.NOT_FOUND,
        reason=f"{kind} not found",
        entity_id=entity_id
    )


def duplicate_id(kind: str, entity_id: str) -> AllocationError:
    return AllocationError(
        kind=ErrorKind.DUPLICATE_ID,
        reason=f"{kind} {entity_id} already exists",
        entity_id=entity_id
    )


def invalid_input(kind: str, entity_id: str, cause) -> AllocationError:
    """
    Rejection built from a pydantic ValidationError.
    Only the first message is kept, e.g. "Input should be 'worker' or 'equipment'".
    """
    return AllocationError(
        kind=ErrorKind.INVALID_INPUT,
        reason=f"{kind} {entity_id} is invalid: {cause.errors()[0]['msg']}",
        entity_id=entity_id
    )
