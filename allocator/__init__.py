"""
Allocation core for the Resource Allocator.

Registry owns the entities, AllocationService mutates them,
TransactionLog records every completed mutation.
"""

from .errors import (
    ErrorKind,
    AllocationError,
    OperationResult,
    PersistenceError
)
from .registry import Registry
from .transaction_log import TransactionLog, DEFAULT_LOG_FILENAME
from .service import AllocationService
from .commands import Command, execute

__all__ = [
    # --- Errors & Results ---
    "ErrorKind",
    "AllocationError",
    "OperationResult",
    "PersistenceError",

    # --- Core ---
    "Registry",
    "TransactionLog",
    "DEFAULT_LOG_FILENAME",
    "AllocationService",

    # --- Shell Interface ---
    "Command",
    "execute",
]
