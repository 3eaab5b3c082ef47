"""
Append-only transaction log.

One human-readable line per completed mutation. The file is never read back
by the program; the in-memory copy only mirrors what was written.
"""

import logging
from typing import List, Optional

from .errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILENAME = "resource_log.txt"


class TransactionLog:
    """
    Write-only sink for mutation records.
    Pass path=None for a memory-only log (dry runs, tests).
    """

    def __init__(self, path: Optional[str] = DEFAULT_LOG_FILENAME):
        self.path = path
        self.records: List[str] = []

    def append(self, message: str) -> None:
        """
        Append one record.
        Raises PersistenceError if the file cannot be written or the message
        cannot be encoded; nothing is recorded in memory in that case.
        """
        if self.path is not None:
            try:
                with open(self.path, 'a', encoding='utf-8') as f:
                    f.write(message + "\n")
            except (OSError, UnicodeError) as e:
                raise PersistenceError(f"Could not write to {self.path}: {e}") from e

        self.records.append(message)
        logger.debug(f"Logged: {message}")

    def __len__(self) -> int:
        return len(self.records)
