import logging
from datetime import date
from typing import Callable

from library_app.storage import StorageResult, StorageStatus

logger = logging.getLogger(__name__)


class TransactionLog:
    """Append-only text log, one `<ISO date> - <message>` line per entry."""

    def __init__(self, path: str, today: Callable[[], date] = date.today) -> None:
        self.path = path
        self._today = today

    def write(self, message: str) -> StorageResult:
        """Append a line. Failures are swallowed and only reported in the result."""
        line = f"{self._today().isoformat()} - {message}\n"
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except (OSError, ValueError) as e:
            logger.debug(f"Transaction log write failed for {self.path}: {e}")
            return StorageResult(StorageStatus.IO_ERROR, str(e))
        return StorageResult(StorageStatus.OK)
