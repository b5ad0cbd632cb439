"""
JSON snapshot storage for the library's book and member mappings.

Each artifact is a single JSON object keyed by entity id. Reads and writes
never raise: the outcome is returned as a StorageResult and failures are
reported through logging.
"""

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class StorageStatus(Enum):
    """Outcome of a single storage operation"""
    OK = "ok"
    MISSING = "missing"
    CORRUPT = "corrupt"
    IO_ERROR = "io_error"


@dataclass
class StorageResult:
    """Result of reading or writing one artifact"""
    status: StorageStatus
    detail: Optional[str] = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status is StorageStatus.OK

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "detail": self.detail}


class JsonStore:
    """Reads and writes one keyed JSON snapshot file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> StorageResult:
        """Load the snapshot as a dict. Missing or malformed files are not fatal."""
        if not os.path.exists(self.path):
            return StorageResult(StorageStatus.MISSING, f"{self.path} not found")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Could not parse {self.path}: {e}")
            return StorageResult(StorageStatus.CORRUPT, str(e))
        except OSError as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return StorageResult(StorageStatus.IO_ERROR, str(e))

        if not isinstance(payload, dict):
            logger.warning(f"{self.path} does not hold a JSON object")
            return StorageResult(StorageStatus.CORRUPT, "expected a JSON object")

        return StorageResult(StorageStatus.OK, data=payload)

    def save(self, payload: Dict[str, Any]) -> StorageResult:
        """Replace the snapshot. The previous file survives any failure."""
        tmp_path = f"{self.path}.tmp"
        try:
            text = json.dumps(payload, indent=2, ensure_ascii=False)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Error saving {self.path}: {e}")
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            return StorageResult(StorageStatus.IO_ERROR, str(e))
        return StorageResult(StorageStatus.OK)
