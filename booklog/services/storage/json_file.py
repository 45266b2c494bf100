"""
JSON File Storage Implementation

DESIGN DECISION: The ledger is a single indented JSON document because:
1. The user can read and hand-edit it
2. There is one user and one process, so no locking is needed
3. The whole state is small enough to rewrite on every change

TRADEOFFS:
- Writes are not atomic; a crash mid-write can corrupt the file
- A corrupt file is ignored on load (and left on disk) until the next save
"""

import json
from pathlib import Path
from typing import Union

import structlog

from booklog.models.book import Ledger
from booklog.services.storage.interface import (
    LedgerStorageInterface,
    LoadResult,
    LoadStatus,
    StorageWriteError,
)


class JsonFileLedgerStorage(LedgerStorageInterface):
    """
    File-backed ledger storage.

    Keys are written in snake_case and read case-insensitively.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        if not self._path.exists():
            self._logger.info("ledger_file_missing", path=str(self._path))
            return LoadResult(status=LoadStatus.MISSING)

        try:
            raw = self._path.read_text(encoding="utf-8")
            document = json.loads(raw)
            if document is None:
                # A literal "null" document carries no state
                return LoadResult(status=LoadStatus.MISSING)
            ledger = Ledger.model_validate(document)
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers bad JSON, bad UTF-8 and ValidationError;
            # RecursionError comes from pathologically nested arrays
            self._logger.warning(
                "ledger_load_failed",
                path=str(self._path),
                error=str(e),
            )
            return LoadResult(status=LoadStatus.CORRUPT, error=str(e))

        self._logger.info(
            "ledger_loaded",
            path=str(self._path),
            entries=len(ledger.entries),
            paid_through_pages=ledger.paid_through_pages,
        )
        return LoadResult(ledger=ledger, status=LoadStatus.LOADED)

    def save(self, ledger: Ledger) -> None:
        document = json.dumps(ledger.model_dump(mode="json"), indent=2)
        try:
            self._path.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageWriteError(
                f"Could not write ledger to {self._path}: {e}"
            ) from e

        self._logger.info(
            "ledger_saved",
            path=str(self._path),
            entries=len(ledger.entries),
        )
