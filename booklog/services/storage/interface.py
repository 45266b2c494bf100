"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for ledger persistence.
This allows us to:
1. Keep the shell decoupled from the on-disk format
2. Use in-memory storage for testing
3. Swap the JSON file for something else later

Loading never raises for a missing or unreadable file. The outcome is
reported as a LoadResult so the caller decides what to do about it.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from booklog.models.book import Ledger


class LoadStatus(str, Enum):
    """How a load attempt went."""
    LOADED = "loaded"     # File parsed into a ledger
    MISSING = "missing"   # No file yet; started empty
    CORRUPT = "corrupt"   # File unreadable; started empty, file left as is


class LoadResult(BaseModel):
    """Outcome of LedgerStorageInterface.load()."""

    ledger: Ledger = Field(default_factory=Ledger)
    status: LoadStatus
    error: Optional[str] = Field(
        default=None,
        description="Why the file could not be read (CORRUPT only)"
    )

    @property
    def is_corrupt(self) -> bool:
        return self.status == LoadStatus.CORRUPT


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger storage.

    The ledger is always read and written whole.
    """

    @abstractmethod
    def load(self) -> LoadResult:
        """
        Read the stored ledger.

        Returns:
            A LoadResult. On MISSING or CORRUPT its ledger is empty.
        """
        pass

    @abstractmethod
    def save(self, ledger: Ledger) -> None:
        """
        Overwrite the stored ledger.

        Raises:
            StorageWriteError: If the ledger could not be written
        """
        pass


class InMemoryLedgerStorage(LedgerStorageInterface):
    """Keeps the serialized ledger in memory. Used by tests."""

    def __init__(self, initial: Optional[Ledger] = None):
        self._document: Optional[str] = None
        self.save_count = 0
        if initial is not None:
            self._document = initial.model_dump_json()

    def load(self) -> LoadResult:
        if self._document is None:
            return LoadResult(status=LoadStatus.MISSING)
        return LoadResult(
            ledger=Ledger.model_validate_json(self._document),
            status=LoadStatus.LOADED,
        )

    def save(self, ledger: Ledger) -> None:
        self._document = ledger.model_dump_json()
        self.save_count += 1


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageWriteError(StorageError):
    """The ledger could not be written."""
    pass
