"""
Storage Services Package

Provides the abstract ledger storage interface and its implementations.
The JSON file backend is the one the application uses.
"""

from booklog.services.storage.interface import (
    InMemoryLedgerStorage,
    LedgerStorageInterface,
    LoadResult,
    LoadStatus,
    StorageError,
    StorageWriteError,
)
from booklog.services.storage.json_file import JsonFileLedgerStorage

__all__ = [
    # Interfaces
    "LedgerStorageInterface",
    "LoadResult",
    "LoadStatus",
    # Exceptions
    "StorageError",
    "StorageWriteError",
    # Implementations
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
]
