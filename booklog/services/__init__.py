"""Services package."""

from booklog.services.export import (
    ExportError,
    ExportWriteError,
    ViewerLaunch,
    open_in_viewer,
    render_export,
    write_export,
)
from booklog.services.storage import (
    InMemoryLedgerStorage,
    JsonFileLedgerStorage,
    LedgerStorageInterface,
    LoadResult,
    LoadStatus,
    StorageError,
    StorageWriteError,
)

__all__ = [
    # Export
    "ExportError",
    "ExportWriteError",
    "ViewerLaunch",
    "open_in_viewer",
    "render_export",
    "write_export",
    # Storage
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
    "LedgerStorageInterface",
    "LoadResult",
    "LoadStatus",
    "StorageError",
    "StorageWriteError",
]
