"""
Data Models Package

This package contains all Pydantic models used by Book Log.
Everything persisted or displayed conforms to these schemas.
"""

from booklog.models.book import (
    BookEntry,
    Ledger,
    LedgerSummary,
)

__all__ = [
    "BookEntry",
    "Ledger",
    "LedgerSummary",
]
