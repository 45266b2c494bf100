"""
Ledger Operations

Pure functions over a Ledger. The two queries (totals, amount owed) have no
side effects. The mutators change the ledger in place and leave persisting
it to the caller.

DESIGN DECISION: Billing is stateless. Every call computes the amount owed
from the current unpaid pages; fractional hundreds are dropped and never
carried forward to the next payment.
"""

from datetime import datetime
from typing import Iterable, Optional

from booklog.models.book import BookEntry, Ledger, LedgerSummary


PAGES_PER_BILLING_UNIT = 100
DEFAULT_RATE_PER_HUNDRED = 1


def sum_pages(entries: Iterable[BookEntry]) -> int:
    return sum(entry.pages for entry in entries)


def total_pages(ledger: Ledger) -> int:
    """Pages read across all entries."""
    return sum_pages(ledger.entries)


def unpaid_pages(ledger: Ledger) -> int:
    """Pages not yet settled. Clamped at zero."""
    return max(0, total_pages(ledger) - ledger.paid_through_pages)


def amount_owed(ledger: Ledger, rate_per_hundred: int = DEFAULT_RATE_PER_HUNDRED) -> int:
    """
    Whole dollars owed for the unpaid pages.

    Only full hundreds count: 250 unpaid pages owe 2, 99 owe 0.
    """
    return (unpaid_pages(ledger) // PAGES_PER_BILLING_UNIT) * rate_per_hundred


def add_entry(ledger: Ledger, entry: BookEntry) -> None:
    """Append an already-validated entry."""
    ledger.entries.append(entry)


def mark_paid(ledger: Ledger, now: Optional[datetime] = None) -> None:
    """
    Settle everything read so far.

    Pages added after an earlier payment are included; the paid-through
    mark always moves to the current total.
    """
    ledger.paid_through_pages = total_pages(ledger)
    ledger.last_paid_date = now or datetime.now()


def reset_all(ledger: Ledger) -> None:
    """Erase all entries and payment status."""
    ledger.entries.clear()
    ledger.paid_through_pages = 0
    ledger.last_paid_date = None


def summarize(
    ledger: Ledger,
    rate_per_hundred: int = DEFAULT_RATE_PER_HUNDRED,
) -> LedgerSummary:
    """Snapshot the totals for display."""
    return LedgerSummary(
        total_pages=total_pages(ledger),
        paid_through_pages=ledger.paid_through_pages,
        unpaid_pages=unpaid_pages(ledger),
        amount_owed=amount_owed(ledger, rate_per_hundred),
        last_paid_date=ledger.last_paid_date,
    )
