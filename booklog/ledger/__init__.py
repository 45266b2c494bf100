"""Ledger operations package."""

from booklog.ledger.operations import (
    DEFAULT_RATE_PER_HUNDRED,
    PAGES_PER_BILLING_UNIT,
    add_entry,
    amount_owed,
    mark_paid,
    reset_all,
    sum_pages,
    summarize,
    total_pages,
    unpaid_pages,
)

__all__ = [
    "DEFAULT_RATE_PER_HUNDRED",
    "PAGES_PER_BILLING_UNIT",
    "add_entry",
    "amount_owed",
    "mark_paid",
    "reset_all",
    "sum_pages",
    "summarize",
    "total_pages",
    "unpaid_pages",
]
