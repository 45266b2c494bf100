"""
Core Data Models for Book Log

These models define the schemas for everything the program keeps:
1. BookEntry - one finished book
2. Ledger - all entries plus the billing bookkeeping
3. LedgerSummary - a computed snapshot shown to the user

DESIGN DECISION: Property lookups while parsing are case-insensitive and
ignore underscores. Files written by older PascalCase versions ("UserName",
"PaidThroughPages", ...) load the same as files written by this one.
"""

from datetime import date, datetime, time
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


def match_field_names(model: type[BaseModel], data: Any) -> Any:
    """Rename incoming keys to the model's field names, ignoring case."""
    if not isinstance(data, dict):
        return data
    lookup = {_fold(name): name for name in model.model_fields}
    matched = {}
    for key, value in data.items():
        if isinstance(key, str):
            key = lookup.get(_fold(key), key)
        matched[key] = value
    return matched


# =============================================================================
# ENTRY MODEL
# =============================================================================

class BookEntry(BaseModel):
    """
    One finished-book record.

    Entries are immutable once created. The shell validates every field
    before constructing one; the model re-checks on load.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    user_name: str = Field(
        ...,
        min_length=1,
        description="Who read the book"
    )
    title: str = Field(
        ...,
        min_length=1,
        description="Book title"
    )
    author: str = Field(
        ...,
        min_length=1,
        description="Book author"
    )
    pages: int = Field(
        ...,
        ge=0,
        description="Number of pages"
    )
    date_finished: date = Field(
        ...,
        description="Calendar date the book was finished"
    )

    @model_validator(mode='before')
    @classmethod
    def match_keys(cls, data: Any) -> Any:
        return match_field_names(cls, data)

    @field_validator('date_finished', mode='before')
    @classmethod
    def drop_time_component(cls, v: Any) -> Any:
        """Accept full timestamps and keep only the date."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return datetime.fromisoformat(v.strip()).date()
        return v

    @field_serializer('date_finished', when_used='json')
    def serialize_date_finished(self, v: date) -> str:
        # Written as a midnight timestamp, matching older PascalCase files
        return datetime.combine(v, time()).isoformat()


# =============================================================================
# LEDGER MODEL
# =============================================================================

class Ledger(BaseModel):
    """
    The whole persisted state.

    Mutated only through the functions in booklog.ledger.
    """

    entries: list[BookEntry] = Field(
        default_factory=list,
        description="Finished books in insertion order"
    )
    paid_through_pages: int = Field(
        default=0,
        ge=0,
        description="Cumulative page count already settled"
    )
    last_paid_date: Optional[datetime] = Field(
        default=None,
        description="When the balance was last marked paid"
    )

    @model_validator(mode='before')
    @classmethod
    def match_keys(cls, data: Any) -> Any:
        return match_field_names(cls, data)

    @property
    def is_empty(self) -> bool:
        """True for a ledger that has never been used (or was reset)."""
        return (
            not self.entries
            and self.paid_through_pages == 0
            and self.last_paid_date is None
        )


class LedgerSummary(BaseModel):
    """Totals shown on screen and in the export report."""
    model_config = ConfigDict(frozen=True)

    total_pages: int = Field(ge=0)
    paid_through_pages: int = Field(ge=0)
    unpaid_pages: int = Field(ge=0)
    amount_owed: int = Field(
        ge=0,
        description="Whole dollars owed for the unpaid pages"
    )
    last_paid_date: Optional[datetime] = None
