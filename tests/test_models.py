"""
Tests for Book Log

Test strategy:
1. Unit tests for individual components (models, ledger, validators)
2. Flow tests for the shell with a scripted console
3. No real viewer launches in tests (subprocess is patched)
"""

import pytest
from datetime import date, datetime

from pydantic import ValidationError

from booklog.models import BookEntry, Ledger, LedgerSummary


def make_entry(**overrides) -> BookEntry:
    fields = dict(
        user_name="Ann",
        title="Dune",
        author="Herbert",
        pages=412,
        date_finished=date(2024, 1, 10),
    )
    fields.update(overrides)
    return BookEntry(**fields)


class TestBookEntry:
    """Tests for the BookEntry model."""

    def test_entry_creation(self):
        """Test BookEntry model creation."""
        entry = make_entry()
        assert entry.user_name == "Ann"
        assert entry.title == "Dune"
        assert entry.pages == 412
        assert entry.date_finished == date(2024, 1, 10)

    def test_entry_strips_whitespace(self):
        """Test that whitespace is stripped from text fields."""
        entry = make_entry(title="  Dune  ", author=" Herbert ")
        assert entry.title == "Dune"
        assert entry.author == "Herbert"

    def test_entry_rejects_blank_text(self):
        """Test that blank required text is rejected."""
        with pytest.raises(ValidationError):
            make_entry(user_name="   ")

    def test_entry_rejects_negative_pages(self):
        """Test that negative page counts are rejected."""
        with pytest.raises(ValidationError):
            make_entry(pages=-1)

    def test_entry_allows_zero_pages(self):
        assert make_entry(pages=0).pages == 0

    def test_entry_is_immutable(self):
        """Test that entries cannot be edited after creation."""
        entry = make_entry()
        with pytest.raises(ValidationError):
            entry.pages = 10

    def test_entry_drops_time_from_timestamp_string(self):
        """Test that a full timestamp is truncated to its date."""
        entry = make_entry(date_finished="2024-01-10T00:00:00")
        assert entry.date_finished == date(2024, 1, 10)

    def test_entry_drops_time_from_datetime(self):
        entry = make_entry(date_finished=datetime(2024, 1, 10, 15, 30))
        assert entry.date_finished == date(2024, 1, 10)

    def test_entry_serializes_date_as_midnight_timestamp(self):
        """Test JSON output uses a timestamp-capable date format."""
        dumped = make_entry().model_dump(mode="json")
        assert dumped["date_finished"] == "2024-01-10T00:00:00"

    def test_entry_python_dump_keeps_date(self):
        assert make_entry().model_dump()["date_finished"] == date(2024, 1, 10)

    def test_entry_keys_are_case_insensitive(self):
        """Test that PascalCase property names are accepted."""
        entry = BookEntry.model_validate({
            "UserName": "Ann",
            "TITLE": "Dune",
            "Author": "Herbert",
            "Pages": 412,
            "DateFinished": "2024-01-10T00:00:00",
        })
        assert entry == make_entry()


class TestLedger:
    """Tests for the Ledger model."""

    def test_default_ledger_is_empty(self):
        ledger = Ledger()
        assert ledger.entries == []
        assert ledger.paid_through_pages == 0
        assert ledger.last_paid_date is None
        assert ledger.is_empty is True

    def test_ledger_with_entries_is_not_empty(self):
        assert Ledger(entries=[make_entry()]).is_empty is False

    def test_ledger_rejects_negative_paid_through(self):
        with pytest.raises(ValidationError):
            Ledger(paid_through_pages=-5)

    def test_ledger_keys_are_case_insensitive(self):
        """Test that a PascalCase file layout loads."""
        ledger = Ledger.model_validate({
            "Entries": [{
                "UserName": "Ann",
                "Title": "Dune",
                "Author": "Herbert",
                "Pages": 412,
                "DateFinished": "2024-01-10T00:00:00",
            }],
            "PaidThroughPages": 400,
            "LastPaidDate": "2024-02-01T09:15:00",
        })
        assert ledger.entries == [make_entry()]
        assert ledger.paid_through_pages == 400
        assert ledger.last_paid_date == datetime(2024, 2, 1, 9, 15)

    def test_ledger_ignores_unknown_keys(self):
        ledger = Ledger.model_validate({"entries": [], "colour": "blue"})
        assert ledger.is_empty


class TestLedgerSummary:
    """Tests for the LedgerSummary model."""

    def test_summary_rejects_negative_values(self):
        with pytest.raises(ValidationError):
            LedgerSummary(
                total_pages=0,
                paid_through_pages=0,
                unpaid_pages=-1,
                amount_owed=0,
            )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
