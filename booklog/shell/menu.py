"""
Interactive Menu Shell

The single-threaded request/response loop the user interacts with.

Flow per iteration:
1. Clear the screen and show the 7-option menu
2. Read one line and dispatch on an exact match
3. Run the action; mutating actions save the ledger before returning

DESIGN PRINCIPLES:
1. Bad input never raises; prompts repeat until the input is valid
2. Destructive actions (mark paid, reset) need explicit confirmation
3. The ledger is only changed through booklog.ledger
"""

from datetime import date, datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import structlog

from booklog import ledger as ops
from booklog.models.book import BookEntry, Ledger
from booklog.services.export import (
    EMPTY_PLACEHOLDER,
    open_in_viewer,
    render_entry_line,
    render_export,
    render_totals_lines,
    write_export,
)
from booklog.services.storage import LedgerStorageInterface
from booklog.validation import (
    ParseResult,
    is_confirmation,
    is_reset_confirmation,
    parse_date,
    parse_int,
    parse_required_text,
)
from booklog.shell.console import Console


MENU_LINES = (
    "=== BOOK LOG ===",
    "1) Add entry",
    "2) List entries",
    "3) Show totals & amount owed",
    "4) Export to text file for printing",
    "5) Mark current balance as PAID",
    "6) RESET (clear all data)",
    "7) Save & Exit",
)
EXIT_CHOICE = "7"
PRESS_ENTER = "Press Enter to continue..."


class BookLogShell:
    """
    Console front end over a ledger and its storage.

    The ledger is loaded once by start() (or run()) and saved after
    every mutation and on exit.
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        console: Console,
        export_path: Union[str, Path],
        viewer_command: Optional[Sequence[str]] = None,
        rate_per_hundred: int = ops.DEFAULT_RATE_PER_HUNDRED,
        today: Callable[[], date] = date.today,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._storage = storage
        self._console = console
        self._export_path = export_path
        self._viewer_command = viewer_command
        self._rate = rate_per_hundred
        self._today = today
        self._clock = clock
        self._ledger: Optional[Ledger] = None
        self._logger = structlog.get_logger(__name__)

        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_entry,
            "2": self.list_entries,
            "3": self.show_totals,
            "4": self.export,
            "5": self.mark_paid,
            "6": self.reset,
        }

    @property
    def ledger(self) -> Ledger:
        if self._ledger is None:
            raise RuntimeError("Ledger not loaded; call start() first")
        return self._ledger

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> None:
        """Load the ledger. A corrupt file is logged and ignored."""
        result = self._storage.load()
        if result.is_corrupt:
            self._logger.warning(
                "starting_with_empty_ledger",
                reason=result.error,
            )
        self._ledger = result.ledger
        self._logger.info(
            "ledger_ready",
            status=result.status.value,
            empty=self._ledger.is_empty,
            entries=len(self._ledger.entries),
        )

    def run(self) -> int:
        """
        Run the menu loop until the user saves and exits.

        End of input at any prompt saves and exits the same way.

        Returns:
            Process exit code
        """
        if self._ledger is None:
            self.start()

        while True:
            try:
                choice = self._show_menu()
                if choice == EXIT_CHOICE:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._console.write(f"Invalid choice. {PRESS_ENTER}")
                    self._console.pause()
                    continue
                action()
            except EOFError:
                self._logger.info("input_closed")
                break

        self._save()
        self._console.write("Saved. Goodbye!")
        return 0

    def _show_menu(self) -> str:
        self._console.clear()
        for line in MENU_LINES:
            self._console.write(line)
        return self._console.read_line("Choose: ")

    def _save(self) -> None:
        self._storage.save(self.ledger)

    def _acknowledge(self) -> None:
        self._console.write(PRESS_ENTER)
        self._console.pause()

    # =========================================================================
    # PROMPTS
    # =========================================================================

    def _prompt_until_valid(
        self,
        label: str,
        parse: Callable[[str], ParseResult],
    ):
        while True:
            result = parse(self._console.read_line(f"{label}: "))
            if result.ok:
                return result.value
            self._console.write(result.message)

    def prompt_text(self, label: str) -> str:
        return self._prompt_until_valid(label, parse_required_text)

    def prompt_int(
        self,
        label: str,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        return self._prompt_until_valid(
            label,
            lambda raw: parse_int(raw, minimum=minimum, maximum=maximum),
        )

    def prompt_date(self, label: str, allow_blank_for_today: bool = False) -> date:
        return self._prompt_until_valid(
            label,
            lambda raw: parse_date(
                raw,
                today=self._today(),
                allow_blank_for_today=allow_blank_for_today,
            ),
        )

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def add_entry(self) -> None:
        """Prompt for a finished book and record it."""
        self._console.clear()
        self._console.write("=== Add Book Entry ===")

        user_name = self.prompt_text("Your name")
        title = self.prompt_text("Book title")
        author = self.prompt_text("Author")
        pages = self.prompt_int("Number of pages (whole number, >= 0)", minimum=0)
        date_finished = self.prompt_date(
            "Date finished (YYYY-MM-DD). Leave blank for today",
            allow_blank_for_today=True,
        )

        entry = BookEntry(
            user_name=user_name,
            title=title,
            author=author,
            pages=pages,
            date_finished=date_finished,
        )
        ops.add_entry(self.ledger, entry)
        self._save()
        self._logger.info(
            "entry_added",
            title=entry.title,
            pages=entry.pages,
            total_entries=len(self.ledger.entries),
        )

        self._console.write("Entry added!")
        self._acknowledge()

    def list_entries(self) -> None:
        self._console.clear()
        self._console.write("=== Entries ===")

        if not self.ledger.entries:
            self._console.write(EMPTY_PLACEHOLDER)
        for index, entry in enumerate(self.ledger.entries, start=1):
            self._console.write(render_entry_line(index, entry))

        self._console.write()
        self._acknowledge()

    def show_totals(self) -> None:
        self._console.clear()
        self._console.write("=== Totals ===")

        summary = ops.summarize(self.ledger, self._rate)
        for line in render_totals_lines(summary, self._rate):
            self._console.write(line)

        self._console.write()
        self._acknowledge()

    def export(self) -> None:
        """Write the printable report and try to open it."""
        self._console.clear()
        self._console.write("=== Export ===")

        summary = ops.summarize(self.ledger, self._rate)
        path = write_export(render_export(self.ledger, summary), self._export_path)
        self._console.write(f"Exported to: {path}")

        # Failure is logged inside open_in_viewer; the export stands either way
        open_in_viewer(path, self._viewer_command)

        self._console.write()
        self._acknowledge()

    def mark_paid(self) -> None:
        """Settle the current balance after confirmation."""
        self._console.clear()
        summary = ops.summarize(self.ledger, self._rate)

        self._console.write("=== Mark Paid ===")
        self._console.write(
            f"You currently owe ${summary.amount_owed:,} for "
            f"{summary.unpaid_pages:,} unpaid pages."
        )
        answer = self._console.read_line("Confirm mark as PAID? (y/n): ")
        if is_confirmation(answer):
            ops.mark_paid(self.ledger, now=self._clock())
            self._save()
            self._logger.info(
                "ledger_marked_paid",
                paid_through_pages=self.ledger.paid_through_pages,
                amount=summary.amount_owed,
            )
            self._console.write("Marked as PAID.")
        else:
            self._console.write("Canceled.")

        self._acknowledge()

    def reset(self) -> None:
        """Erase everything after the user types RESET."""
        self._console.clear()
        self._console.write("=== RESET ===")
        answer = self._console.read_line(
            "This will erase ALL entries and payment status. Continue? (type RESET): "
        )
        if is_reset_confirmation(answer):
            ops.reset_all(self.ledger)
            self._save()
            self._logger.info("ledger_reset")
            self._console.write("All data cleared.")
        else:
            self._console.write("Canceled.")

        self._acknowledge()
