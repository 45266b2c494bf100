"""
Report Rendering and Export

Formats the ledger for the console and for the printable export file,
writes the export, and opens it in a text viewer.

Opening the viewer is best-effort: failure is returned as a ViewerLaunch
result and never raised. The export file is written either way.
"""

import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

import structlog
from pydantic import BaseModel

from booklog.config.settings import default_viewer_args
from booklog.models.book import BookEntry, Ledger, LedgerSummary


EXPORT_TITLE = "BOOK LOG"
EMPTY_PLACEHOLDER = "(no entries yet)"
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

logger = structlog.get_logger(__name__)

# Viewers still running; polled on each launch so exited ones get reaped
_viewer_processes: list[subprocess.Popen] = []


class ExportError(Exception):
    """Base exception for export operations."""
    pass


class ExportWriteError(ExportError):
    """The export file could not be written."""
    pass


class ViewerLaunch(BaseModel):
    """Outcome of trying to open the export in a viewer."""

    launched: bool
    command: list[str]
    pid: Optional[int] = None
    error: Optional[str] = None


# =============================================================================
# CONSOLE RENDERING
# =============================================================================

def render_entry_line(index: int, entry: BookEntry) -> str:
    """One listing line, e.g. 1. Ann | "Dune" by Herbert | 412 pages | finished 2024-01-10"""
    return (
        f'{index}. {entry.user_name} | "{entry.title}" by {entry.author} | '
        f"{entry.pages} pages | finished {entry.date_finished.strftime(DATE_FORMAT)}"
    )


def render_totals_lines(summary: LedgerSummary, rate_per_hundred: int = 1) -> list[str]:
    """The on-screen totals block."""
    owed_label = f"Amount owed (${rate_per_hundred}/100p):"
    lines = [
        f"Total pages (all time): {summary.total_pages:,}",
        f"Paid-through pages:     {summary.paid_through_pages:,}",
        f"Unpaid pages:           {summary.unpaid_pages:,}",
        f"{owed_label:<24}${summary.amount_owed:,}",
    ]
    if summary.last_paid_date is not None:
        lines.append(
            f"Last paid date:         {summary.last_paid_date.strftime(TIMESTAMP_FORMAT)}"
        )
    return lines


# =============================================================================
# EXPORT FILE
# =============================================================================

def render_export(ledger: Ledger, summary: LedgerSummary) -> str:
    """Build the printable report text."""
    lines = [EXPORT_TITLE, "=" * 40, ""]

    if not ledger.entries:
        lines.append(EMPTY_PLACEHOLDER)
    else:
        for index, entry in enumerate(ledger.entries, start=1):
            lines.append(f'{index}. {entry.user_name} | "{entry.title}" by {entry.author}')
            lines.append(
                f"    {entry.pages} pages | finished "
                f"{entry.date_finished.strftime(DATE_FORMAT)}"
            )

    lines.append("")
    lines.append("-" * 40)
    lines.append(f"Total pages:        {summary.total_pages:,}")
    lines.append(f"Paid-through pages: {summary.paid_through_pages:,}")
    lines.append(f"Unpaid pages:       {summary.unpaid_pages:,}")
    lines.append(f"Amount owed:        ${summary.amount_owed:,}")
    if summary.last_paid_date is not None:
        lines.append(
            f"Last paid date:     {summary.last_paid_date.strftime(TIMESTAMP_FORMAT)}"
        )

    return "\n".join(lines) + "\n"


def write_export(text: str, path: Union[str, Path]) -> Path:
    """
    Write the report, replacing any previous export.

    Raises:
        ExportWriteError: If the file could not be written
    """
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ExportWriteError(f"Could not write export to {path}: {e}") from e

    logger.info("export_written", path=str(path), size=len(text))
    return path


def open_in_viewer(
    path: Union[str, Path],
    command: Optional[Sequence[str]] = None,
) -> ViewerLaunch:
    """
    Start a text viewer on the export file without waiting for it.

    Args:
        path: File to open
        command: Viewer argument list; the platform default if None
    """
    args = list(command) if command else default_viewer_args()
    args.append(str(path))

    _viewer_processes[:] = [p for p in _viewer_processes if p.poll() is None]

    try:
        process = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as e:
        logger.warning("viewer_launch_failed", command=args, error=str(e))
        return ViewerLaunch(launched=False, command=args, error=str(e))

    _viewer_processes.append(process)
    logger.info("viewer_started", command=args, pid=process.pid)
    return ViewerLaunch(launched=True, command=args, pid=process.pid)
