"""Report export package."""

from booklog.services.export.report import (
    EMPTY_PLACEHOLDER,
    ExportError,
    ExportWriteError,
    ViewerLaunch,
    open_in_viewer,
    render_entry_line,
    render_export,
    render_totals_lines,
    write_export,
)

__all__ = [
    "EMPTY_PLACEHOLDER",
    "ExportError",
    "ExportWriteError",
    "ViewerLaunch",
    "open_in_viewer",
    "render_entry_line",
    "render_export",
    "render_totals_lines",
    "write_export",
]
