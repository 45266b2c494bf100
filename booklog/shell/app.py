"""
Application Wiring

Builds the shell from settings and runs it. This is the only place that
reads configuration; everything below it receives plain values.
"""

from typing import Optional

from booklog.config import Settings, get_settings
from booklog.log import configure_logging, get_logger
from booklog.services.storage import JsonFileLedgerStorage
from booklog.shell.console import Console, TerminalConsole
from booklog.shell.menu import BookLogShell


def create_shell(
    settings: Optional[Settings] = None,
    console: Optional[Console] = None,
) -> BookLogShell:
    """
    Factory function to create the shell and its storage.

    Args:
        settings: Settings to use; the cached settings if None
        console: Console to use; the real terminal if None
    """
    settings = settings or get_settings()
    storage_settings = settings.storage

    storage = JsonFileLedgerStorage(storage_settings.data_file)

    return BookLogShell(
        storage=storage,
        console=console or TerminalConsole(),
        export_path=storage_settings.export_file,
        viewer_command=settings.viewer.viewer_args,
        rate_per_hundred=settings.billing.rate_per_hundred_pages,
    )


def main() -> int:
    """Console entry point."""
    settings = get_settings()
    storage_settings = settings.storage
    logging_settings = settings.logging

    storage_settings.data_dir.mkdir(parents=True, exist_ok=True)
    configure_logging(
        log_file=storage_settings.data_dir / logging_settings.log_file_name,
        level=logging_settings.log_level,
    )
    get_logger(__name__).info(
        "booklog_started",
        data_file=str(storage_settings.data_file),
    )

    shell = create_shell(settings)
    return shell.run()
