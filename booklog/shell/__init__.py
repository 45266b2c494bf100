"""Interactive shell package."""

from booklog.shell.app import create_shell, main
from booklog.shell.console import Console, TerminalConsole
from booklog.shell.menu import MENU_LINES, BookLogShell

__all__ = [
    "BookLogShell",
    "Console",
    "MENU_LINES",
    "TerminalConsole",
    "create_shell",
    "main",
]
