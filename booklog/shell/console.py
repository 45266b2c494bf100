"""
Console Abstraction

The shell talks to the user only through a Console. TerminalConsole is the
real terminal; tests drive the shell with a scripted implementation.

read_line raises EOFError when input is exhausted.
"""

import os
from abc import ABC, abstractmethod


UNDECODABLE_INPUT_MESSAGE = "Could not read that line. Please try again."


class Console(ABC):
    """Line-oriented, blocking user I/O."""

    @abstractmethod
    def read_line(self, prompt: str = "") -> str:
        """Show prompt and return one line without its newline."""
        pass

    @abstractmethod
    def write(self, text: str = "") -> None:
        """Print one line."""
        pass

    @abstractmethod
    def pause(self) -> None:
        """Wait for the user to press Enter before continuing."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen."""
        pass


class TerminalConsole(Console):
    """Console over stdin/stdout."""

    def read_line(self, prompt: str = "") -> str:
        while True:
            try:
                return input(prompt)
            except UnicodeDecodeError:
                self.write(UNDECODABLE_INPUT_MESSAGE)

    def write(self, text: str = "") -> None:
        print(text)

    def pause(self) -> None:
        self.read_line()

    def clear(self) -> None:
        os.system("cls" if os.name == "nt" else "clear")
