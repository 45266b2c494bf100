"""
Console Input Validation

Every prompt in the shell feeds the raw line through one of these parsers.
A parser never raises for bad input: it returns a ParseResult carrying
either the parsed value or the message to show before re-prompting.

IMPORTANT: Validation NEVER silently fixes input beyond trimming
surrounding whitespace.
"""

from datetime import date, datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel


T = TypeVar("T")

BLANK_TEXT_MESSAGE = "Please enter a value."
UNREADABLE_TEXT_MESSAGE = "That text contains characters that could not be read. Please re-enter it."
WHOLE_NUMBER_MESSAGE = "Please enter a whole number."
INVALID_DATE_MESSAGE = "Please enter a valid date (e.g., 2025-10-16)."

# Tried in order after ISO parsing fails
DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


class ParseResult(BaseModel, Generic[T]):
    """Parsed value, or the reason the input was rejected."""

    value: Optional[T] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.message is None

    @classmethod
    def accept(cls, value: Any) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def reject(cls, message: str) -> "ParseResult":
        return cls(message=message)


def parse_required_text(raw: Optional[str]) -> ParseResult[str]:
    """Non-blank free text, trimmed."""
    text = (raw or "").strip()
    if not text:
        return ParseResult.reject(BLANK_TEXT_MESSAGE)
    try:
        # Undecodable bytes arrive as lone surrogates under a C locale
        text.encode("utf-8")
    except UnicodeEncodeError:
        return ParseResult.reject(UNREADABLE_TEXT_MESSAGE)
    return ParseResult.accept(text)


def parse_int(
    raw: Optional[str],
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> ParseResult[int]:
    """
    A whole number, optionally bounded.

    Args:
        raw: The line as typed
        minimum: Smallest accepted value (inclusive)
        maximum: Largest accepted value (inclusive)
    """
    try:
        value = int((raw or "").strip())
    except ValueError:
        return ParseResult.reject(WHOLE_NUMBER_MESSAGE)

    if minimum is not None and value < minimum:
        return ParseResult.reject(f"Value must be >= {minimum}.")
    if maximum is not None and value > maximum:
        return ParseResult.reject(f"Value must be <= {maximum}.")
    return ParseResult.accept(value)


def parse_date(
    raw: Optional[str],
    today: Optional[date] = None,
    allow_blank_for_today: bool = False,
) -> ParseResult[date]:
    """
    A calendar date.

    ISO dates and timestamps are accepted first, then the common
    written forms in DATE_FORMATS. Any time component is dropped.
    """
    text = (raw or "").strip()
    if not text:
        if allow_blank_for_today:
            return ParseResult.accept(today or date.today())
        return ParseResult.reject(INVALID_DATE_MESSAGE)

    try:
        return ParseResult.accept(datetime.fromisoformat(text).date())
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return ParseResult.accept(datetime.strptime(text, fmt).date())
        except ValueError:
            continue

    return ParseResult.reject(INVALID_DATE_MESSAGE)


def is_confirmation(raw: Optional[str]) -> bool:
    """True for y / yes in any case."""
    return (raw or "").strip().lower() in ("y", "yes")


def is_reset_confirmation(raw: Optional[str]) -> bool:
    """True only when the literal word RESET was typed (any case)."""
    return (raw or "").strip().upper() == "RESET"
