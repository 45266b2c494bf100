"""Input validation package."""

from booklog.validation.validator import (
    ParseResult,
    is_confirmation,
    is_reset_confirmation,
    parse_date,
    parse_int,
    parse_required_text,
)

__all__ = [
    "ParseResult",
    "is_confirmation",
    "is_reset_confirmation",
    "parse_date",
    "parse_int",
    "parse_required_text",
]
