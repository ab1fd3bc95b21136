"""Parsing of task text as written in the editor.

A task starts with a date tag such as ``[2025-03-31]``, followed by its content.
The low-level parsers each return the parsed value together with the rest
of the input.
"""

from __future__ import annotations

from datetime import date

from kondo.task import Task

_MULTISPACE = " \t\r\n"


class TaskParseError(ValueError):
    """Raised when text does not have the expected form."""


def parse_digits(text: str) -> tuple[str, str]:
    """Take one or more leading ASCII digits."""
    end = 0
    for char in text:
        if not ("0" <= char <= "9"):
            break
        end += 1
    if end == 0:
        raise TaskParseError(f"expected digits at {text[:10]!r}")
    return text[:end], text[end:]


def _parse_fixed_number(text: str, width: int, what: str) -> tuple[int, str]:
    digits, rest = parse_digits(text)
    if len(digits) != width:
        raise TaskParseError(f"expected {width} digits for the {what}, got {digits!r}")
    return int(digits), rest


def parse_year(text: str) -> tuple[int, str]:
    """Parse a four-digit year."""
    return _parse_fixed_number(text, 4, "year")


def parse_month(text: str) -> tuple[int, str]:
    """Parse a two-digit month."""
    return _parse_fixed_number(text, 2, "month")


def parse_day(text: str) -> tuple[int, str]:
    """Parse a two-digit day."""
    return _parse_fixed_number(text, 2, "day")


def parse_separator(text: str) -> tuple[str, str]:
    """Parse a date separator, ``/`` or ``-``."""
    if not text or text[0] not in "/-":
        raise TaskParseError(f"expected '/' or '-' at {text[:10]!r}")
    return text[0], text[1:]


def _expect_char(text: str, expected: str) -> str:
    if not text or text[0] != expected:
        raise TaskParseError(f"expected {expected!r} at {text[:10]!r}")
    return text[1:]


def parse_date(text: str) -> tuple[date, str]:
    """Parse a date written as year, month and day with separators."""
    year, rest = parse_year(text)
    _, rest = parse_separator(rest)
    month, rest = parse_month(rest)
    _, rest = parse_separator(rest)
    day, rest = parse_day(rest)
    try:
        return date(year, month, day), rest
    except ValueError as exc:
        raise TaskParseError(f"invalid date {year:04d}-{month:02d}-{day:02d}") from exc


def parse_date_tag(text: str) -> tuple[date, str]:
    """Parse a date enclosed in square brackets."""
    rest = _expect_char(text, "[")
    deadline, rest = parse_date(rest)
    rest = _expect_char(rest, "]")
    return deadline, rest


def parse_task(text: str) -> Task:
    """Parse a whole task: leading whitespace, a date tag, then the content."""
    deadline, rest = parse_date_tag(text.lstrip(_MULTISPACE))
    return Task(deadline, rest.strip())