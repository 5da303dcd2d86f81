# src/todo_list/tasks/dates.py

"""
Due date validation and input.

Dates are typed as day/month/year with optional spaces around the slashes
("5/3/2024", "05 / 03 / 2024") and stored in canonical unpadded form.
"""

from __future__ import annotations

import re

from ..core.ports import Console

DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DATE_REGEX = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*/\s*(\d+)\s*$")

RETRY_PROMPT = "Please enter a valid date: "


def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return True if (day, month, year) is a real Gregorian calendar date."""
    if year < 1:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1:
        return False
    if month == 2 and is_leap_year(year):
        return day <= 29
    return day <= DAYS_IN_MONTH[month - 1]


def parse_date(text: str) -> tuple[int, int, int] | None:
    """Extract (day, month, year) from user text, or None if it is not D/M/Y shaped."""
    m = DATE_REGEX.match(text)
    if not m:
        return None
    try:
        day, month, year = (int(g) for g in m.groups())
    except ValueError:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        return None
    return day, month, year


def format_date(day: int, month: int, year: int) -> str:
    return f"{day}/{month}/{year}"


def read_date(console: Console, prompt: str) -> str:
    """
    Keep reading lines until a valid date is entered; return it in canonical form.

    There is no way to cancel from here: every bad line just re-prompts.
    """
    line = console.read_line(prompt)
    while True:
        parts = parse_date(line)
        if parts is not None and is_valid_date(*parts):
            return format_date(*parts)
        line = console.read_line(RETRY_PROMPT)
