"""
ROMAN TIMELINE - Historical Date Model

Pure value conversions between historical dates, axis coordinates and
display strings. Astronomical numbering internally (1 BCE = 0), BCE/CE
with no year zero on display.

The coordinate is an axis position, not a duration: months are a flat
1/12 and days a flat 1/365 regardless of month length or leap years.
Same-year ordering of events depends on exactly this approximation.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

from roman_timeline.types import (
    DatePrecision,
    DisplayYear,
    Era,
    HistoricalDate,
    HistoricalDateRange,
)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

INVALID_YEAR_MESSAGE = "Invalid year. Please enter a year between 1 and 9999"
EMPTY_YEAR_MESSAGE = "Please enter a year"

_YEAR_PATTERN = re.compile(r"(\d+)\s*(BCE|BC|CE|AD)?", re.IGNORECASE | re.ASCII)


def to_coordinate(date: HistoricalDate) -> float:
    """
    Convert a date to its axis coordinate.

    year + (month - 1) / 12 + (day - 1) / 365, where the month term needs
    a month and the day term needs both month and day.
    """
    month_fraction = (date.month - 1) / 12 if date.month else 0.0
    day_fraction = (date.day - 1) / 365 if date.day and date.month else 0.0
    return date.year + month_fraction + day_fraction


def astronomical_to_display(year: int) -> DisplayYear:
    """Astronomical year -> display year. Never produces value 0."""
    if year <= 0:
        return DisplayYear(value=-year + 1, era=Era.BCE)
    return DisplayYear(value=year, era=Era.CE)


def format_year_label(year: float) -> str:
    """Label for a fractional axis position, e.g. the scrubber center."""
    return str(astronomical_to_display(math.floor(year + 0.5)))


def _month_name(month: int) -> str:
    if 1 <= month <= 12:
        return MONTH_ABBREVIATIONS[month - 1]
    return ""


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_date(date: HistoricalDate) -> str:
    """
    Format a date for readers.

    Examples: "15 Mar 44 BCE", "c. 509 BCE", "260s BCE", "3rd century BCE".
    Exact dates missing day or month fall back to month, then year rendering.
    """
    display = astronomical_to_display(date.year)
    value, era = display.value, display.era.value
    prefix = "c. " if date.approximate else ""
    precision = date.precision

    if precision == DatePrecision.EXACT and date.month and date.day:
        return f"{prefix}{date.day} {_month_name(date.month)} {value} {era}"

    if precision in (DatePrecision.EXACT, DatePrecision.MONTH) and date.month:
        return f"{prefix}{_month_name(date.month)} {value} {era}"

    if precision == DatePrecision.DECADE:
        decade = (value // 10) * 10
        return f"{prefix}{decade}s {era}"

    if precision == DatePrecision.CENTURY:
        century = math.ceil(value / 100)
        return f"{prefix}{_ordinal(century)} century {era}"

    return f"{prefix}{value} {era}"


def format_range(date_range: HistoricalDateRange) -> str:
    """
    Format a date range.

    Same era: "264–241 BCE" (era dropped from the start token).
    Different eras: "27 BCE – 14 CE".
    """
    start_era = astronomical_to_display(date_range.start.year).era
    end_era = astronomical_to_display(date_range.end.year).era

    if start_era == end_era:
        start_str = format_date(date_range.start).replace(f" {start_era.value}", "", 1)
        return f"{start_str}–{format_date(date_range.end)}"

    return f"{format_date(date_range.start)} – {format_date(date_range.end)}"


def compare(a: HistoricalDate, b: HistoricalDate) -> float:
    """Negative if a sorts before b, positive if after, 0 if same position."""
    return to_coordinate(a) - to_coordinate(b)


def parse_year(text: str) -> Optional[int]:
    """
    Parse "509 BCE", "44 bc", "79", "79 AD" to an astronomical year.

    Returns None for empty, decimal or non-numeric input.
    """
    match = _YEAR_PATTERN.fullmatch(text.strip())
    if match is None:
        return None

    value = int(match.group(1))
    era = (match.group(2) or "").upper()

    if era in ("BCE", "BC"):
        # 1 BCE = 0, 2 BCE = -1; int arithmetic never yields -0
        return -(value - 1)
    return value


@dataclass(frozen=True)
class YearInput:
    """Outcome of validating the go-to-year text box. text is kept for correction."""

    text: str
    year: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None and self.year is not None


def validate_year_input(text: str, era: Era = Era.CE) -> YearInput:
    """Combine the typed year with the era selector and parse it."""
    if not text.strip():
        return YearInput(text=text, error=EMPTY_YEAR_MESSAGE)

    year = parse_year(f"{text} {era.value}")
    if year is None:
        return YearInput(text=text, error=INVALID_YEAR_MESSAGE)
    return YearInput(text=text, year=year)
