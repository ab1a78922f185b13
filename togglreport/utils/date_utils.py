"""Date utility functions for togglreport."""
from datetime import date, MINYEAR, MAXYEAR
from typing import List, Optional, Tuple
import calendar

from ..errors import ArgumentFormatError

MONTH_FORMAT_HINT = "Use YYYY-MM (e.g., 2025-06)"


def _parse_int(part: str) -> Optional[int]:
    """Parse a decimal integer with an optional sign, or return None."""
    digits = part[1:] if part[:1] in ("+", "-") else part
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(part)


def parse_month_argument(args: List[str], today: Optional[date] = None) -> Tuple[int, int]:
    """Resolve the target month from the command line.

    Args:
        args: Full argument list, program name first (as in sys.argv)
        today: Reference date used when no month is given (defaults to today)

    Returns:
        Tuple of (year, month)

    Raises:
        ArgumentFormatError: If the argument is not of the form YYYY-MM
    """
    if len(args) < 2:
        today = today or date.today()
        return today.year, today.month

    if len(args) > 2:
        raise ArgumentFormatError(f"expected a single month argument. {MONTH_FORMAT_HINT}")

    month_arg = args[1]
    parts = month_arg.split("-")
    if len(parts) != 2:
        raise ArgumentFormatError(f"invalid month format: {month_arg!r}. {MONTH_FORMAT_HINT}")

    year = _parse_int(parts[0])
    if year is None:
        raise ArgumentFormatError(f"invalid year: {parts[0]!r}. {MONTH_FORMAT_HINT}")

    month = _parse_int(parts[1])
    if month is None:
        raise ArgumentFormatError(f"invalid month: {parts[1]!r}. {MONTH_FORMAT_HINT}")

    if month < 1 or month > 12:
        raise ArgumentFormatError(f"month must be between 1 and 12, got {month}")

    if year < MINYEAR or year > MAXYEAR:
        raise ArgumentFormatError(f"year must be between {MINYEAR} and {MAXYEAR}, got {year}")

    return year, month


def get_month_range(year: int, month: int) -> Tuple[date, date]:
    """Get the first and last day of a month.

    Args:
        year: Calendar year
        month: Month number (1-12)

    Returns:
        Tuple of (start_date, end_date)
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def day_str(dt: date) -> str:
    """Format a date as a string with day of week."""
    return f"({['Mo','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"
