"""Utility modules for togglreport."""

from .date_utils import parse_month_argument, get_month_range, day_str
from .format_utils import format_seconds
from .workdays import WorkdayCalendar, japanese_calendar

__all__ = [
    'parse_month_argument', 'get_month_range', 'day_str',
    'format_seconds',
    'WorkdayCalendar', 'japanese_calendar'
]
