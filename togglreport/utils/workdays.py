"""Workday classification: weekends and public holidays."""
from datetime import date
from typing import Container, Optional

import holidays

HOLIDAY_COUNTRY = "JP"


class WorkdayCalendar:
    """Decides which calendar dates are left out of the report."""

    def __init__(self, holiday_dates: Container[date]):
        """Initialize a WorkdayCalendar.

        Args:
            holiday_dates: Anything supporting ``day in holiday_dates``; a
                ``holidays.HolidayBase`` in production, a plain set in tests
        """
        self.holiday_dates = holiday_dates

    def is_weekend(self, day: date) -> bool:
        return day.weekday() >= 5

    def holiday_name(self, day: date) -> Optional[str]:
        """Get the holiday name for a date.

        Returns:
            The holiday name, an empty string for holidays without a name, or
            None if the date is not a holiday
        """
        if day not in self.holiday_dates:
            return None
        getter = getattr(self.holiday_dates, "get", None)
        return (getter(day) or "") if getter else ""

    def is_excluded(self, day: date) -> bool:
        """Return True if the date is a Saturday, Sunday or public holiday."""
        return self.is_weekend(day) or day in self.holiday_dates


def japanese_calendar() -> WorkdayCalendar:
    """Build the calendar for Japanese public holidays."""
    return WorkdayCalendar(holidays.country_holidays(HOLIDAY_COUNTRY))
