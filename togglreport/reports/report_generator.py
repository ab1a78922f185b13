"""ReportGenerator class for rendering the per-day tag report."""
from datetime import date
from io import StringIO
from typing import Dict, List, Optional, TextIO
import sys

from tabulate import tabulate

from .aggregator import DailyTagSeconds
from .models import UNKNOWN_TAG_NAME
from ..utils.format_utils import format_seconds
from ..utils.workdays import WorkdayCalendar

BANNER = "=" * 60
HEADERS = ["Tag Name", "Hours"]


class ReportGenerator:
    """Class for rendering daily tag tables from aggregated seconds."""

    def __init__(self, daily_seconds: DailyTagSeconds, tag_names: Dict[int, str],
                 calendar: WorkdayCalendar, tablefmt: str = "grid"):
        """Initialize a ReportGenerator.

        Args:
            daily_seconds: Mapping of ISO date to tag ID to seconds
            tag_names: Mapping of tag ID to tag name
            calendar: Calendar deciding which dates are skipped
            tablefmt: tabulate table format
        """
        self.daily_seconds = daily_seconds
        self.tag_names = tag_names
        self.calendar = calendar
        self.tablefmt = tablefmt

    def tag_name(self, tag_id: int) -> str:
        return self.tag_names.get(tag_id, UNKNOWN_TAG_NAME)

    def workdays(self) -> List[str]:
        """Get the reported dates in ascending order, without weekends and holidays."""
        return [
            day for day in sorted(self.daily_seconds)
            if not self.calendar.is_excluded(date.fromisoformat(day))
        ]

    def day_rows(self, day: str) -> List[List[str]]:
        """Build the table rows for one date, ending with the total row.

        Args:
            day: ISO date present in the aggregation

        Returns:
            Rows of [tag name, HH:MM:SS], ordered by tag name
        """
        tag_seconds = self.daily_seconds[day]
        ordered = sorted(tag_seconds.items(), key=lambda item: (self.tag_name(item[0]), item[0]))
        rows = [[self.tag_name(tag_id), format_seconds(secs)] for tag_id, secs in ordered]
        rows.append(["Total", format_seconds(sum(tag_seconds.values()))])
        return rows

    def generate_report(self, days: Optional[List[str]] = None) -> str:
        """Generate the complete report.

        Args:
            days: Dates to render, as returned by workdays() (computed if omitted)

        Returns:
            Report as a string
        """
        output = StringIO()
        for day in (self.workdays() if days is None else days):
            self._generate_day_table(output, day)
        print(BANNER, file=output)
        return output.getvalue()

    def _generate_day_table(self, output: StringIO, day: str):
        print(BANNER, file=output)
        print(f"Date: {day}", file=output)
        print(BANNER, file=output)
        print(tabulate(self.day_rows(day), headers=HEADERS, tablefmt=self.tablefmt,
                       disable_numparse=True), file=output)


def render(daily_seconds: DailyTagSeconds, tag_names: Dict[int, str],
           calendar: WorkdayCalendar, stream: Optional[TextIO] = None) -> None:
    """Render the report and write it to a stream (stdout by default)."""
    report = ReportGenerator(daily_seconds, tag_names, calendar).generate_report()
    (stream or sys.stdout).write(report)
