"""Main module for the togglreport package."""
import sys
import logging
from datetime import date
from typing import List, Optional

from .api.client import TogglClient
from .config import load_environment, load_config
from .errors import ReportError
from .reports.aggregator import aggregate
from .reports.models import SearchCriteria, tag_name_map
from .reports.report_generator import ReportGenerator
from .utils.date_utils import parse_month_argument, day_str
from .utils.workdays import WorkdayCalendar, japanese_calendar

logger = logging.getLogger("togglreport")

LOG_FORMAT = "[%(levelname)s] %(message)s"


def skipped_label(day: str, calendar: WorkdayCalendar) -> str:
    """Label a skipped date with its weekday and, for holidays, the holiday name."""
    dt = date.fromisoformat(day)
    name = calendar.holiday_name(dt)
    return f"{day_str(dt)} {name}" if name else day_str(dt)


def monthly_report(args: List[str], client: TogglClient, calendar: WorkdayCalendar) -> str:
    """Fetch, aggregate and render the report for the month named in args.

    Args:
        args: Full argument list, program name first
        client: Toggl API client
        calendar: Calendar deciding which dates are skipped

    Returns:
        Report text

    Raises:
        ReportError: On any failure; nothing is retried
    """
    year, month = parse_month_argument(args)
    criteria = SearchCriteria.for_month(year, month)
    logger.info("Month: %s -> %s", criteria.start_date, criteria.end_date)

    groups = client.search_time_entries(criteria)
    logger.info("Found %d time entry groups", len(groups))

    tags = client.list_tags()
    logger.info("Found %d tags", len(tags))

    daily_seconds = aggregate(groups, client.config.timezone)
    generator = ReportGenerator(daily_seconds, tag_name_map(tags), calendar)
    workdays = generator.workdays()
    skipped = sorted(set(daily_seconds) - set(workdays))
    if skipped:
        logger.info("Skipping weekends and holidays: %s", ", ".join(skipped_label(d, calendar) for d in skipped))
    return generator.generate_report(workdays)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Process exit code (0 on success, 1 on any error)
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
    args = list(sys.argv if argv is None else argv)

    try:
        load_environment()
        config = load_config()
        client = TogglClient(config)
        report = monthly_report(args, client, japanese_calendar())
    except ReportError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
