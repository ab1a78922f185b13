"""Group time entry seconds by calendar day and tag."""
from collections import defaultdict
from datetime import datetime, tzinfo
from typing import Dict, Iterable

from ..errors import TimestampParseError
from .models import TimeEntryGroup

# ISO date -> tag ID -> seconds
DailyTagSeconds = Dict[str, Dict[int, int]]


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Raises:
        TimestampParseError: If the value is not a timestamp with a UTC offset
    """
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        raise TimestampParseError(f"Date parsing failed: {value!r}") from e
    if dt.tzinfo is None:
        raise TimestampParseError(f"Timestamp has no UTC offset: {value!r}")
    return dt


def aggregate(groups: Iterable[TimeEntryGroup], tz: tzinfo) -> DailyTagSeconds:
    """Sum entry durations per reporting-timezone date and tag.

    Every tag of a group is credited with the full duration of each of its
    entries. A group without tags adds no seconds, but its entry dates are
    still present in the result with an empty tag mapping.

    Args:
        groups: Time entry groups from the search endpoint
        tz: Reporting timezone used to derive the calendar date

    Returns:
        Mapping of ISO date to a mapping of tag ID to seconds
    """
    daily = defaultdict(lambda: defaultdict(int))
    for group in groups:
        for start, seconds in group.time_entries:
            day = parse_timestamp(start).astimezone(tz).date().isoformat()
            tag_seconds = daily[day]
            for tag_id in group.tag_ids:
                tag_seconds[tag_id] += seconds
    return {day: dict(tags) for day, tags in daily.items()}
