"""Data classes for Toggl Track search requests and responses."""
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Tuple

from ..errors import DecodeError
from ..utils.date_utils import get_month_range

MONTHLY_PAGE_SIZE = 3000
UNKNOWN_TAG_NAME = "Unknown Tag"


def _json_int(value: Any, name: str) -> int:
    """Return value if it is a JSON integer, rejecting floats and booleans.

    Raises:
        DecodeError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Expected an integer for {name}, got {value!r}")
    return value


@dataclass(frozen=True)
class SearchCriteria:
    """Body of a time entry search request.

    Only start_date, end_date and page_size are used by the monthly report;
    the other filters mirror what the search endpoint accepts and are left out
    of the payload while they hold their zero value.
    """
    start_date: str = ""
    end_date: str = ""
    page_size: int = 0
    billable: bool = False
    client_ids: Tuple[int, ...] = ()
    description: str = ""
    group_ids: Tuple[int, ...] = ()
    grouped: bool = False
    hide_amounts: bool = False
    max_duration_seconds: int = 0
    min_duration_seconds: int = 0
    order_by: str = ""
    order_dir: str = ""
    project_ids: Tuple[int, ...] = ()
    rounding: int = 0
    rounding_minutes: int = 0
    tag_ids: Tuple[int, ...] = ()
    task_ids: Tuple[int, ...] = ()
    time_entry_ids: Tuple[int, ...] = ()
    user_ids: Tuple[int, ...] = ()

    @classmethod
    def for_month(cls, year: int, month: int, page_size: int = MONTHLY_PAGE_SIZE) -> "SearchCriteria":
        """Criteria covering the first to the last day of a month."""
        start, end = get_month_range(year, month)
        return cls(start_date=start.isoformat(), end_date=end.isoformat(), page_size=page_size)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body, omitting zero-valued filters."""
        payload = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if not value:
                continue
            payload[f.name] = list(value) if isinstance(value, tuple) else value
        return payload


@dataclass(frozen=True)
class TimeEntryGroup:
    """All time entries that share one set of tags."""
    tag_ids: Tuple[int, ...]
    time_entries: Tuple[Tuple[str, int], ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeEntryGroup":
        """Build a group from one element of the search response.

        Raises:
            DecodeError: If a required field is missing or has the wrong type
        """
        try:
            tag_ids = tuple(_json_int(tid, "tag_ids") for tid in (data.get("tag_ids") or []))
            entries = tuple(
                (str(e["start"]), _json_int(e["seconds"], "seconds"))
                for e in (data.get("time_entries") or [])
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"Malformed time entry group: {e!r}") from e
        return cls(tag_ids=tag_ids, time_entries=entries)


@dataclass(frozen=True)
class Tag:
    """A workspace tag."""
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tag":
        try:
            return cls(id=_json_int(data["id"], "id"), name=str(data["name"]))
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"Malformed tag: {e!r}") from e


def tag_name_map(tags: Iterable[Tag]) -> Dict[int, str]:
    """Map tag IDs to tag names."""
    return {tag.id: tag.name for tag in tags}


def decode_list(data: Any, factory) -> List[Any]:
    """Decode a JSON array of objects with the given factory; null decodes to [].

    Raises:
        DecodeError: If data is not a list of objects
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")
    items = []
    for item in data:
        if not isinstance(item, dict):
            raise DecodeError(f"Expected a JSON object, got {type(item).__name__}")
        items.append(factory(item))
    return items
