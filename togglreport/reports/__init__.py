"""Report modules for togglreport."""

from .models import SearchCriteria, TimeEntryGroup, Tag, tag_name_map
from .aggregator import aggregate, parse_timestamp
from .report_generator import ReportGenerator, render

__all__ = [
    'SearchCriteria', 'TimeEntryGroup', 'Tag', 'tag_name_map',
    'aggregate', 'parse_timestamp',
    'ReportGenerator', 'render'
]
