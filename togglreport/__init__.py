"""
togglreport: print a per-day tag report of Toggl Track time entries for one month.

- Fetches time entries and tags from the Toggl Track API
- Groups tracked seconds by calendar day (Asia/Tokyo) and tag
- Skips weekends and Japanese public holidays
- Can be used as a CLI (via `python -m togglreport` or `togglreport` if installed as a package)
"""

__version__ = "0.1.0"
