"""Exceptions raised by togglreport.

Every error is terminal for a run: nothing is retried, and the CLI turns any
ReportError into a logged message and a non-zero exit code.
"""
from typing import Optional


class ReportError(Exception):
    """Base class for all errors that abort a report run."""


class ArgumentFormatError(ReportError):
    """The month argument is not of the form YYYY-MM."""


class EnvironmentConfigError(ReportError):
    """The environment file or a required variable is missing."""


class TransportError(ReportError):
    """The HTTP request could not be sent or no response was received."""


class HTTPStatusError(ReportError):
    """The API answered with a non-success status code."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ReportError):
    """The API response body is not the JSON shape we expect."""


class TimestampParseError(ReportError):
    """A time entry start is not a valid RFC 3339 timestamp."""
