"""Toggl Track API access for togglreport."""

from .client import TogglClient

__all__ = ['TogglClient']
