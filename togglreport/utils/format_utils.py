"""Formatting utility functions for togglreport."""


def format_seconds(seconds: int) -> str:
    """Format seconds as HH:MM:SS.

    Minutes and hours are derived by integer division, so partial minutes are
    truncated rather than rounded. Hours are not wrapped at 24.

    Args:
        seconds: Number of seconds

    Returns:
        Formatted time string
    """
    h, m = divmod(seconds, 3600)
    m, s = divmod(m, 60)
    return f"{h:02}:{m:02}:{s:02}"
