"""Utility helper functions."""

from wpblog.utils.helpers import get_summary, host, strip_html, today_str

__all__ = [
    "get_summary",
    "host",
    "strip_html",
    "today_str",
]
