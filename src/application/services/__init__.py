"""
Application services package.
"""

from .html_sanitizer import sanitize_message_html
from .ticket_content import build_admin_note_html, description_to_html
from .timestamps import parse_timestamp

__all__ = [
    "build_admin_note_html",
    "description_to_html",
    "parse_timestamp",
    "sanitize_message_html",
]
