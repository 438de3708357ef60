"""
Timestamp parsing for CRM date properties.

HubSpot returns dates either as ISO-8601 strings (with a trailing "Z") or as
epoch milliseconds, depending on the property and API version.
"""

from datetime import datetime, timezone
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a CRM date, returning None when missing or unparsable."""
    if value is None:
        return None

    value = str(value).strip()
    if not value:
        return None

    if value.isdigit():
        try:
            return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
