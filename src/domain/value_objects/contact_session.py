"""
Contact session value object.
"""

import time
from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects.identification_method import IdentificationMethod

MILLISECONDS_PER_DAY = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class ContactSession:
    """Identification remembered between visits."""

    method: IdentificationMethod
    value: str
    timestamp: int  # epoch milliseconds

    def __post_init__(self):
        """Validate session fields."""
        if not self.value or not self.value.strip():
            raise ValueError("Session value is required")

    @classmethod
    def start(
        cls, method: IdentificationMethod, value: str, now_ms: Optional[int] = None
    ) -> "ContactSession":
        """Create a session stamped with the current time."""
        return cls(
            method=IdentificationMethod(method),
            value=value,
            timestamp=now_ms if now_ms is not None else int(time.time() * 1000),
        )

    def is_expired(self, now_ms: int, max_age_days: int = 30) -> bool:
        """Check if the session is older than the allowed age."""
        return self.timestamp < now_ms - max_age_days * MILLISECONDS_PER_DAY

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "method": self.method.value,
            "value": self.value,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContactSession":
        """Build a session from its stored form."""
        return cls(
            method=IdentificationMethod(data["method"]),
            value=data["value"],
            timestamp=int(data["timestamp"]),
        )
