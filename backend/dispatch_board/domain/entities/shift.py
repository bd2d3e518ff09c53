"""Domain entity for dispatcher work shifts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Shift:
    """A named working shift. Times are ``HH:mm`` strings and may wrap midnight."""

    id: str
    name: str
    start_time: str
    end_time: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def label(self) -> str:
        """Display label, e.g. ``Ca 1 (06:00 - 14:00)``."""
        return f"{self.name} ({self.start_time} - {self.end_time})"
