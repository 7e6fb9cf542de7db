from __future__ import annotations

from typing import NamedTuple


class TimeSlot(NamedTuple):
    """Bookable calendar slot shown in time pickers."""

    label: str
    hour: int
    minute: int

    @classmethod
    def at(cls, hour: int, minute: int) -> "TimeSlot":
        return cls(label=f"{hour:02d}:{minute:02d}", hour=hour, minute=minute)
