from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class TimeInterval:
    """A half-open range [start, start + duration) built ad hoc for a calculation."""

    start: datetime
    duration_minutes: int

    def __post_init__(self) -> None:
        if self.start.tzinfo is None:
            object.__setattr__(self, "start", self.start.replace(tzinfo=timezone.utc))
        else:
            object.__setattr__(self, "start", self.start.astimezone(timezone.utc))

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration_minutes)

    def padded(self, buffer_minutes: int) -> "TimeInterval":
        return TimeInterval(self.start, self.duration_minutes + buffer_minutes)

    def overlaps(self, other: "TimeInterval", buffer_minutes: int = 0) -> bool:
        # touching intervals do not overlap
        mine = self.padded(buffer_minutes)
        theirs = other.padded(buffer_minutes)
        return mine.start < theirs.end and theirs.start < mine.end
