from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MIN_MINUTES = 15
DEFAULT_MAX_MINUTES = 480


@dataclass(frozen=True)
class SessionDuration:
    """Validated session length in minutes."""

    minutes: int
    min_minutes: int = DEFAULT_MIN_MINUTES
    max_minutes: int = DEFAULT_MAX_MINUTES

    def __post_init__(self) -> None:
        if self.minutes < self.min_minutes:
            raise ValueError(f"Duration must be at least {self.min_minutes} minutes")
        if self.minutes > self.max_minutes:
            hours, rest = divmod(self.max_minutes, 60)
            limit = f"{hours} hours" if hours and not rest else f"{self.max_minutes} minutes"
            raise ValueError(f"Duration cannot exceed {limit}")

    def __int__(self) -> int:
        return self.minutes
