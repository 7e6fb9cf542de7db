from __future__ import annotations

from dataclasses import dataclass, field

from fitstudio.core.config import Settings, settings


@dataclass(frozen=True)
class SchedulingPolicy:
    """Immutable snapshot of the scheduling knobs, passed explicitly to the helpers."""

    timezone_name: str = "UTC"
    min_duration_minutes: int = 15
    max_duration_minutes: int = 480
    default_duration_minutes: int = 60
    status_window_minutes: int = 60
    slot_start_hour: int = 9
    slot_end_hour: int = 21
    slot_interval_minutes: int = 30
    buffer_minutes: int = 0
    duration_options: tuple[int, ...] = field(default=(15, 30, 45, 60, 75, 90, 120, 150, 180))

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "SchedulingPolicy":
        source = source or settings
        return cls(
            timezone_name=source.DEFAULT_TIMEZONE,
            min_duration_minutes=source.SESSION_MIN_DURATION_MINUTES,
            max_duration_minutes=source.SESSION_MAX_DURATION_MINUTES,
            default_duration_minutes=source.SESSION_DEFAULT_DURATION_MINUTES,
            status_window_minutes=source.SESSION_STATUS_WINDOW_MINUTES,
            slot_start_hour=source.SLOT_START_HOUR,
            slot_end_hour=source.SLOT_END_HOUR,
            slot_interval_minutes=source.SLOT_INTERVAL_MINUTES,
            buffer_minutes=source.BOOKING_BUFFER_MINUTES,
            duration_options=tuple(source.DURATION_OPTIONS),
        )


def resolve_policy(policy: SchedulingPolicy | None) -> SchedulingPolicy:
    return policy if policy is not None else SchedulingPolicy.from_settings()
