"""Session time arithmetic used by booking forms, calendars and dashboards.

Everything here is a pure function over its arguments. Invalid temporal input
never raises: the UI-facing helpers collapse it to a sentinel (empty string,
``completed``, empty list, ``False``) so rendering code can show a fallback.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Any
from zoneinfo import ZoneInfo

from fitstudio.domain.value_objects.session import SESSION_TYPE_DURATIONS, DisplayStatus, SessionType
from fitstudio.domain.value_objects.session_duration import SessionDuration
from fitstudio.domain.value_objects.time_interval import TimeInterval
from fitstudio.domain.value_objects.time_slot import TimeSlot
from fitstudio.schemas.scheduling import DurationOption, DurationValidation
from fitstudio.services.observability import log_invalid_instant
from fitstudio.services.scheduling.policy import SchedulingPolicy, resolve_policy

EMPTY_INSTANT = ""

_TIME_ONLY_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2}(\.\d+)?)?$")


def normalize_timezone(value: datetime | None, policy: SchedulingPolicy | None = None) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        zone = ZoneInfo(resolve_policy(policy).timezone_name)
        value = value.replace(tzinfo=zone)
    return value.astimezone(timezone.utc)


def parse_instant(value: Any, policy: SchedulingPolicy | None = None, *, today: date | None = None) -> datetime | None:
    """Turn a datetime, date or ISO-8601 string into an aware UTC datetime.

    Bare ``HH:MM`` strings are placed on ``today`` (default: the current date in the configured zone).
    Returns ``None`` for anything that cannot be read as an instant.
    """
    policy = resolve_policy(policy)
    try:
        if isinstance(value, datetime):
            return normalize_timezone(value, policy)
        if isinstance(value, date):
            return normalize_timezone(datetime.combine(value, time()), policy)
    except OverflowError:
        return None
    if not isinstance(value, str):
        return None

    raw = value.strip()
    if not raw:
        return None
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return normalize_timezone(datetime.fromisoformat(raw), policy)
    except (ValueError, OverflowError):
        pass

    if not _TIME_ONLY_RE.match(raw):
        return None
    try:
        clock = time.fromisoformat(raw if raw.index(":") == 2 else f"0{raw}")
    except ValueError:
        return None
    zone = ZoneInfo(policy.timezone_name)
    anchor = today if today is not None else _today(policy)
    return datetime.combine(anchor, clock, tzinfo=zone).astimezone(timezone.utc)


def _today(policy: SchedulingPolicy) -> date:
    return datetime.now(ZoneInfo(policy.timezone_name)).date()


def is_valid_instant(value: Any, policy: SchedulingPolicy | None = None) -> bool:
    return parse_instant(value, policy) is not None


def _parse_or_log(
    value: Any, operation: str, policy: SchedulingPolicy, today: date | None = None
) -> datetime | None:
    parsed = parse_instant(value, policy, today=today)
    if parsed is None:
        log_invalid_instant(operation=operation, value=value)
    return parsed


def _to_iso_z(value: datetime) -> str:
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def session_end_at(
    start: Any, duration_minutes: int, policy: SchedulingPolicy | None = None
) -> datetime | None:
    policy = resolve_policy(policy)
    start_at = _parse_or_log(start, "session_end_at", policy)
    if start_at is None:
        return None
    try:
        return TimeInterval(start_at, duration_minutes).end
    except OverflowError:
        log_invalid_instant(operation="session_end_at", value=duration_minutes)
        return None


def compute_session_end(start: Any, duration_minutes: int, policy: SchedulingPolicy | None = None) -> str:
    """ISO-8601 UTC end instant (``2024-01-15T11:00:00.000Z``), or ``""`` if start is unreadable."""
    end_at = session_end_at(start, duration_minutes, policy)
    if end_at is None:
        return EMPTY_INSTANT
    return _to_iso_z(end_at)


def intervals_overlap(
    start_a: Any,
    duration_a: int,
    start_b: Any,
    duration_b: int,
    buffer_minutes: int = 0,
    policy: SchedulingPolicy | None = None,
) -> bool:
    policy = resolve_policy(policy)
    # both bare times must land on the same day
    today = _today(policy)
    first = _parse_or_log(start_a, "intervals_overlap", policy, today)
    second = _parse_or_log(start_b, "intervals_overlap", policy, today)
    if first is None or second is None:
        return False
    try:
        return TimeInterval(first, duration_a).overlaps(TimeInterval(second, duration_b), buffer_minutes)
    except OverflowError:
        log_invalid_instant(operation="intervals_overlap", value=(duration_a, duration_b, buffer_minutes))
        return False


def format_duration(minutes: int) -> str:
    """Short label: ``45min``, ``1h``, ``1h 30min``. Negative values keep their sign."""
    if minutes < 0:
        return f"-{format_duration(-minutes)}"
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}min"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}min"


def format_duration_long(minutes: int) -> str:
    if minutes < 0:
        return f"-{format_duration_long(-minutes)}"
    if minutes < 60:
        return f"{minutes} minutes"
    hours, mins = divmod(minutes, 60)
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if mins == 0:
        return hour_text
    return f"{hour_text} {mins} minutes"


def derive_status(
    scheduled: Any,
    assumed_duration_minutes: int | None = None,
    *,
    now: datetime | None = None,
    policy: SchedulingPolicy | None = None,
) -> DisplayStatus:
    """Badge for list views. Authoritative status lives on the session record."""
    policy = resolve_policy(policy)
    scheduled_at = _parse_or_log(scheduled, "derive_status", policy)
    if scheduled_at is None:
        return DisplayStatus.COMPLETED

    window = policy.status_window_minutes if assumed_duration_minutes is None else assumed_duration_minutes
    current = normalize_timezone(now, policy)
    try:
        ends_at = TimeInterval(scheduled_at, window).end
    except OverflowError:
        return DisplayStatus.COMPLETED

    if current < scheduled_at:
        return DisplayStatus.UPCOMING
    if current <= ends_at:
        return DisplayStatus.IN_PROGRESS
    return DisplayStatus.COMPLETED


def generate_time_slots(
    start_hour: int | None = None,
    end_hour: int | None = None,
    interval_minutes: int | None = None,
    *,
    policy: SchedulingPolicy | None = None,
) -> list[TimeSlot]:
    policy = resolve_policy(policy)
    start_hour = policy.slot_start_hour if start_hour is None else start_hour
    end_hour = policy.slot_end_hour if end_hour is None else end_hour
    interval_minutes = policy.slot_interval_minutes if interval_minutes is None else interval_minutes

    # a non-positive step would never leave the minute loop
    if interval_minutes <= 0 or start_hour >= end_hour:
        return []
    if start_hour < 0 or end_hour > 24:
        return []

    return [
        TimeSlot.at(hour, minute)
        for hour in range(start_hour, end_hour)
        for minute in range(0, 60, interval_minutes)
    ]


def time_slot_labels(
    start_hour: int | None = None,
    end_hour: int | None = None,
    interval_minutes: int | None = None,
    *,
    policy: SchedulingPolicy | None = None,
) -> list[str]:
    return [slot.label for slot in generate_time_slots(start_hour, end_hour, interval_minutes, policy=policy)]


def default_duration_for_type(session_type: SessionType | str | None, policy: SchedulingPolicy | None = None) -> int:
    policy = resolve_policy(policy)
    if session_type is None:
        return policy.default_duration_minutes
    try:
        return SESSION_TYPE_DURATIONS[SessionType(session_type)]
    except ValueError:
        return policy.default_duration_minutes


def duration_between(start: Any, end: Any, policy: SchedulingPolicy | None = None) -> int:
    """Minutes between two instants, rounded half up and never below the minimum session length."""
    policy = resolve_policy(policy)
    if start is None or end is None:
        return policy.default_duration_minutes
    today = _today(policy)
    start_at = _parse_or_log(start, "duration_between", policy, today)
    end_at = _parse_or_log(end, "duration_between", policy, today)
    if start_at is None or end_at is None:
        return policy.default_duration_minutes

    minutes = math.floor((end_at - start_at).total_seconds() / 60 + 0.5)
    return max(minutes, policy.min_duration_minutes)


def days_between(start: Any, end: Any, policy: SchedulingPolicy | None = None) -> int:
    policy = resolve_policy(policy)
    today = _today(policy)
    start_at = _parse_or_log(start, "days_between", policy, today)
    end_at = _parse_or_log(end, "days_between", policy, today)
    if start_at is None or end_at is None:
        return 0
    return math.ceil(abs(end_at - start_at) / timedelta(days=1))


def validate_session_duration(minutes: int, policy: SchedulingPolicy | None = None) -> DurationValidation:
    policy = resolve_policy(policy)
    try:
        SessionDuration(minutes, min_minutes=policy.min_duration_minutes, max_minutes=policy.max_duration_minutes)
    except ValueError as exc:
        return DurationValidation(valid=False, error=str(exc))
    return DurationValidation(valid=True)


def available_duration_options(policy: SchedulingPolicy | None = None) -> list[DurationOption]:
    policy = resolve_policy(policy)
    return [DurationOption(value=minutes, label=format_duration_long(minutes)) for minutes in policy.duration_options]
