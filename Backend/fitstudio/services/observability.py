from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fitstudio.core.logging import log


def log_invalid_instant(*, operation: str, value: Any):
    log.debug(
        "invalid_instant",
        operation=operation,
        value=repr(value),
        logged_at=datetime.now(timezone.utc).isoformat(),
    )


def record_conflict_check(*, candidate_id: str | None, checked: int, conflicts: int, buffer_minutes: int):
    log.info(
        "booking_conflict_check",
        candidate_id=candidate_id,
        checked=checked,
        conflicts=conflicts,
        buffer_minutes=buffer_minutes,
        logged_at=datetime.now(timezone.utc).isoformat(),
    )
