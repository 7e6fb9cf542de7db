from __future__ import annotations

from fitstudio.domain.value_objects.session import ConflictType
from fitstudio.schemas.scheduling import SessionBooking, SessionConflict
from fitstudio.services.observability import record_conflict_check
from fitstudio.services.scheduling.iconflict_detector import IConflictDetector
from fitstudio.services.scheduling.policy import SchedulingPolicy, resolve_policy
from fitstudio.services.session_utils import format_duration, intervals_overlap, parse_instant


class ConflictDetector(IConflictDetector):
    def __init__(self, policy: SchedulingPolicy | None = None) -> None:
        self._policy = resolve_policy(policy)

    def detect_booking_conflicts(
        self,
        *,
        candidate: SessionBooking,
        existing: list[SessionBooking],
        buffer_minutes: int | None = None,
    ) -> list[SessionConflict]:
        buffer = self._policy.buffer_minutes if buffer_minutes is None else buffer_minutes
        conflicts: list[SessionConflict] = []
        for booking in existing:
            if booking.session_id == candidate.session_id:
                continue
            if not booking.status.blocks_calendar:
                continue
            if not intervals_overlap(
                candidate.start,
                candidate.duration_minutes,
                booking.start,
                booking.duration_minutes,
                buffer,
                policy=self._policy,
            ):
                continue
            conflicts.append(
                SessionConflict(
                    session_id=booking.session_id,
                    reason=ConflictType.TRAINER_UNAVAILABLE,
                    severity="error",
                    details=self._describe(booking, buffer),
                )
            )

        record_conflict_check(
            candidate_id=str(candidate.session_id),
            checked=len(existing),
            conflicts=len(conflicts),
            buffer_minutes=buffer,
        )
        return conflicts

    def _describe(self, booking: SessionBooking, buffer: int) -> str:
        start_at = parse_instant(booking.start, self._policy)
        label = booking.title or str(booking.session_id)
        details = f"Overlaps with session {label}"
        if start_at is not None:
            details += f" at {start_at:%Y-%m-%d %H:%M} UTC ({format_duration(booking.duration_minutes)})"
        if buffer:
            details += f" within a {format_duration(buffer)} buffer"
        return details
