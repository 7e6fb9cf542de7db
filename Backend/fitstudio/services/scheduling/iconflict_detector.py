from __future__ import annotations

from typing import Protocol

from fitstudio.schemas.scheduling import SessionBooking, SessionConflict


class IConflictDetector(Protocol):
    def detect_booking_conflicts(
        self,
        *,
        candidate: SessionBooking,
        existing: list[SessionBooking],
        buffer_minutes: int | None = None,
    ) -> list[SessionConflict]:
        ...
