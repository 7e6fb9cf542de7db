from __future__ import annotations

from enum import Enum


class DisplayStatus(str, Enum):
    """Cosmetic badge derived from the clock. Never stored."""

    UPCOMING = "upcoming"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class SessionStatus(str, Enum):
    """Lifecycle status persisted on a training session record."""

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"
    RESCHEDULED = "rescheduled"

    @property
    def blocks_calendar(self) -> bool:
        return self not in {SessionStatus.CANCELLED, SessionStatus.NO_SHOW, SessionStatus.RESCHEDULED}


class SessionType(str, Enum):
    PERSONAL = "personal"
    GROUP = "group"
    CLASS = "class"
    ASSESSMENT = "assessment"
    CONSULTATION = "consultation"
    REHABILITATION = "rehabilitation"


SESSION_TYPE_DURATIONS: dict[SessionType, int] = {
    SessionType.CONSULTATION: 45,
    SessionType.ASSESSMENT: 60,
    SessionType.PERSONAL: 60,
    SessionType.GROUP: 75,
    SessionType.CLASS: 90,
    SessionType.REHABILITATION: 60,
}


class ConflictType(str, Enum):
    TRAINER_UNAVAILABLE = "trainer_unavailable"
    MEMBER_BOOKED = "member_booked"
    ROOM_OCCUPIED = "room_occupied"
    EQUIPMENT_UNAVAILABLE = "equipment_unavailable"
