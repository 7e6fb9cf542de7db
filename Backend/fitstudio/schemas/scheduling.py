from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from fitstudio.domain.value_objects.session import ConflictType, SessionStatus


class DurationValidation(BaseModel):
    valid: bool
    error: str | None = None


class DurationOption(BaseModel):
    value: int = Field(gt=0)
    label: str


class SessionBooking(BaseModel):
    """A booking as the calendar view hands it over: raw start, length and persisted status."""

    session_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str | None = None
    start: datetime | date | str
    duration_minutes: int
    status: SessionStatus = SessionStatus.SCHEDULED


class SessionConflict(BaseModel):
    session_id: uuid.UUID
    reason: ConflictType = ConflictType.TRAINER_UNAVAILABLE
    severity: Literal["info", "warning", "error"] = "error"
    details: str | None = None
