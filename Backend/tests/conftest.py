from __future__ import annotations

import os
from datetime import datetime, timezone

import pytest

# IMPORTANT:
# Set env BEFORE importing fitstudio (settings are read at import time)
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DEFAULT_TIMEZONE", "UTC")


@pytest.fixture(scope="session")
def policy():
    from fitstudio.services.scheduling.policy import SchedulingPolicy

    return SchedulingPolicy()


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_booking():
    from fitstudio.schemas.scheduling import SessionBooking

    def _mk(start, duration_minutes: int = 60, **kwargs):
        return SessionBooking(start=start, duration_minutes=duration_minutes, **kwargs)

    return _mk
