from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_dashboard.attendance.model import AttendanceSnapshot
from fakes import Clock


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> Clock:
    return Clock(fixed_now)


@pytest.fixture
def open_snapshot() -> AttendanceSnapshot:
    return AttendanceSnapshot(
        employee_id=7,
        work_date=date(2024, 3, 15),
        clock_in_time=datetime(2024, 3, 15, 9, 0).time(),
        clock_out_time=None,
    )
