from datetime import date, datetime, time

import pytest

from attendance_dashboard.attendance.model import AttendanceSession, AttendanceSnapshot
from attendance_dashboard.core.enums import SessionState
from attendance_dashboard.core.exceptions import BackendError


def test_from_payload_open_session():
    snapshot = AttendanceSnapshot.from_payload(
        {"employee": {"empId": "7"}, "date": "2024-03-15", "clockInTime": "09:00:00", "clockOutTime": None}
    )

    assert snapshot.employee_id == 7
    assert snapshot.work_date == date(2024, 3, 15)
    assert snapshot.clock_in_time == time(9, 0)
    assert snapshot.has_open_session
    assert snapshot.clock_in_at() == datetime(2024, 3, 15, 9, 0)
    assert snapshot.clock_out_at() is None


def test_from_payload_closed_session():
    snapshot = AttendanceSnapshot.from_payload(
        {"employee": {"empId": 7}, "date": "2024-03-15T00:00:00", "clockInTime": "09:00", "clockOutTime": "17:45:10"}
    )

    assert not snapshot.has_open_session
    assert snapshot.clock_out_at() == datetime(2024, 3, 15, 17, 45, 10)


def test_from_payload_without_clock_in():
    snapshot = AttendanceSnapshot.from_payload({"date": "2024-03-15"})

    assert snapshot.employee_id is None
    assert not snapshot.has_open_session


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2024-03-15", "clockInTime": "nine o'clock"},
        {"date": "15/03/2024", "clockInTime": "09:00:00"},
        {"clockInTime": "09:00:00"},
        {"employee": {"empId": "abc"}, "date": "2024-03-15"},
    ],
)
def test_from_payload_rejects_malformed_status(payload):
    with pytest.raises(BackendError, match="Malformed attendance status"):
        AttendanceSnapshot.from_payload(payload)


def test_session_status_is_derived():
    session = AttendanceSession(employee_id=7)
    assert session.status == SessionState.CLOCKED_OUT

    session.clock_in_instant = datetime(2024, 3, 15, 9, 0)
    assert session.status == SessionState.CLOCKED_IN

    session.clock_out_instant = datetime(2024, 3, 15, 17, 0)
    assert session.status == SessionState.CLOCKED_OUT
