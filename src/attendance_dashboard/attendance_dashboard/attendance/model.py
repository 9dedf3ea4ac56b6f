from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Optional

from ..core.enums import SessionState
from ..core.exceptions import BackendError


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Backend's current-day attendance record for the signed-in employee."""

    employee_id: Optional[int]
    work_date: Optional[date]
    clock_in_time: Optional[time]
    clock_out_time: Optional[time]

    @property
    def has_open_session(self) -> bool:
        return self.clock_in_at() is not None and self.clock_out_time is None

    def clock_in_at(self) -> Optional[datetime]:
        if self.clock_in_time is None or self.work_date is None:
            return None
        return datetime.combine(self.work_date, self.clock_in_time)

    def clock_out_at(self) -> Optional[datetime]:
        if self.clock_out_time is None or self.work_date is None:
            return None
        return datetime.combine(self.work_date, self.clock_out_time)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AttendanceSnapshot":
        """Build from `{employee: {empId}, date, clockInTime?, clockOutTime?}`."""
        try:
            employee = payload.get("employee") or {}
            emp_id = employee.get("empId") if isinstance(employee, dict) else None
            raw_date = payload.get("date")
            work_date = date.fromisoformat(str(raw_date)[:10]) if raw_date else None
            clock_in = _parse_time(payload.get("clockInTime"))
            clock_out = _parse_time(payload.get("clockOutTime"))
            employee_id = int(emp_id) if emp_id not in (None, "") else None
        except (TypeError, ValueError) as exc:
            raise BackendError("Malformed attendance status") from exc

        if clock_in is not None and work_date is None:
            raise BackendError("Malformed attendance status")

        return cls(
            employee_id=employee_id,
            work_date=work_date,
            clock_in_time=clock_in,
            clock_out_time=clock_out,
        )


def _parse_time(value: Any) -> Optional[time]:
    if value in (None, ""):
        return None
    return time.fromisoformat(str(value))


@dataclass
class AttendanceSession:
    """One employee's work interval for today, rebuilt on every activation."""

    employee_id: Optional[int] = None
    clock_in_instant: Optional[datetime] = None
    clock_out_instant: Optional[datetime] = None

    @property
    def status(self) -> SessionState:
        if self.clock_out_instant is not None or self.clock_in_instant is None:
            return SessionState.CLOCKED_OUT
        return SessionState.CLOCKED_IN


@dataclass(frozen=True)
class ClockInRequest:
    work_from: str
    mode: str
    latitude: float
    longitude: float

    def to_payload(self) -> dict[str, Any]:
        return {
            "workFrom": self.work_from,
            "mode": self.mode,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class ClockEvent:
    """Confirmed clock-in/out: backend message plus the local instant."""

    message: str
    at: datetime
