from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceSnapshot, ClockInRequest


class AttendanceRepository(Protocol):
    def get_current_status(self) -> Optional[AttendanceSnapshot]:
        """Today's record for the authenticated employee, None when there is none."""

        raise NotImplementedError

    def clock_in(self, request: ClockInRequest) -> str:
        raise NotImplementedError

    def clock_out(self) -> str:
        raise NotImplementedError
