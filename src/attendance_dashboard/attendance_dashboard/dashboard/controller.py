from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Union

from ..attendance.machine import AttendanceSessionMachine
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_clock, now_local
from ..common.validators import restrict_year
from ..core.constants import DEFAULT_GEOLOCATION_TIMEOUT_SECONDS, TICK_SECONDS
from ..core.enums import Role, SessionState, Severity
from ..core.exceptions import (
    AlreadyClockedInError,
    AuthorizationError,
    BackendError,
    DateOutOfWindowError,
    GeolocationError,
    GeolocationUnsupportedError,
    InvalidStateError,
    ValidationError,
)
from ..geolocation.source import GeolocationSource
from ..notifications.notifier import Notifier
from ..regularization.repository import RegularizationRepository
from ..regularization.service import RegularizationService
from ..regularization.validator import regularization_window
from ..users.model import CurrentUser

logger = logging.getLogger(__name__)


class DashboardController:
    """Attendance widgets shared by every role dashboard.

    Each instance owns its own session machine, so two dashboards never share
    state. Operations report their outcome through the notifier and return a
    success flag; domain failures never escape to the caller.
    """

    title = "Dashboard"
    allowed_roles: frozenset[Role] = frozenset(Role)

    def __init__(
        self,
        *,
        attendance: AttendanceRepository,
        regularizations: RegularizationRepository,
        geolocation: Optional[GeolocationSource],
        notifier: Notifier,
        current_user: Optional[CurrentUser] = None,
        now: Callable[[], datetime] = now_local,
        tick_period: float = TICK_SECONDS,
        geolocation_timeout: float = DEFAULT_GEOLOCATION_TIMEOUT_SECONDS,
        on_elapsed: Optional[Callable[[str], None]] = None,
    ):
        self._notifier = notifier
        self._now = now
        self.current_user = current_user
        self.username = current_user.username if current_user else ""
        self.machine = AttendanceSessionMachine(
            attendance,
            geolocation,
            employee_id=current_user.employee_id if current_user else None,
            now=now,
            tick_period=tick_period,
            geolocation_timeout=geolocation_timeout,
            on_elapsed=on_elapsed,
        )
        self.regularization = RegularizationService(regularizations, now=now)

    async def __aenter__(self) -> "DashboardController":
        await self.activate()
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    # ----- view lifecycle -----

    async def activate(self) -> SessionState:
        """Resume today's session before any user action is possible."""
        if self.current_user is not None and self.current_user.role not in self.allowed_roles:
            raise AuthorizationError(f"{self.title} is not available for role {self.current_user.role.value}")

        try:
            await self.machine.refresh()
        except BackendError as exc:
            # Dashboard stays usable as clocked out.
            logger.warning("Failed to fetch attendance status: %s", exc)
        return self.machine.state

    def close(self) -> None:
        self.machine.dispose()

    # ----- view state -----

    @property
    def state(self) -> SessionState:
        return self.machine.state

    @property
    def elapsed_display(self) -> str:
        return self.machine.elapsed_display

    @property
    def can_clock_in(self) -> bool:
        return self._can_act() and self.state == SessionState.CLOCKED_OUT

    @property
    def can_clock_out(self) -> bool:
        return self._can_act() and self.state == SessionState.CLOCKED_IN

    def _can_act(self) -> bool:
        machine = self.machine
        return not (machine.is_disposed or machine.is_busy or machine.is_loading)

    @property
    def regularization_window(self) -> tuple[str, str]:
        start, end = regularization_window(self.regularization.today())
        return start.strftime("%Y-%m-%d"), end.strftime("%Y-%m-%d")

    @staticmethod
    def restrict_year(value: Optional[str]) -> str:
        return restrict_year(value)

    # ----- user actions -----

    async def clock_in(self, work_from: Optional[str], mode: Optional[str]) -> bool:
        try:
            event = await self.machine.clock_in(work_from, mode)
        except InvalidStateError as e:
            self._notify(Severity.WARN, "Action Not Allowed", str(e))
            return False
        except ValidationError as e:
            self._notify(Severity.WARN, "Form Invalid", str(e))
            return False
        except GeolocationUnsupportedError as e:
            self._notify(Severity.ERROR, "Geolocation Not Supported", str(e))
            return False
        except GeolocationError as e:
            self._notify(Severity.ERROR, "Location Error", str(e))
            return False
        except AlreadyClockedInError:
            self._notify(Severity.ERROR, "Clock-in Failed", "You cannot clock in again today.")
            return False
        except BackendError as e:
            self._notify(Severity.ERROR, "Error", e.message)
            return False

        if event is None:
            return False
        self._notify(
            Severity.SUCCESS,
            "Clock-in Successful",
            f"{event.message} at {format_clock(event.at)}. Have a great day!",
        )
        return True

    async def clock_out(self) -> bool:
        try:
            event = await self.machine.clock_out()
        except InvalidStateError as e:
            self._notify(Severity.WARN, "Action Not Allowed", str(e))
            return False
        except BackendError as e:
            self._notify(Severity.ERROR, "Error", e.message or "Clock-out failed")
            return False

        if event is None:
            return False
        self._notify(
            Severity.SUCCESS,
            "Clock-out Successful",
            f"{event.message or 'You clocked out'} at {format_clock(event.at)}. Have a nice day!",
        )
        return True

    async def submit_regularization(self, work_date: Union[date, str, None], reason: Optional[str]) -> bool:
        try:
            receipt = await self.regularization.submit(work_date, reason)
        except DateOutOfWindowError as e:
            self._notify(Severity.ERROR, "Invalid Date", str(e))
            return False
        except ValidationError as e:
            self._notify(Severity.WARN, "Form Invalid", str(e))
            return False
        except BackendError as e:
            self._notify(Severity.ERROR, "Request Failed", e.message)
            return False

        requested_on = receipt.request.work_date.strftime("%Y-%m-%d")
        self._notify(
            Severity.SUCCESS,
            "Regularization Submitted",
            f"{receipt.message or 'Request submitted'} on {requested_on} at {format_clock(self._now())}.",
        )
        return True

    def _notify(self, severity: Severity, summary: str, detail: str) -> None:
        self._notifier.notify(severity, summary, detail)


class ManagerDashboardController(DashboardController):
    title = "Manager Dashboard"
    allowed_roles = frozenset({Role.MANAGER})


class FinanceDashboardController(DashboardController):
    title = "Finance Dashboard"
    allowed_roles = frozenset({Role.FINANCE})


DASHBOARDS: dict[str, type[DashboardController]] = {
    "manager": ManagerDashboardController,
    "finance": FinanceDashboardController,
}
