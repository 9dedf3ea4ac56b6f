from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import ALREADY_CLOCKED_IN_MARKER, DEFAULT_GEOLOCATION_TIMEOUT_SECONDS, TICK_SECONDS
from ..core.enums import SessionState
from ..core.exceptions import (
    AlreadyClockedInError,
    BackendError,
    GeolocationUnsupportedError,
    InvalidStateError,
    ValidationError,
)
from ..geolocation.source import GeolocationSource, acquire_position
from .model import AttendanceSession, AttendanceSnapshot, ClockEvent, ClockInRequest
from .repository import AttendanceRepository
from .ticker import ElapsedTimeTicker

logger = logging.getLogger(__name__)


def is_already_clocked_in(message: Optional[str]) -> bool:
    # TODO: switch to a structured error code once the backend returns one.
    return ALREADY_CLOCKED_IN_MARKER in (message or "").lower()


class AttendanceSessionMachine:
    """Client-side clock-in/out state for one dashboard view.

    States: UNKNOWN -> CLOCKED_OUT <-> CLOCKED_IN. The status is advisory: the
    backend decides whether a clock-in/out is really allowed, and local state
    only changes after the backend confirmed a transition.

    Must be driven from a running event loop. Repository calls are blocking
    and run through `asyncio.to_thread`; their results are applied back on
    the loop. A result that arrives after `dispose()`, or after a newer
    transition, is dropped.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        geolocation: Optional[GeolocationSource],
        *,
        employee_id: Optional[int] = None,
        now: Callable[[], datetime] = now_local,
        tick_period: float = TICK_SECONDS,
        geolocation_timeout: float = DEFAULT_GEOLOCATION_TIMEOUT_SECONDS,
        on_elapsed: Optional[Callable[[str], None]] = None,
    ):
        self._attendance = attendance
        self._geolocation = geolocation
        self._now = now
        self._geolocation_timeout = float(geolocation_timeout)
        self._on_elapsed = on_elapsed
        self._ticker = ElapsedTimeTicker(self._publish_elapsed, now=now, period=tick_period)

        self.session = AttendanceSession(employee_id=employee_id)
        self._resolved = False
        self._disposed = False
        self._epoch = 0
        self._clock_in_pending = False
        self._clock_out_pending = False
        self._refreshing = False

    @property
    def state(self) -> SessionState:
        if not self._resolved:
            return SessionState.UNKNOWN
        return self.session.status

    @property
    def elapsed_display(self) -> str:
        return self._ticker.display

    @property
    def ticker(self) -> ElapsedTimeTicker:
        return self._ticker

    @property
    def ticker_running(self) -> bool:
        return self._ticker.is_running

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_busy(self) -> bool:
        return self._clock_in_pending or self._clock_out_pending

    @property
    def is_loading(self) -> bool:
        return self._refreshing or self.state == SessionState.UNKNOWN

    def resume(self, snapshot: Optional[AttendanceSnapshot]) -> SessionState:
        """Rebuild state from the backend's current-day record.

        Ignored while a clock-in/out is in flight.
        """
        if self._disposed or self.is_busy:
            return self.state

        self._epoch += 1
        self._resolved = True
        if snapshot is not None and snapshot.employee_id is not None:
            self.session.employee_id = snapshot.employee_id

        if snapshot is not None and snapshot.has_open_session:
            started_at = snapshot.clock_in_at()
            self.session.clock_in_instant = started_at
            self.session.clock_out_instant = None
            self._ticker.start(started_at)
            logger.info("Resumed open session for employee %s since %s", self.session.employee_id, started_at)
        else:
            self.session.clock_in_instant = snapshot.clock_in_at() if snapshot else None
            self.session.clock_out_instant = snapshot.clock_out_at() if snapshot else None
            self._ticker.reset()
        return self.state

    async def refresh(self) -> SessionState:
        """Fetch today's record and resume from it.

        On failure an unresolved machine assumes CLOCKED_OUT, a resolved one
        keeps its state; the error is re-raised either way. Skipped while a
        clock-in/out is in flight, whose result is newer than any snapshot.
        """
        if self.is_busy:
            logger.debug("Clock-in/out in flight; status refresh skipped")
            return self.state

        epoch = self._epoch
        self._refreshing = True
        try:
            snapshot = await asyncio.to_thread(self._attendance.get_current_status)
        except BackendError:
            if not self._disposed:
                self._resolved = True
            raise
        finally:
            self._refreshing = False

        if self._superseded(epoch):
            logger.debug("Ignoring attendance status for a superseded view")
            return self.state
        return self.resume(snapshot)

    async def clock_in(self, work_from: Optional[str], mode: Optional[str]) -> Optional[ClockEvent]:
        work_from = require_non_empty(work_from, "Work from")
        mode = require_non_empty(mode, "Mode")
        self._ensure_open()
        self._ensure_loaded()
        if self.state == SessionState.CLOCKED_IN:
            raise InvalidStateError("You are already clocked in.")
        if self._clock_in_pending:
            raise InvalidStateError("A clock-in request is already in progress.")
        if self.session.employee_id is None:
            raise ValidationError("Employee ID is missing.")
        if self._geolocation is None:
            raise GeolocationUnsupportedError()

        epoch = self._epoch
        self._clock_in_pending = True
        try:
            reading = await acquire_position(self._geolocation, timeout=self._geolocation_timeout)
            if self._superseded(epoch):
                logger.debug("View closed while locating; clock-in not sent")
                return None

            request = ClockInRequest(
                work_from=work_from,
                mode=mode,
                latitude=reading.latitude,
                longitude=reading.longitude,
            )
            try:
                message = await asyncio.to_thread(self._attendance.clock_in, request)
            except BackendError as exc:
                if self._superseded(epoch):
                    logger.debug("Ignoring clock-in failure for a superseded view: %s", exc)
                    return None
                if is_already_clocked_in(exc.message):
                    raise AlreadyClockedInError(exc.message, status_code=exc.status_code) from exc
                raise
        finally:
            self._clock_in_pending = False

        if self._superseded(epoch):
            logger.debug("Ignoring clock-in response for a superseded view")
            return None

        at = self._now()
        self._epoch += 1
        self._resolved = True
        self.session.clock_in_instant = at
        self.session.clock_out_instant = None
        self._ticker.start(at)
        logger.info("Employee %s clocked in at %s", self.session.employee_id, at)
        return ClockEvent(message=message, at=at)

    async def clock_out(self) -> Optional[ClockEvent]:
        self._ensure_open()
        self._ensure_loaded()
        if self.state != SessionState.CLOCKED_IN:
            raise InvalidStateError("You are not clocked in.")
        if self._clock_out_pending:
            raise InvalidStateError("A clock-out request is already in progress.")

        epoch = self._epoch
        self._clock_out_pending = True
        try:
            message = await asyncio.to_thread(self._attendance.clock_out)
        except BackendError as exc:
            if self._superseded(epoch):
                logger.debug("Ignoring clock-out failure for a superseded view: %s", exc)
                return None
            raise
        finally:
            self._clock_out_pending = False

        if self._superseded(epoch):
            logger.debug("Ignoring clock-out response for a superseded view")
            return None

        at = self._now()
        self._epoch += 1
        self.session.clock_out_instant = at
        self._ticker.reset()
        logger.info("Employee %s clocked out at %s", self.session.employee_id, at)
        return ClockEvent(message=message, at=at)

    def dispose(self) -> None:
        """View teardown: stop ticking and drop any response still in flight."""
        self._disposed = True
        self._epoch += 1
        self._ticker.cancel()

    def _ensure_open(self) -> None:
        if self._disposed:
            raise InvalidStateError("This dashboard has been closed.")

    def _ensure_loaded(self) -> None:
        if self.is_loading:
            raise InvalidStateError("Attendance status is still loading.")

    def _superseded(self, epoch: int) -> bool:
        return self._disposed or epoch != self._epoch

    def _publish_elapsed(self, value: str) -> None:
        if self._on_elapsed is not None:
            self._on_elapsed(value)
