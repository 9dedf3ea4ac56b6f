from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import format_elapsed, now_local
from ..core.constants import ELAPSED_ZERO, TICK_SECONDS


class ElapsedTimeTicker:
    """Recurring callback that republishes the elapsed session time.

    The ticker lives on the running event loop and holds at most one pending
    `asyncio.TimerHandle`. `start` replaces any running schedule and publishes
    immediately; `cancel` drops the handle synchronously.
    """

    def __init__(
        self,
        on_tick: Callable[[str], None],
        *,
        now: Callable[[], datetime] = now_local,
        period: float = TICK_SECONDS,
    ):
        self._on_tick = on_tick
        self._now = now
        self._period = float(period)
        self._started_at: Optional[datetime] = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self.display = ELAPSED_ZERO

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> Optional[asyncio.TimerHandle]:
        return self._handle

    def elapsed(self) -> timedelta:
        if self._started_at is None:
            return timedelta(0)
        return self._now() - self._started_at

    def start(self, started_at: datetime) -> None:
        self.cancel()
        self._loop = asyncio.get_running_loop()
        self._started_at = started_at
        self._tick()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._started_at = None

    def reset(self) -> None:
        self.cancel()
        self._publish(ELAPSED_ZERO)

    def _tick(self) -> None:
        self._publish(format_elapsed(self.elapsed()))
        self._handle = self._loop.call_later(self._period, self._tick)

    def _publish(self, value: str) -> None:
        self.display = value
        self._on_tick(value)
