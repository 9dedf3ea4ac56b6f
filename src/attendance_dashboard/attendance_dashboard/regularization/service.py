from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime
from typing import Callable, Optional, Union

from ..common.datetime_utils import now_local
from .model import RegularizationReceipt
from .repository import RegularizationRepository
from .validator import validate_regularization

logger = logging.getLogger(__name__)


class RegularizationService:
    def __init__(self, regularizations: RegularizationRepository, *, now: Callable[[], datetime] = now_local):
        self._regularizations = regularizations
        self._now = now

    def today(self) -> date:
        return self._now().date()

    async def submit(
        self,
        work_date: Union[date, str, None],
        reason: Optional[str],
        *,
        today: Optional[date] = None,
    ) -> RegularizationReceipt:
        request = validate_regularization(work_date, reason, today or self.today())
        message = await asyncio.to_thread(self._regularizations.request_regularization, request)
        logger.info("Regularization submitted for %s", request.work_date)
        return RegularizationReceipt(request=request, message=message)
