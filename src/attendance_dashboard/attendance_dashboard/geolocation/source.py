from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol

from ..core.constants import DEFAULT_GEOLOCATION_TIMEOUT_SECONDS
from ..core.enums import GeolocationErrorCode
from ..core.exceptions import GeolocationError
from .model import GeolocationReading

logger = logging.getLogger(__name__)


class GeolocationSource(Protocol):
    async def get_current_position(self) -> GeolocationReading:
        """One position reading, or GeolocationError with the failure cause."""

        raise NotImplementedError


class FixedGeolocationSource(GeolocationSource):
    """Serves coordinates configured for this workstation."""

    def __init__(self, latitude: Optional[float], longitude: Optional[float]):
        self._latitude = latitude
        self._longitude = longitude

    async def get_current_position(self) -> GeolocationReading:
        if self._latitude is None or self._longitude is None:
            raise GeolocationError(GeolocationErrorCode.POSITION_UNAVAILABLE)
        return GeolocationReading(latitude=float(self._latitude), longitude=float(self._longitude))


async def acquire_position(
    source: GeolocationSource,
    *,
    timeout: float = DEFAULT_GEOLOCATION_TIMEOUT_SECONDS,
) -> GeolocationReading:
    """Request exactly one reading and classify every failure.

    No retries: a timeout is reported as its own cause.
    """
    try:
        reading = await asyncio.wait_for(source.get_current_position(), timeout)
    except asyncio.TimeoutError as exc:
        raise GeolocationError(GeolocationErrorCode.TIMEOUT) from exc
    except GeolocationError:
        raise
    except Exception as exc:
        logger.exception("Geolocation source failed")
        raise GeolocationError(GeolocationErrorCode.UNKNOWN) from exc

    if not reading.is_valid:
        raise GeolocationError(GeolocationErrorCode.POSITION_UNAVAILABLE)
    return reading
