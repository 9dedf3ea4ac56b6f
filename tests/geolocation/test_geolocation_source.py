import asyncio

import pytest

from attendance_dashboard.core.enums import GeolocationErrorCode
from attendance_dashboard.core.exceptions import GeolocationError
from attendance_dashboard.geolocation.model import GeolocationReading
from attendance_dashboard.geolocation.source import FixedGeolocationSource, acquire_position
from fakes import FailingGeolocation


class ReturningSource:
    def __init__(self, reading):
        self.reading = reading

    async def get_current_position(self):
        return self.reading


class BrokenSource:
    async def get_current_position(self):
        raise RuntimeError("sensor offline")


class HangingSource:
    async def get_current_position(self):
        await asyncio.sleep(1)


def test_fixed_source_returns_configured_reading():
    reading = asyncio.run(acquire_position(FixedGeolocationSource(12.97, 77.59)))

    assert reading == GeolocationReading(latitude=12.97, longitude=77.59)


@pytest.mark.parametrize("latitude, longitude", [(None, 77.59), (12.97, None), (None, None)])
def test_fixed_source_without_coordinates_is_unavailable(latitude, longitude):
    with pytest.raises(GeolocationError) as exc_info:
        asyncio.run(acquire_position(FixedGeolocationSource(latitude, longitude)))

    assert exc_info.value.code == GeolocationErrorCode.POSITION_UNAVAILABLE


@pytest.mark.parametrize(
    "reading",
    [GeolocationReading(latitude=91.0, longitude=0.0), GeolocationReading(latitude=0.0, longitude=-181.0)],
)
def test_out_of_range_reading_is_unavailable(reading):
    with pytest.raises(GeolocationError) as exc_info:
        asyncio.run(acquire_position(ReturningSource(reading)))

    assert exc_info.value.code == GeolocationErrorCode.POSITION_UNAVAILABLE


def test_timeout_is_reported_as_timeout():
    with pytest.raises(GeolocationError) as exc_info:
        asyncio.run(acquire_position(HangingSource(), timeout=0.01))

    assert exc_info.value.code == GeolocationErrorCode.TIMEOUT
    assert str(exc_info.value) == "The request to get location timed out."


def test_unexpected_failure_is_unknown():
    with pytest.raises(GeolocationError) as exc_info:
        asyncio.run(acquire_position(BrokenSource()))

    assert exc_info.value.code == GeolocationErrorCode.UNKNOWN


def test_permission_denied_passes_through():
    source = FailingGeolocation(GeolocationErrorCode.PERMISSION_DENIED)

    with pytest.raises(GeolocationError) as exc_info:
        asyncio.run(acquire_position(source))

    assert exc_info.value.code == GeolocationErrorCode.PERMISSION_DENIED
    assert str(exc_info.value) == "Permission denied. Please allow location access."
    assert source.calls == 1
