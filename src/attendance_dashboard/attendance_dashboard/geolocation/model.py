from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeolocationReading:
    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180
