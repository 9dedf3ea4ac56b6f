from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.http_attendance_repository import HttpAttendanceRepository
from .backend.connection import ApiConfig, ApiConnection
from .core.constants import DEFAULT_GEOLOCATION_TIMEOUT_SECONDS, DEFAULT_HTTP_TIMEOUT_SECONDS, TICK_SECONDS
from .geolocation.source import FixedGeolocationSource, GeolocationSource
from .notifications.notifier import LoggingNotifier, Notifier
from .regularization.http_regularization_repository import HttpRegularizationRepository


@dataclass(frozen=True)
class Container:
    conn: ApiConnection

    attendance_repo: HttpAttendanceRepository
    regularizations_repo: HttpRegularizationRepository

    geolocation: Optional[GeolocationSource]
    notifier: Notifier

    geolocation_timeout: float
    tick_seconds: float


def _optional_float(value: Any) -> Optional[float]:
    if value in (None, ""):
        return None
    return float(value)


def build_container(
    *,
    api_config: dict,
    geolocation_config: dict,
    tick_seconds: float = TICK_SECONDS,
) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        token=api_config.get("token") or None,
        timeout=float(api_config.get("timeout", DEFAULT_HTTP_TIMEOUT_SECONDS)),
    )
    conn = ApiConnection.get_instance(config)

    attendance_repo = HttpAttendanceRepository(conn)
    regularizations_repo = HttpRegularizationRepository(conn)

    geolocation: Optional[GeolocationSource] = None
    if geolocation_config.get("enabled", True):
        geolocation = FixedGeolocationSource(
            _optional_float(geolocation_config.get("latitude")),
            _optional_float(geolocation_config.get("longitude")),
        )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        regularizations_repo=regularizations_repo,
        geolocation=geolocation,
        notifier=LoggingNotifier(),
        geolocation_timeout=float(geolocation_config.get("timeout", DEFAULT_GEOLOCATION_TIMEOUT_SECONDS)),
        tick_seconds=float(tick_seconds),
    )
