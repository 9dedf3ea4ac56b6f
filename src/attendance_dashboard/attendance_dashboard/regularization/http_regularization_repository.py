from __future__ import annotations

from ..backend.connection import ApiConnection
from ..backend.http_base import read_message, send
from ..core.constants import REGULARIZE_PATH
from .model import RegularizationRequest
from .repository import RegularizationRepository


class HttpRegularizationRepository(RegularizationRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def request_regularization(self, request: RegularizationRequest) -> str:
        response = send(
            self._conn,
            "POST",
            REGULARIZE_PATH,
            fallback="Regularization request failed",
            json=request.to_payload(),
        )
        return read_message(response)
