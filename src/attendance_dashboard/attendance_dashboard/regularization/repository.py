from __future__ import annotations

from typing import Protocol

from .model import RegularizationRequest


class RegularizationRepository(Protocol):
    def request_regularization(self, request: RegularizationRequest) -> str:
        raise NotImplementedError
