from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RegularizationRequest:
    """Correction request for one day of the current month."""

    work_date: date
    reason: str

    def to_payload(self) -> dict[str, str]:
        return {"date": self.work_date.strftime("%Y-%m-%d"), "reason": self.reason}


@dataclass(frozen=True)
class RegularizationReceipt:
    request: RegularizationRequest
    message: str
