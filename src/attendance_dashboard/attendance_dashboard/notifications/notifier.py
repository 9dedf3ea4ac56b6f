from __future__ import annotations

import logging
from typing import Protocol

from ..core.enums import Severity

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, severity: Severity, summary: str, detail: str) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Writes user-facing notifications to the log."""

    _LEVELS = {
        Severity.SUCCESS: logging.INFO,
        Severity.WARN: logging.WARNING,
        Severity.ERROR: logging.ERROR,
    }

    def __init__(self, target: logging.Logger = logger):
        self._target = target

    def notify(self, severity: Severity, summary: str, detail: str) -> None:
        self._target.log(self._LEVELS.get(severity, logging.INFO), "%s: %s", summary, detail)
