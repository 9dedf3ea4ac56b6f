from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import first_day_of_month, parse_iso_date
from ..core.exceptions import DateOutOfWindowError, ReasonPatternError, ValidationError
from .model import RegularizationRequest

REASON_PATTERN = re.compile(r"[A-Za-z0-9 ]+")


def regularization_window(today: date) -> tuple[date, date]:
    """Inclusive range of dates a regularization may target."""
    return first_day_of_month(today), today


def validate_regularization(
    work_date: Union[date, str, None],
    reason: Optional[str],
    today: date,
) -> RegularizationRequest:
    """Check a correction request against the current pay cycle.

    Pure: `today` is passed in so the window is evaluated at submission time.
    """
    if not work_date or not reason or not reason.strip():
        raise ValidationError("Date and reason are required. Fill all required fields.")

    if not REASON_PATTERN.fullmatch(reason):
        raise ReasonPatternError("Reason may only contain letters, digits and spaces.")

    if isinstance(work_date, datetime):
        work_date = work_date.date()
    elif isinstance(work_date, str):
        try:
            work_date = parse_iso_date(work_date.strip())
        except ValueError as exc:
            raise ValidationError("Date must be in YYYY-MM-DD format.") from exc

    month_start, last_allowed = regularization_window(today)
    if work_date < month_start or work_date > last_allowed:
        raise DateOutOfWindowError("Please select a date from the 1st up to today.")

    return RegularizationRequest(work_date=work_date, reason=reason.strip())
