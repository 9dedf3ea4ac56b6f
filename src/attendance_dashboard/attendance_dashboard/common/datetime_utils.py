from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def format_elapsed(delta: timedelta) -> str:
    """Render a duration as zero-padded HH:MM:SS.

    Hours keep counting past 24; negative durations render as zero.
    """
    total = max(int(delta.total_seconds()), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M")
