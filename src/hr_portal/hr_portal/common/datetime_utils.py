from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str) -> time:
    """Parse a local time of day written as HH:MM (seconds are accepted and dropped)."""
    v = (value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time().replace(second=0)
        except ValueError:
            continue
    raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def format_hhmm(value: time | datetime | None) -> str | None:
    if value is None:
        return None
    return value.strftime("%H:%M")


def truncate_to_minute(value: datetime) -> time:
    """Project a timestamp onto its HH:MM time of day."""
    return value.time().replace(second=0, microsecond=0)


def format_duration(value: timedelta) -> str:
    """Render a non-negative interval as HH:MM:00."""
    total_minutes = max(int(value.total_seconds()) // 60, 0)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}:00"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
