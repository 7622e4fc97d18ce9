"""Pure helpers for the daily scrape schedule."""

from datetime import datetime, time, timedelta
from zoneinfo import ZoneInfo


def next_run_at(now: datetime, hour: int, minute: int, tz: str) -> datetime:
    """Next wall-clock hour:minute in tz, strictly after now (aware datetime)."""
    zone = ZoneInfo(tz)
    local_now = now.astimezone(zone)
    candidate = datetime.combine(local_now.date(), time(hour, minute), tzinfo=zone)
    if candidate <= local_now:
        candidate = datetime.combine(
            local_now.date() + timedelta(days=1), time(hour, minute), tzinfo=zone
        )
    return candidate
