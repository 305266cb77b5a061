"""Date and time helpers."""

from datetime import datetime, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def to_utc(moment: datetime) -> datetime:
    """Return an aware UTC datetime (naive values are taken as local time)."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(timezone.utc)


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days elapsed between two moments (floored, may be negative)."""
    elapsed = (to_utc(later) - to_utc(earlier)).total_seconds()
    return int(elapsed // SECONDS_PER_DAY)
