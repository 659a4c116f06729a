"""Period clock: map an instant to the day/week/month starts used for rollover."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo


@dataclass(frozen=True)
class PeriodBoundaries:
    day_start: date
    week_start: date    # Monday (ISO week)
    month_start: date


def boundaries(now: datetime, tz: tzinfo) -> PeriodBoundaries:
    """Compute period starts for `now` as seen in the reference zone `tz`.

    Naive datetimes are interpreted as UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    today = now.astimezone(tz).date()
    return PeriodBoundaries(
        day_start=today,
        week_start=today - timedelta(days=today.weekday()),
        month_start=today.replace(day=1),
    )
