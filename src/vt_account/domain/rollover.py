"""Rollover engine — lazy reset of period counters.

Each period is checked independently: when the stored reset marker is absent
or older than the period's current start, both counters of that period drop
to zero and the marker moves to the current start. Running it again for the
same instant is a no-op, so it is safe to apply before every read or write of
period counters.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, tzinfo

from src.vt_account.domain.models import Account
from src.vt_account.domain.periods import PeriodBoundaries, boundaries

logger = logging.getLogger(__name__)

# period -> (marker field, received counter, given counter, boundary attr)
_PERIODS = (
    ("last_daily_reset", "daily_received", "daily_given", "day_start"),
    ("last_weekly_reset", "weekly_received", "weekly_given", "week_start"),
    ("last_monthly_reset", "monthly_received", "monthly_given", "month_start"),
)


@dataclass(frozen=True)
class RolloverResult:
    account: Account
    changed: bool


def apply_rollover(account: Account, bounds: PeriodBoundaries) -> RolloverResult:
    changes: dict[str, object] = {}
    for marker, received, given, attr in _PERIODS:
        current = getattr(bounds, attr)
        last = getattr(account, marker)
        if last is None or last < current:
            changes[marker] = current
            changes[received] = 0
            changes[given] = 0
    if not changes:
        return RolloverResult(account=account, changed=False)
    logger.debug(
        "Rollover for %s: %s",
        account.user_id,
        ", ".join(k for k in changes if k.startswith("last_")),
    )
    return RolloverResult(account=replace(account, **changes), changed=True)


def ensure_current(account: Account, now: datetime, tz: tzinfo) -> RolloverResult:
    """Bring the account's period counters up to date for instant `now`."""
    return apply_rollover(account, boundaries(now, tz))
