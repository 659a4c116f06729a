"""Pydantic schemas for vt_account API."""

from enum import Enum

from pydantic import BaseModel

from src.vt_account.domain.models import Account, RankingRow


class RankingPeriod(str, Enum):
    ALL_TIME = "all_time"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class AccountResponse(BaseModel):
    user_id: str
    name: str
    product: str | None
    all_time_received: int
    all_time_given: int
    daily_received: int
    daily_given: int
    weekly_received: int
    weekly_given: int
    monthly_received: int
    monthly_given: int
    last_daily_reset: str | None
    last_weekly_reset: str | None
    last_monthly_reset: str | None
    pending_total: int | None = None
    updated_at: str | None

    @classmethod
    def from_domain(cls, account: Account, pending_total: int | None = None) -> "AccountResponse":
        return cls(
            user_id=account.user_id,
            name=account.name,
            product=account.product,
            all_time_received=account.all_time_received,
            all_time_given=account.all_time_given,
            daily_received=account.daily_received,
            daily_given=account.daily_given,
            weekly_received=account.weekly_received,
            weekly_given=account.weekly_given,
            monthly_received=account.monthly_received,
            monthly_given=account.monthly_given,
            last_daily_reset=_iso(account.last_daily_reset),
            last_weekly_reset=_iso(account.last_weekly_reset),
            last_monthly_reset=_iso(account.last_monthly_reset),
            pending_total=pending_total,
            updated_at=_iso(account.updated_at),
        )


class RankingItem(BaseModel):
    rank: int
    user_id: str
    name: str
    product: str | None
    received: int
    given: int

    @classmethod
    def from_domain(cls, row: RankingRow) -> "RankingItem":
        return cls(
            rank=row.rank,
            user_id=row.user_id,
            name=row.name,
            product=row.product,
            received=row.received,
            given=row.given,
        )


class RankingResponse(BaseModel):
    period: RankingPeriod
    items: list[RankingItem]


def _iso(value: object) -> str | None:
    return value.isoformat() if value is not None else None  # type: ignore[attr-defined]
