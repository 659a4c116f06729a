"""Domain models for vt_account — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass, replace
from datetime import date, datetime


@dataclass(frozen=True)
class Account:
    user_id: str
    name: str
    product: str | None = None
    # all-time, never reset
    all_time_received: int = 0
    all_time_given: int = 0
    # period counters, reset lazily by the rollover engine
    daily_received: int = 0
    daily_given: int = 0
    weekly_received: int = 0
    weekly_given: int = 0
    monthly_received: int = 0
    monthly_given: int = 0
    last_daily_reset: date | None = None
    last_weekly_reset: date | None = None
    last_monthly_reset: date | None = None
    version: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        for field_name in COUNTER_FIELDS:
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be >= 0, got {getattr(self, field_name)}")

    def credit_received(self, amount: int) -> "Account":
        """Settlement side: add amount to all four received counters."""
        if amount <= 0:
            raise ValueError(f"amount must be > 0, got {amount}")
        return replace(
            self,
            all_time_received=self.all_time_received + amount,
            daily_received=self.daily_received + amount,
            weekly_received=self.weekly_received + amount,
            monthly_received=self.monthly_received + amount,
        )

    def debit_given(self, amount: int) -> "Account":
        """Initiation side: add amount to all four given counters."""
        if amount <= 0:
            raise ValueError(f"amount must be > 0, got {amount}")
        return replace(
            self,
            all_time_given=self.all_time_given + amount,
            daily_given=self.daily_given + amount,
            weekly_given=self.weekly_given + amount,
            monthly_given=self.monthly_given + amount,
        )


COUNTER_FIELDS = (
    "all_time_received",
    "all_time_given",
    "daily_received",
    "daily_given",
    "weekly_received",
    "weekly_given",
    "monthly_received",
    "monthly_given",
)


@dataclass(frozen=True)
class RankingRow:
    rank: int
    user_id: str
    name: str
    product: str | None
    received: int
    given: int
