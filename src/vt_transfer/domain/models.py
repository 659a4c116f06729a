"""Domain models for vt_transfer — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PendingTransfer:
    id: str
    to_user_id: str
    from_user_id: str
    from_name: str          # sender's name at creation time, not kept in sync
    amount: int             # VT, always > 0
    note: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class SettlementResult:
    transfer_id: str
    to_user_id: str
    amount: int
    from_name: str


@dataclass(frozen=True)
class BulkSettlementResult:
    to_user_id: str
    total_amount: int
    count: int
