"""Domain models for vt_activity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ActivityEntry:
    id: str
    user_id: str | None  # NULL once the account is removed (ON DELETE SET NULL)
    message: str
    created_at: datetime | None = None
