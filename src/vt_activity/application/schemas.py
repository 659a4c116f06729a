"""Pydantic schemas for the activity feed."""

from pydantic import BaseModel

from src.vt_activity.domain.models import ActivityEntry


class ActivityItem(BaseModel):
    id: str
    user_id: str | None
    message: str
    created_at: str  # ISO8601 string

    @classmethod
    def from_domain(cls, entry: ActivityEntry) -> "ActivityItem":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            message=entry.message,
            created_at=entry.created_at.isoformat() if entry.created_at else "",
        )


class ActivityListResponse(BaseModel):
    items: list[ActivityItem]
