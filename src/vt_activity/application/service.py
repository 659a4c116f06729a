"""ActivityApplicationService — read side of the activity log.

Entries are written by the settlement engine inside its own transaction;
this service only lists them.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.vt_activity.application.schemas import ActivityItem, ActivityListResponse
from src.vt_activity.domain.repository import ActivityRepositoryProtocol
from src.vt_activity.infrastructure.persistence import ActivityRepository


class ActivityApplicationService:
    def __init__(self, repo: ActivityRepositoryProtocol | None = None) -> None:
        self._repo: ActivityRepositoryProtocol = repo or ActivityRepository()

    async def list_recent(
        self, db: AsyncSession, limit: int, user_id: str | None = None
    ) -> ActivityListResponse:
        limit = max(1, min(limit, settings.ACTIVITY_PAGE_LIMIT))
        entries = await self._repo.list_recent(db, limit, user_id)
        return ActivityListResponse(items=[ActivityItem.from_domain(e) for e in entries])
