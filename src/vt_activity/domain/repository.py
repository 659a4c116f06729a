"""ActivityRepository Protocol — append-only activity log."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_activity.domain.models import ActivityEntry


class ActivityRepositoryProtocol(Protocol):
    async def append(self, db: AsyncSession, user_id: str | None, message: str) -> ActivityEntry: ...

    async def list_recent(
        self, db: AsyncSession, limit: int, user_id: str | None
    ) -> list[ActivityEntry]: ...
