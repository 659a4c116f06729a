"""ActivityRepository — raw SQL for the append-only activities table.

Rows are never updated or deleted here; retention is handled outside the service.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_activity.domain.models import ActivityEntry
from src.vt_common.errors import InternalError

_INSERT_ACTIVITY_SQL = text("""
    INSERT INTO activities (user_id, message)
    VALUES (:user_id, :message)
    RETURNING id, user_id, message, created_at
""")

_LIST_ACTIVITIES_SQL = text("""
    SELECT id, user_id, message, created_at
    FROM activities
    WHERE (CAST(:user_id AS TEXT) IS NULL OR user_id = :user_id)
    ORDER BY created_at DESC, id DESC
    LIMIT :limit
""")


def _row_to_activity(row: object) -> ActivityEntry:
    return ActivityEntry(
        id=str(row.id),  # type: ignore[attr-defined]
        user_id=row.user_id,  # type: ignore[attr-defined]
        message=row.message,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


class ActivityRepository:
    async def append(self, db: AsyncSession, user_id: str | None, message: str) -> ActivityEntry:
        """Insert one activity row within the caller's transaction."""
        result = await db.execute(_INSERT_ACTIVITY_SQL, {"user_id": user_id, "message": message})
        row = result.fetchone()
        if row is None:
            raise InternalError("Activity insert returned no rows")
        return _row_to_activity(row)

    async def list_recent(
        self, db: AsyncSession, limit: int, user_id: str | None
    ) -> list[ActivityEntry]:
        result = await db.execute(_LIST_ACTIVITIES_SQL, {"user_id": user_id, "limit": limit})
        return [_row_to_activity(row) for row in result.fetchall()]
