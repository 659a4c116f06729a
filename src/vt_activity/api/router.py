"""Activity feed REST API — display only."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_activity.application.service import ActivityApplicationService
from src.vt_common.database import get_db_session
from src.vt_common.response import ApiResponse, success_response

router = APIRouter(prefix="/activities", tags=["activities"])

_service = ActivityApplicationService()


@router.get("")
async def list_activities(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    limit: int = Query(20, ge=1, description="Items to return, newest first"),
    user_id: str | None = Query(None, description="Only entries for this user"),
) -> ApiResponse:
    data = await _service.list_recent(db, limit, user_id)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
