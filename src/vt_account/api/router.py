"""vt_account REST API — account snapshot and rankings."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_account.application.schemas import RankingPeriod
from src.vt_account.application.service import AccountApplicationService
from src.vt_common.database import get_db_session
from src.vt_common.response import ApiResponse, success_response
from src.vt_gateway.identity import get_current_user_id
from src.vt_transfer.application.service import TransferApplicationService

router = APIRouter(prefix="/accounts", tags=["accounts"])

_service = AccountApplicationService()
_transfers = TransferApplicationService()


@router.get("/me")
async def get_my_account(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    pending = await _transfers.pending_total(db, user_id)
    data = await _service.get_account_response(db, user_id, pending)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/rankings")
async def get_rankings(
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    period: RankingPeriod = Query(RankingPeriod.ALL_TIME, description="Ranking window"),
) -> ApiResponse:
    data = await _service.rankings(db, period)
    resp = success_response(data.model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{user_id}")
async def get_account(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = await _service.get_account_response(db, user_id)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
