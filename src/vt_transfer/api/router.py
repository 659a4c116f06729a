# src/vt_transfer/api/router.py
"""Transfer REST API — send, list, accept one, accept all.

The caller is identified by the X-User-Id header; a user can only accept
transfers addressed to them.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_common.database import get_db_session
from src.vt_common.response import ApiResponse, success_response
from src.vt_gateway.identity import get_current_user_id
from src.vt_transfer.application.schemas import (
    AcceptAllResponse,
    AcceptOneResponse,
    PendingListResponse,
    PendingTotalResponse,
    PendingTransferItem,
    SendTransferRequest,
)
from src.vt_transfer.application.service import TransferApplicationService

router = APIRouter(prefix="/transfers", tags=["transfers"])

_service = TransferApplicationService()


def _get_request_id(request: Request) -> str:
    """Read request_id injected by RequestLogMiddleware, fallback if absent."""
    return getattr(request.state, "request_id", "req_unknown")


@router.post("", status_code=status.HTTP_201_CREATED)
async def send_transfer(
    body: SendTransferRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    transfer = await _service.send(db, user_id, body.to_user_id, body.amount, body.note)
    resp = success_response(PendingTransferItem.from_domain(transfer).model_dump())
    resp.request_id = _get_request_id(request)
    resp.message = "Transfer queued"
    return resp


@router.get("/pending")
async def list_pending(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    transfers = await _service.list_pending(db, user_id)
    data = PendingListResponse(
        items=[PendingTransferItem.from_domain(t) for t in transfers],
        total_amount=sum(t.amount for t in transfers),
        count=len(transfers),
    )
    resp = success_response(data.model_dump())
    resp.request_id = _get_request_id(request)
    return resp


@router.get("/pending/total")
async def pending_total(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    total = await _service.pending_total(db, user_id)
    resp = success_response(PendingTotalResponse(user_id=user_id, total_amount=total).model_dump())
    resp.request_id = _get_request_id(request)
    return resp


@router.get("/sent")
async def list_sent(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    transfers = await _service.list_sent(db, user_id)
    data = PendingListResponse(
        items=[PendingTransferItem.from_domain(t) for t in transfers],
        total_amount=sum(t.amount for t in transfers),
        count=len(transfers),
    )
    resp = success_response(data.model_dump())
    resp.request_id = _get_request_id(request)
    return resp


@router.post("/accept-all")
async def accept_all(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    result = await _service.accept_all(db, user_id)
    resp = success_response(AcceptAllResponse.from_result(result).model_dump())
    resp.request_id = _get_request_id(request)
    return resp


@router.post("/{transfer_id}/accept")
async def accept_one(
    transfer_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    result = await _service.accept_one(db, transfer_id, recipient_id=user_id)
    resp = success_response(AcceptOneResponse.from_result(result).model_dump())
    resp.request_id = _get_request_id(request)
    return resp
