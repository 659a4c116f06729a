# src/vt_transfer/application/schemas.py
"""Pydantic schemas for the transfer API."""
from pydantic import BaseModel, Field

from src.vt_transfer.domain.models import (
    BulkSettlementResult,
    PendingTransfer,
    SettlementResult,
)


class SendTransferRequest(BaseModel):
    to_user_id: str = Field(..., min_length=1, max_length=64)
    # sign is checked by the service so non-positive amounts map to InvalidAmountError
    amount: int = Field(..., description="Tokens to send, must be > 0")
    note: str | None = Field(None, max_length=500)


class PendingTransferItem(BaseModel):
    id: str
    to_user_id: str
    from_user_id: str
    from_name: str
    amount: int
    note: str | None
    created_at: str | None

    @classmethod
    def from_domain(cls, t: PendingTransfer) -> "PendingTransferItem":
        return cls(
            id=t.id,
            to_user_id=t.to_user_id,
            from_user_id=t.from_user_id,
            from_name=t.from_name,
            amount=t.amount,
            note=t.note,
            created_at=t.created_at.isoformat() if t.created_at else None,
        )


class PendingListResponse(BaseModel):
    items: list[PendingTransferItem]
    total_amount: int
    count: int


class PendingTotalResponse(BaseModel):
    user_id: str
    total_amount: int


class AcceptOneResponse(BaseModel):
    success: bool = True
    transfer_id: str
    amount: int
    from_name: str

    @classmethod
    def from_result(cls, result: SettlementResult) -> "AcceptOneResponse":
        return cls(transfer_id=result.transfer_id, amount=result.amount, from_name=result.from_name)


class AcceptAllResponse(BaseModel):
    success: bool = True
    amount: int
    count: int

    @classmethod
    def from_result(cls, result: BulkSettlementResult) -> "AcceptAllResponse":
        return cls(amount=result.total_amount, count=result.count)
