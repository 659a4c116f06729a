# src/vt_transfer/domain/repository.py
"""TransferRepository Protocol — interface contract for the pending-transfer queue."""
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_transfer.domain.models import PendingTransfer


class TransferRepositoryProtocol(Protocol):
    async def insert(
        self,
        db: AsyncSession,
        to_user_id: str,
        from_user_id: str,
        from_name: str,
        amount: int,
        note: str | None,
    ) -> PendingTransfer: ...

    async def get_recipient(self, db: AsyncSession, transfer_id: str) -> str | None: ...

    async def delete_by_id(self, db: AsyncSession, transfer_id: str) -> PendingTransfer | None: ...

    async def delete_all_for_recipient(
        self, db: AsyncSession, to_user_id: str
    ) -> list[PendingTransfer]: ...

    async def total_pending(self, db: AsyncSession, to_user_id: str) -> int: ...

    async def list_pending(self, db: AsyncSession, to_user_id: str) -> list[PendingTransfer]: ...

    async def list_sent(self, db: AsyncSession, from_user_id: str) -> list[PendingTransfer]: ...
