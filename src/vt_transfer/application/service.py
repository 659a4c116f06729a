# src/vt_transfer/application/service.py
"""TransferApplicationService — queue operations, initiation and settlement.

Each public method that writes runs in one transaction (commit on success,
rollback on any error). Read-only methods run without an explicit commit.
"""
import logging
from collections.abc import Callable
from datetime import datetime, tzinfo
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.vt_account.domain.repository import AccountRepositoryProtocol
from src.vt_account.domain.rollover import ensure_current
from src.vt_account.infrastructure.persistence import AccountRepository
from src.vt_activity.domain.repository import ActivityRepositoryProtocol
from src.vt_activity.infrastructure.persistence import ActivityRepository
from src.vt_common.database import transaction
from src.vt_common.datetime_utils import get_zone, utc_now
from src.vt_common.errors import (
    AccountNotFoundError,
    InvalidAmountError,
    SelfTransferError,
    TransferNotFoundError,
)
from src.vt_transfer.domain.models import (
    BulkSettlementResult,
    PendingTransfer,
    SettlementResult,
)
from src.vt_transfer.domain.repository import TransferRepositoryProtocol
from src.vt_transfer.domain.settlement import SettlementEngine
from src.vt_transfer.infrastructure.persistence import TransferRepository

logger = logging.getLogger(__name__)


def _validate_amount(amount: int) -> None:
    if amount <= 0:
        raise InvalidAmountError(amount)


def _validate_transfer_id(transfer_id: str) -> str:
    try:
        return str(UUID(str(transfer_id)))
    except ValueError:
        raise TransferNotFoundError(transfer_id) from None


class TransferApplicationService:
    def __init__(
        self,
        accounts: AccountRepositoryProtocol | None = None,
        transfers: TransferRepositoryProtocol | None = None,
        activities: ActivityRepositoryProtocol | None = None,
        clock: Callable[[], datetime] = utc_now,
        tz: tzinfo | None = None,
    ) -> None:
        self._accounts: AccountRepositoryProtocol = accounts or AccountRepository()
        self._transfers: TransferRepositoryProtocol = transfers or TransferRepository()
        self._activities: ActivityRepositoryProtocol = activities or ActivityRepository()
        self._clock = clock
        self._tz = tz or get_zone(settings.TIMEZONE)
        self._settlement = SettlementEngine(
            self._accounts, self._transfers, self._activities, self._tz, clock
        )

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------

    async def enqueue(
        self,
        db: AsyncSession,
        to_user_id: str,
        from_user_id: str,
        from_name: str,
        amount: int,
        note: str | None = None,
    ) -> str:
        """Queue a transfer without touching any counter. Returns the transfer id."""
        _validate_amount(amount)
        async with transaction(db):
            transfer = await self._insert(db, to_user_id, from_user_id, from_name, amount, note)
        return transfer.id

    async def pending_total(self, db: AsyncSession, user_id: str) -> int:
        return await self._transfers.total_pending(db, user_id)

    async def list_pending(self, db: AsyncSession, user_id: str) -> list[PendingTransfer]:
        """Incoming transfers, newest first."""
        return await self._transfers.list_pending(db, user_id)

    async def list_sent(self, db: AsyncSession, user_id: str) -> list[PendingTransfer]:
        """Outgoing transfers not yet accepted, newest first."""
        return await self._transfers.list_sent(db, user_id)

    # ------------------------------------------------------------------
    # Initiation
    # ------------------------------------------------------------------

    async def send(
        self,
        db: AsyncSession,
        from_user_id: str,
        to_user_id: str,
        amount: int,
        note: str | None = None,
    ) -> PendingTransfer:
        """Record the sender's given counters and queue the transfer, atomically."""
        _validate_amount(amount)
        if from_user_id == to_user_id:
            raise SelfTransferError()
        async with transaction(db):
            sender = await self._accounts.lock_account(db, from_user_id)
            if sender is None:
                raise AccountNotFoundError(from_user_id)
            if not await self._accounts.account_exists(db, to_user_id):
                raise AccountNotFoundError(to_user_id)
            current = ensure_current(sender, self._clock(), self._tz).account
            await self._accounts.save_account(db, current.debit_given(amount))
            transfer = await self._transfers.insert(
                db, to_user_id, from_user_id, sender.name, amount, note
            )
        logger.info(
            "Queued transfer %s: %s -> %s, amount=%d", transfer.id, from_user_id, to_user_id, amount
        )
        return transfer

    # ------------------------------------------------------------------
    # Settlement
    # ------------------------------------------------------------------

    async def accept_one(
        self, db: AsyncSession, transfer_id: str, recipient_id: str | None = None
    ) -> SettlementResult:
        transfer_id = _validate_transfer_id(transfer_id)
        async with transaction(db):
            return await self._settlement.accept_one(db, transfer_id, recipient_id)

    async def accept_all(self, db: AsyncSession, user_id: str) -> BulkSettlementResult:
        async with transaction(db):
            return await self._settlement.accept_all(db, user_id)

    async def _insert(
        self,
        db: AsyncSession,
        to_user_id: str,
        from_user_id: str,
        from_name: str,
        amount: int,
        note: str | None,
    ) -> PendingTransfer:
        for user_id in (to_user_id, from_user_id):
            if not await self._accounts.account_exists(db, user_id):
                raise AccountNotFoundError(user_id)
        return await self._transfers.insert(db, to_user_id, from_user_id, from_name, amount, note)
