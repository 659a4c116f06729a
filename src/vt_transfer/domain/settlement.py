"""Settlement engine — turns pending transfers into recipient counters.

Runs within the caller's transaction; the application service commits or
rolls back. Within one settlement:

1. The recipient's account row is locked (SELECT ... FOR UPDATE). Both entry
   points lock the account before touching pending_transfers, so settlements
   for the same recipient serialize instead of deadlocking.
2. Transfers leave the queue through DELETE ... RETURNING. A transfer that
   another settlement already removed is simply not returned, which is the
   at-most-once guarantee.
3. The rollover engine runs before the counters are incremented.
4. The four received counters are incremented in one versioned write.
5. One activity entry is appended.

Sender-side "given" counters are never touched here.
"""
import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_account.domain.models import Account
from src.vt_account.domain.repository import AccountRepositoryProtocol
from src.vt_account.domain.rollover import ensure_current
from src.vt_activity.domain import messages
from src.vt_activity.domain.repository import ActivityRepositoryProtocol
from src.vt_common.datetime_utils import utc_now
from src.vt_common.errors import (
    AccountNotFoundError,
    NoPendingTransfersError,
    TransferNotFoundError,
)
from src.vt_transfer.domain.models import BulkSettlementResult, SettlementResult
from src.vt_transfer.domain.repository import TransferRepositoryProtocol

logger = logging.getLogger(__name__)


class SettlementEngine:
    def __init__(
        self,
        accounts: AccountRepositoryProtocol,
        transfers: TransferRepositoryProtocol,
        activities: ActivityRepositoryProtocol,
        tz: tzinfo,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._accounts = accounts
        self._transfers = transfers
        self._activities = activities
        self._tz = tz
        self._clock = clock

    async def accept_one(
        self, db: AsyncSession, transfer_id: str, recipient_id: str | None = None
    ) -> SettlementResult:
        """Settle one transfer. With `recipient_id`, transfers addressed to anyone
        else are reported as not found."""
        to_user_id = await self._transfers.get_recipient(db, transfer_id)
        if to_user_id is None or (recipient_id is not None and to_user_id != recipient_id):
            raise TransferNotFoundError(transfer_id)
        account = await self._lock(db, to_user_id)

        transfer = await self._transfers.delete_by_id(db, transfer_id)
        if transfer is None:
            # settled by a concurrent caller between lookup and lock
            raise TransferNotFoundError(transfer_id)

        await self._credit(db, account, transfer.amount)
        await self._activities.append(
            db, to_user_id, messages.settled_one(transfer.from_name, transfer.amount)
        )
        logger.info(
            "Settled transfer %s: %s -> %s, amount=%d",
            transfer.id, transfer.from_user_id, to_user_id, transfer.amount,
        )
        return SettlementResult(
            transfer_id=transfer.id,
            to_user_id=to_user_id,
            amount=transfer.amount,
            from_name=transfer.from_name,
        )

    async def accept_all(self, db: AsyncSession, to_user_id: str) -> BulkSettlementResult:
        account = await self._lock(db, to_user_id)

        # Sum and count come from exactly the rows this statement removed
        removed = await self._transfers.delete_all_for_recipient(db, to_user_id)
        if not removed:
            raise NoPendingTransfersError(to_user_id)
        total = sum(t.amount for t in removed)

        await self._credit(db, account, total)
        await self._activities.append(db, to_user_id, messages.settled_all(total, len(removed)))
        logger.info(
            "Settled %d transfers for %s, total=%d", len(removed), to_user_id, total
        )
        return BulkSettlementResult(to_user_id=to_user_id, total_amount=total, count=len(removed))

    async def _lock(self, db: AsyncSession, user_id: str) -> Account:
        account = await self._accounts.lock_account(db, user_id)
        if account is None:
            raise AccountNotFoundError(user_id)
        return account

    async def _credit(self, db: AsyncSession, account: Account, amount: int) -> Account:
        current = ensure_current(account, self._clock(), self._tz).account
        return await self._accounts.save_account(db, current.credit_received(amount))
