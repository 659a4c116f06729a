"""AccountApplicationService — account snapshots and rankings.

get_account applies the rollover engine first and persists the reset when
one happened, so a snapshot never shows stale period counters. Rankings are
read-only: rollover is applied in memory to every account before sorting.
"""

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.vt_account.application.schemas import (
    AccountResponse,
    RankingItem,
    RankingPeriod,
    RankingResponse,
)
from src.vt_account.domain.models import Account, RankingRow
from src.vt_account.domain.repository import AccountRepositoryProtocol
from src.vt_account.domain.rollover import ensure_current
from src.vt_account.infrastructure.persistence import AccountRepository
from src.vt_common.database import transaction
from src.vt_common.datetime_utils import get_zone, utc_now
from src.vt_common.errors import AccountNotFoundError, ConcurrencyConflictError

logger = logging.getLogger(__name__)

# period -> (received field, given field)
_RANKING_FIELDS: dict[RankingPeriod, tuple[str, str]] = {
    RankingPeriod.ALL_TIME: ("all_time_received", "all_time_given"),
    RankingPeriod.DAILY: ("daily_received", "daily_given"),
    RankingPeriod.WEEKLY: ("weekly_received", "weekly_given"),
    RankingPeriod.MONTHLY: ("monthly_received", "monthly_given"),
}


def rank_accounts(accounts: list[Account], period: RankingPeriod) -> list[RankingRow]:
    """Sort by the period's received counter desc, ties by user_id asc; 1-based rank."""
    received_field, given_field = _RANKING_FIELDS[period]
    ordered = sorted(accounts, key=lambda a: (-getattr(a, received_field), a.user_id))
    return [
        RankingRow(
            rank=i,
            user_id=a.user_id,
            name=a.name,
            product=a.product,
            received=getattr(a, received_field),
            given=getattr(a, given_field),
        )
        for i, a in enumerate(ordered, start=1)
    ]


class AccountApplicationService:
    def __init__(
        self,
        repo: AccountRepositoryProtocol | None = None,
        clock: Callable[[], datetime] = utc_now,
        tz: tzinfo | None = None,
    ) -> None:
        self._repo: AccountRepositoryProtocol = repo or AccountRepository()
        self._clock = clock
        self._tz = tz or get_zone(settings.TIMEZONE)

    async def current_account(self, db: AsyncSession, user_id: str) -> Account:
        """Load the account and persist a rollover if one is due (no commit)."""
        account = await self._repo.get_account(db, user_id)
        if account is None:
            raise AccountNotFoundError(user_id)
        now = self._clock()
        rolled = ensure_current(account, now, self._tz)
        if not rolled.changed:
            return account
        try:
            return await self._repo.save_account(db, rolled.account)
        except ConcurrencyConflictError:
            # A concurrent writer got there first. If it already brought the
            # row current, that write is the one this read wanted.
            fresh = await self._repo.get_account(db, user_id)
            if fresh is None:
                raise AccountNotFoundError(user_id) from None
            if ensure_current(fresh, now, self._tz).changed:
                raise
            logger.debug("Rollover for %s already applied by a concurrent writer", user_id)
            return fresh

    async def get_account(self, db: AsyncSession, user_id: str) -> Account:
        async with transaction(db):
            return await self.current_account(db, user_id)

    async def get_account_response(
        self, db: AsyncSession, user_id: str, pending_total: int | None = None
    ) -> AccountResponse:
        account = await self.get_account(db, user_id)
        return AccountResponse.from_domain(account, pending_total)

    async def rankings(self, db: AsyncSession, period: RankingPeriod) -> RankingResponse:
        now = self._clock()
        accounts = [
            ensure_current(a, now, self._tz).account
            for a in await self._repo.list_accounts(db)
        ]
        rows = rank_accounts(accounts, period)
        return RankingResponse(period=period, items=[RankingItem.from_domain(r) for r in rows])
