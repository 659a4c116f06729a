"""AccountRepository — concrete implementation of AccountRepositoryProtocol.

Every write goes through save_account: a version-guarded UPDATE ... RETURNING
that bumps `version` and refreshes `updated_at`. Zero rows returned means
another transaction wrote the row first (ConcurrencyConflictError).

Transaction ownership: The CALLER (application service) is responsible for
committing or rolling back the session.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_account.domain.models import Account
from src.vt_common.errors import ConcurrencyConflictError

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = """
    user_id, name, product,
    all_time_received, all_time_given,
    daily_received, daily_given,
    weekly_received, weekly_given,
    monthly_received, monthly_given,
    last_daily_reset, last_weekly_reset, last_monthly_reset,
    version, created_at, updated_at
"""

_GET_ACCOUNT_SQL = text(f"""
    SELECT {_ACCOUNT_COLUMNS}
    FROM accounts
    WHERE user_id = :user_id
""")

_LOCK_ACCOUNT_SQL = text(f"""
    SELECT {_ACCOUNT_COLUMNS}
    FROM accounts
    WHERE user_id = :user_id
    FOR UPDATE
""")

_LIST_ACCOUNTS_SQL = text(f"""
    SELECT {_ACCOUNT_COLUMNS}
    FROM accounts
    ORDER BY user_id
""")

_ACCOUNT_EXISTS_SQL = text("SELECT 1 FROM accounts WHERE user_id = :user_id")

_SAVE_ACCOUNT_SQL = text(f"""
    UPDATE accounts
    SET all_time_received  = :all_time_received,
        all_time_given     = :all_time_given,
        daily_received     = :daily_received,
        daily_given        = :daily_given,
        weekly_received    = :weekly_received,
        weekly_given       = :weekly_given,
        monthly_received   = :monthly_received,
        monthly_given      = :monthly_given,
        last_daily_reset   = :last_daily_reset,
        last_weekly_reset  = :last_weekly_reset,
        last_monthly_reset = :last_monthly_reset,
        version = version + 1,
        updated_at = NOW()
    WHERE user_id = :user_id AND version = :version
    RETURNING {_ACCOUNT_COLUMNS}
""")


def _row_to_account(row: object) -> Account:
    return Account(
        user_id=row.user_id,  # type: ignore[attr-defined]
        name=row.name,  # type: ignore[attr-defined]
        product=row.product,  # type: ignore[attr-defined]
        all_time_received=row.all_time_received,  # type: ignore[attr-defined]
        all_time_given=row.all_time_given,  # type: ignore[attr-defined]
        daily_received=row.daily_received,  # type: ignore[attr-defined]
        daily_given=row.daily_given,  # type: ignore[attr-defined]
        weekly_received=row.weekly_received,  # type: ignore[attr-defined]
        weekly_given=row.weekly_given,  # type: ignore[attr-defined]
        monthly_received=row.monthly_received,  # type: ignore[attr-defined]
        monthly_given=row.monthly_given,  # type: ignore[attr-defined]
        last_daily_reset=row.last_daily_reset,  # type: ignore[attr-defined]
        last_weekly_reset=row.last_weekly_reset,  # type: ignore[attr-defined]
        last_monthly_reset=row.last_monthly_reset,  # type: ignore[attr-defined]
        version=row.version,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


class AccountRepository:
    """Concrete repository — raw SQL against the accounts table."""

    async def get_account(self, db: AsyncSession, user_id: str) -> Account | None:
        result = await db.execute(_GET_ACCOUNT_SQL, {"user_id": user_id})
        row = result.fetchone()
        return _row_to_account(row) if row else None

    async def lock_account(self, db: AsyncSession, user_id: str) -> Account | None:
        """SELECT ... FOR UPDATE — holds the row lock until the caller's transaction ends."""
        result = await db.execute(_LOCK_ACCOUNT_SQL, {"user_id": user_id})
        row = result.fetchone()
        return _row_to_account(row) if row else None

    async def list_accounts(self, db: AsyncSession) -> list[Account]:
        result = await db.execute(_LIST_ACCOUNTS_SQL)
        return [_row_to_account(row) for row in result.fetchall()]

    async def account_exists(self, db: AsyncSession, user_id: str) -> bool:
        result = await db.execute(_ACCOUNT_EXISTS_SQL, {"user_id": user_id})
        return result.fetchone() is not None

    async def save_account(self, db: AsyncSession, account: Account) -> Account:
        result = await db.execute(
            _SAVE_ACCOUNT_SQL,
            {
                "user_id": account.user_id,
                "version": account.version,
                "all_time_received": account.all_time_received,
                "all_time_given": account.all_time_given,
                "daily_received": account.daily_received,
                "daily_given": account.daily_given,
                "weekly_received": account.weekly_received,
                "weekly_given": account.weekly_given,
                "monthly_received": account.monthly_received,
                "monthly_given": account.monthly_given,
                "last_daily_reset": account.last_daily_reset,
                "last_weekly_reset": account.last_weekly_reset,
                "last_monthly_reset": account.last_monthly_reset,
            },
        )
        row = result.fetchone()
        if row is None:
            logger.warning(
                "Stale write on account %s (version %d)", account.user_id, account.version
            )
            raise ConcurrencyConflictError(
                f"Account {account.user_id} was modified concurrently"
            )
        return _row_to_account(row)
