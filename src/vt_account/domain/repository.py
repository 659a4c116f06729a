"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_account.domain.models import Account


class AccountRepositoryProtocol(Protocol):
    async def get_account(self, db: AsyncSession, user_id: str) -> Account | None: ...

    async def lock_account(self, db: AsyncSession, user_id: str) -> Account | None: ...

    async def save_account(self, db: AsyncSession, account: Account) -> Account: ...

    async def list_accounts(self, db: AsyncSession) -> list[Account]: ...

    async def account_exists(self, db: AsyncSession, user_id: str) -> bool: ...
