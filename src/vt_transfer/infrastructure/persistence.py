# src/vt_transfer/infrastructure/persistence.py
"""TransferRepository — raw SQL persistence for pending_transfers.

Removal is always DELETE ... RETURNING: finding a transfer and taking it out
of the queue is one statement, so two settlements can never both see it.
"""
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.vt_common.errors import InternalError
from src.vt_transfer.domain.models import PendingTransfer

# ---------------------------------------------------------------------------
# SQL statements
# ---------------------------------------------------------------------------

_COLUMNS = "id, to_user_id, from_user_id, from_name, amount, note, created_at"

_INSERT_SQL = text(f"""
    INSERT INTO pending_transfers (to_user_id, from_user_id, from_name, amount, note)
    VALUES (:to_user_id, :from_user_id, :from_name, :amount, :note)
    RETURNING {_COLUMNS}
""")

_GET_RECIPIENT_SQL = text("SELECT to_user_id FROM pending_transfers WHERE id = :id")

_DELETE_BY_ID_SQL = text(f"""
    DELETE FROM pending_transfers
    WHERE id = :id
    RETURNING {_COLUMNS}
""")

_DELETE_ALL_FOR_RECIPIENT_SQL = text(f"""
    DELETE FROM pending_transfers
    WHERE to_user_id = :to_user_id
    RETURNING {_COLUMNS}
""")

_TOTAL_PENDING_SQL = text("""
    SELECT COALESCE(SUM(amount), 0)
    FROM pending_transfers
    WHERE to_user_id = :to_user_id
""")

# Newest first, id breaks ties between rows created in the same transaction
_LIST_PENDING_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM pending_transfers
    WHERE to_user_id = :to_user_id
    ORDER BY created_at DESC, id DESC
""")

_LIST_SENT_SQL = text(f"""
    SELECT {_COLUMNS}
    FROM pending_transfers
    WHERE from_user_id = :from_user_id
    ORDER BY created_at DESC, id DESC
""")


def _row_to_transfer(row: object) -> PendingTransfer:
    return PendingTransfer(
        id=str(row.id),  # type: ignore[attr-defined]
        to_user_id=row.to_user_id,  # type: ignore[attr-defined]
        from_user_id=row.from_user_id,  # type: ignore[attr-defined]
        from_name=row.from_name,  # type: ignore[attr-defined]
        amount=row.amount,  # type: ignore[attr-defined]
        note=row.note,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


class TransferRepository:
    async def insert(
        self,
        db: AsyncSession,
        to_user_id: str,
        from_user_id: str,
        from_name: str,
        amount: int,
        note: str | None,
    ) -> PendingTransfer:
        result = await db.execute(
            _INSERT_SQL,
            {
                "to_user_id": to_user_id,
                "from_user_id": from_user_id,
                "from_name": from_name,
                "amount": amount,
                "note": note,
            },
        )
        row = result.fetchone()
        if row is None:
            raise InternalError("Transfer insert returned no rows")
        return _row_to_transfer(row)

    async def get_recipient(self, db: AsyncSession, transfer_id: str) -> str | None:
        result = await db.execute(_GET_RECIPIENT_SQL, {"id": UUID(transfer_id)})
        row = result.fetchone()
        return row.to_user_id if row else None

    async def delete_by_id(self, db: AsyncSession, transfer_id: str) -> PendingTransfer | None:
        result = await db.execute(_DELETE_BY_ID_SQL, {"id": UUID(transfer_id)})
        row = result.fetchone()
        return _row_to_transfer(row) if row else None

    async def delete_all_for_recipient(
        self, db: AsyncSession, to_user_id: str
    ) -> list[PendingTransfer]:
        result = await db.execute(_DELETE_ALL_FOR_RECIPIENT_SQL, {"to_user_id": to_user_id})
        return [_row_to_transfer(row) for row in result.fetchall()]

    async def total_pending(self, db: AsyncSession, to_user_id: str) -> int:
        result = await db.execute(_TOTAL_PENDING_SQL, {"to_user_id": to_user_id})
        return int(result.scalar_one())

    async def list_pending(self, db: AsyncSession, to_user_id: str) -> list[PendingTransfer]:
        result = await db.execute(_LIST_PENDING_SQL, {"to_user_id": to_user_id})
        return [_row_to_transfer(row) for row in result.fetchall()]

    async def list_sent(self, db: AsyncSession, from_user_id: str) -> list[PendingTransfer]:
        result = await db.execute(_LIST_SENT_SQL, {"from_user_id": from_user_id})
        return [_row_to_transfer(row) for row in result.fetchall()]
