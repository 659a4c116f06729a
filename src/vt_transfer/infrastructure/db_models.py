"""SQLAlchemy ORM model for pending_transfers.

Maps to the table created by Alembic migration 003.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.vt_common.database import Base


class PendingTransferORM(Base):
    __tablename__ = "pending_transfers"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    to_user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("accounts.user_id", ondelete="CASCADE"), nullable=False
    )
    from_user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("accounts.user_id", ondelete="CASCADE"), nullable=False
    )
    from_name: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    # NOTE: No updated_at — rows are inserted once and deleted on settlement
