"""SQLAlchemy ORM models for vt_account.

These map to existing tables created by Alembic migrations.
DO NOT add/remove columns here without a corresponding migration.
"""

from datetime import date, datetime

from sqlalchemy import BigInteger, Date, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from src.vt_common.database import Base


class AccountORM(Base):
    __tablename__ = "accounts"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    product: Mapped[str | None] = mapped_column(Text, nullable=True)
    all_time_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    all_time_given: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    daily_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    daily_given: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    weekly_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    weekly_given: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    monthly_received: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    monthly_given: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_daily_reset: Mapped[date | None] = mapped_column(Date, nullable=True)
    last_weekly_reset: Mapped[date | None] = mapped_column(Date, nullable=True)
    last_monthly_reset: Mapped[date | None] = mapped_column(Date, nullable=True)
    version: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
