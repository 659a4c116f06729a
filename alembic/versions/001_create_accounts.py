"""001: create accounts table

Revision ID: 001
Revises: 
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE accounts (
            user_id             VARCHAR(64) PRIMARY KEY,
            name                TEXT        NOT NULL,
            product             TEXT,
            all_time_received   INTEGER     NOT NULL DEFAULT 0,
            all_time_given      INTEGER     NOT NULL DEFAULT 0,
            daily_received      INTEGER     NOT NULL DEFAULT 0,
            daily_given         INTEGER     NOT NULL DEFAULT 0,
            weekly_received     INTEGER     NOT NULL DEFAULT 0,
            weekly_given        INTEGER     NOT NULL DEFAULT 0,
            monthly_received    INTEGER     NOT NULL DEFAULT 0,
            monthly_given       INTEGER     NOT NULL DEFAULT 0,
            last_daily_reset    DATE,
            last_weekly_reset   DATE,
            last_monthly_reset  DATE,
            version             BIGINT      NOT NULL DEFAULT 0,
            created_at          TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at          TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_accounts_all_time_received_gte_0  CHECK (all_time_received >= 0),
            CONSTRAINT ck_accounts_all_time_given_gte_0     CHECK (all_time_given >= 0),
            CONSTRAINT ck_accounts_daily_received_gte_0     CHECK (daily_received >= 0),
            CONSTRAINT ck_accounts_daily_given_gte_0        CHECK (daily_given >= 0),
            CONSTRAINT ck_accounts_weekly_received_gte_0    CHECK (weekly_received >= 0),
            CONSTRAINT ck_accounts_weekly_given_gte_0       CHECK (weekly_given >= 0),
            CONSTRAINT ck_accounts_monthly_received_gte_0   CHECK (monthly_received >= 0),
            CONSTRAINT ck_accounts_monthly_given_gte_0      CHECK (monthly_given >= 0)
        );
    """)
    op.execute("COMMENT ON TABLE accounts IS 'Per-user value token counters — period counters reset lazily on access';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS accounts CASCADE;")
