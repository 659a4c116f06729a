"""003: create activities table

Revision ID: 003
Revises: 002
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE activities (
            id          UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id     VARCHAR(64) REFERENCES accounts(user_id) ON DELETE SET NULL,
            message     TEXT        NOT NULL,
            created_at  TIMESTAMPTZ NOT NULL DEFAULT NOW()
        );
    """)
    op.execute("CREATE INDEX idx_activities_created ON activities (created_at DESC);")
    op.execute("CREATE INDEX idx_activities_user ON activities (user_id);")
    op.execute("COMMENT ON TABLE activities IS 'Settlement narrative — Append-Only, display only';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS activities CASCADE;")
