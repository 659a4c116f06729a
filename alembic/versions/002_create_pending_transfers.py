"""002: create pending_transfers table

Revision ID: 002
Revises: 001
Create Date: 2026-10-16
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE pending_transfers (
            id              UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
            to_user_id      VARCHAR(64) NOT NULL REFERENCES accounts(user_id) ON DELETE CASCADE,
            from_user_id    VARCHAR(64) NOT NULL REFERENCES accounts(user_id) ON DELETE CASCADE,
            from_name       TEXT        NOT NULL,
            amount          INTEGER     NOT NULL,
            note            TEXT,
            created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_pending_transfers_amount_gt_0 CHECK (amount > 0)
        );
    """)
    op.execute("CREATE INDEX idx_pending_transfers_to_user ON pending_transfers (to_user_id);")
    op.execute("CREATE INDEX idx_pending_transfers_from_user ON pending_transfers (from_user_id);")
    op.execute("CREATE INDEX idx_pending_transfers_created ON pending_transfers (created_at DESC);")
    op.execute("COMMENT ON TABLE pending_transfers IS 'Offered transfers awaiting acceptance — deleted on settlement, never updated';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS pending_transfers CASCADE;")
