"""004: seed the eight participant accounts

Revision ID: 004
Revises: 003
Create Date: 2026-10-16
"""

from typing import Sequence, Union

from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ACCOUNTS = (
    ("taewook", "태욱", "비즈니스 실행 코칭"),
    ("dowan", "도완", "유튜브 컨설팅 코칭"),
    ("hayeon", "하연", "라이프사이클 코칭"),
    ("euna", "은아", "자본주의 머니 코칭"),
    ("ray", "래이", "우주머니액팅 코칭"),
    ("saerom", "새롬", "CRM 개발 코칭"),
    ("jieun", "지은", "닐스 기획 코칭"),
    ("jinseul", "진슬", "스레드 분석기 코칭"),
)


def upgrade() -> None:
    # Markers start at the current period starts so nothing resets on first access
    values = ",\n".join(
        f"('{user_id}', '{name}', '{product}', CURRENT_DATE, "
        "DATE_TRUNC('week', CURRENT_DATE)::DATE, DATE_TRUNC('month', CURRENT_DATE)::DATE)"
        for user_id, name, product in _ACCOUNTS
    )
    op.execute(f"""
        INSERT INTO accounts
            (user_id, name, product, last_daily_reset, last_weekly_reset, last_monthly_reset)
        VALUES
            {values}
        ON CONFLICT (user_id) DO NOTHING;
    """)


def downgrade() -> None:
    ids = ", ".join(f"'{user_id}'" for user_id, _, _ in _ACCOUNTS)
    op.execute(f"DELETE FROM accounts WHERE user_id IN ({ids});")
