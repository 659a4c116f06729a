"""Integration-test fixtures.

Requires a migrated PostgreSQL (alembic upgrade head); collected only when
RUN_INTEGRATION=1. All integration tests share a single event-loop so that the
module-level SQLAlchemy async engine pool (created at import time) remains
valid across the entire test session.
"""

import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

if not os.environ.get("RUN_INTEGRATION"):
    collect_ignore_glob = ["test_*.py"]

from src.main import app  # noqa: E402
from src.vt_common.database import async_session_factory  # noqa: E402

_INSERT_ACCOUNT_SQL = text("""
    INSERT INTO accounts (user_id, name, product, last_daily_reset, last_weekly_reset, last_monthly_reset)
    VALUES (:user_id, :name, NULL, NULL, NULL, NULL)
""")


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    """Session-scoped async HTTP client — keeps the engine pool alive."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(loop_scope="session")
async def users(client: AsyncClient) -> tuple[str, str]:
    """Two fresh accounts (sender, recipient) with untouched counters."""
    uid = uuid.uuid4().hex[:8]
    sender, recipient = f"snd_{uid}", f"rcv_{uid}"
    async with async_session_factory() as db:
        await db.execute(_INSERT_ACCOUNT_SQL, {"user_id": sender, "name": f"보내는이{uid}"})
        await db.execute(_INSERT_ACCOUNT_SQL, {"user_id": recipient, "name": f"받는이{uid}"})
        await db.commit()
    return sender, recipient
