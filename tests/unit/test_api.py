"""HTTP-level tests: routers wired to in-memory repositories through dependency overrides."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from ledger_fakes import (
    KST,
    NOW,
    FakeAccountRepository,
    FakeActivityRepository,
    FakeSession,
    FakeStore,
)

from config.settings import settings
from src.main import app
from src.vt_account.api import router as account_router
from src.vt_account.application.service import AccountApplicationService
from src.vt_activity.api import router as activity_router
from src.vt_activity.application.service import ActivityApplicationService
from src.vt_common.database import get_db_session
from src.vt_transfer.api import router as transfer_router
from src.vt_transfer.application.service import TransferApplicationService

ME = {"X-User-Id": "dowan"}


@pytest.fixture
async def api(
    client: AsyncClient,
    store: FakeStore,
    accounts_repo: FakeAccountRepository,
    transfer_service: TransferApplicationService,
    monkeypatch: pytest.MonkeyPatch,
) -> AsyncClient:
    """The shared client, with every router wired to the in-memory store."""

    async def _fake_session() -> AsyncGenerator[FakeSession, None]:
        yield FakeSession()

    monkeypatch.setattr(transfer_router, "_service", transfer_service)
    monkeypatch.setattr(account_router, "_transfers", transfer_service)
    monkeypatch.setattr(
        account_router, "_service",
        AccountApplicationService(repo=accounts_repo, clock=lambda: NOW, tz=KST),
    )
    monkeypatch.setattr(
        activity_router, "_service", ActivityApplicationService(repo=FakeActivityRepository(store))
    )
    app.dependency_overrides[get_db_session] = _fake_session
    return client


class TestIdentity:
    async def test_missing_header_is_401(self, api: AsyncClient) -> None:
        resp = await api.post("/api/v1/transfers/accept-all")
        assert resp.status_code == 401
        body = resp.json()
        assert body["code"] == 1001
        assert body["data"]["success"] is False

    async def test_blank_header_is_401(self, api: AsyncClient) -> None:
        resp = await api.get("/api/v1/accounts/me", headers={"X-User-Id": "  "})
        assert resp.status_code == 401


class TestAccountEndpoints:
    async def test_me_includes_pending_total(self, api: AsyncClient, store: FakeStore) -> None:
        store.add_transfer("dowan", "taewook", 10)
        store.add_transfer("dowan", "taewook", 15)

        resp = await api.get("/api/v1/accounts/me", headers=ME)

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["user_id"] == "dowan"
        assert data["pending_total"] == 25
        assert data["all_time_received"] == 0

    async def test_unknown_account_is_404(self, api: AsyncClient) -> None:
        resp = await api.get("/api/v1/accounts/ghost")
        assert resp.status_code == 404
        assert resp.json()["code"] == 2001

    async def test_rankings(self, api: AsyncClient, store: FakeStore) -> None:
        t = store.add_transfer("dowan", "taewook", 10)
        await api.post(f"/api/v1/transfers/{t.id}/accept", headers=ME)

        resp = await api.get("/api/v1/accounts/rankings", params={"period": "daily"})

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["period"] == "daily"
        assert [(i["rank"], i["user_id"], i["received"]) for i in data["items"]] == [
            (1, "dowan", 10),
            (2, "taewook", 0),
        ]

    async def test_rankings_unknown_period(self, api: AsyncClient) -> None:
        resp = await api.get("/api/v1/accounts/rankings", params={"period": "yearly"})
        assert resp.status_code == 422


class TestTransferEndpoints:
    async def test_send_and_list(self, api: AsyncClient, store: FakeStore) -> None:
        resp = await api.post(
            "/api/v1/transfers",
            json={"to_user_id": "dowan", "amount": 30, "note": "응원해요"},
            headers={"X-User-Id": "taewook"},
        )
        assert resp.status_code == 201
        sent = resp.json()["data"]
        assert sent["from_name"] == "태욱"
        assert store.accounts["taewook"].all_time_given == 30

        pending = (await api.get("/api/v1/transfers/pending", headers=ME)).json()["data"]
        assert pending["count"] == 1
        assert pending["total_amount"] == 30
        assert pending["items"][0]["id"] == sent["id"]

        total = (await api.get("/api/v1/transfers/pending/total", headers=ME)).json()["data"]
        assert total == {"user_id": "dowan", "total_amount": 30}

        outgoing = await api.get("/api/v1/transfers/sent", headers={"X-User-Id": "taewook"})
        assert outgoing.json()["data"]["count"] == 1

    async def test_send_zero_is_invalid_amount(self, api: AsyncClient, store: FakeStore) -> None:
        resp = await api.post(
            "/api/v1/transfers", json={"to_user_id": "dowan", "amount": 0},
            headers={"X-User-Id": "taewook"},
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 3001
        assert store.transfers == {}

    async def test_send_to_self(self, api: AsyncClient) -> None:
        resp = await api.post(
            "/api/v1/transfers", json={"to_user_id": "dowan", "amount": 5}, headers=ME
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 3004

    async def test_accept_one(self, api: AsyncClient, store: FakeStore) -> None:
        t = store.add_transfer("dowan", "taewook", 50)

        resp = await api.post(f"/api/v1/transfers/{t.id}/accept", headers=ME)

        assert resp.status_code == 200
        assert resp.json()["data"] == {
            "success": True, "transfer_id": t.id, "amount": 50, "from_name": "태욱",
        }
        assert store.accounts["dowan"].all_time_received == 50

    async def test_accept_one_twice(self, api: AsyncClient, store: FakeStore) -> None:
        t = store.add_transfer("dowan", "taewook", 50)
        await api.post(f"/api/v1/transfers/{t.id}/accept", headers=ME)

        resp = await api.post(f"/api/v1/transfers/{t.id}/accept", headers=ME)

        assert resp.status_code == 404
        body = resp.json()
        assert body["code"] == 3002
        assert body["data"]["success"] is False
        assert store.accounts["dowan"].all_time_received == 50

    async def test_accept_someone_elses_transfer(self, api: AsyncClient, store: FakeStore) -> None:
        t = store.add_transfer("taewook", "dowan", 50)
        resp = await api.post(f"/api/v1/transfers/{t.id}/accept", headers=ME)
        assert resp.status_code == 404
        assert t.id in store.transfers

    async def test_accept_all(self, api: AsyncClient, store: FakeStore) -> None:
        for amount in (10, 20, 30):
            store.add_transfer("dowan", "taewook", amount)

        resp = await api.post("/api/v1/transfers/accept-all", headers=ME)

        assert resp.status_code == 200
        assert resp.json()["data"] == {"success": True, "amount": 60, "count": 3}

    async def test_accept_all_empty(self, api: AsyncClient) -> None:
        resp = await api.post("/api/v1/transfers/accept-all", headers=ME)
        assert resp.status_code == 404
        assert resp.json()["code"] == 3003


class TestActivityEndpoint:
    async def test_feed_after_settlement(self, api: AsyncClient, store: FakeStore) -> None:
        store.add_transfer("dowan", "taewook", 10)
        store.add_transfer("dowan", "taewook", 20)
        await api.post("/api/v1/transfers/accept-all", headers=ME)

        resp = await api.get("/api/v1/activities", params={"user_id": "dowan"})

        assert resp.status_code == 200
        items = resp.json()["data"]["items"]
        assert [i["message"] for i in items] == ["2건, 총 30VT 수령!"]

    async def test_limit_out_of_range(self, api: AsyncClient) -> None:
        resp = await api.get("/api/v1/activities", params={"limit": 0})
        assert resp.status_code == 422

    async def test_limit_follows_configured_cap(
        self, api: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        repo = AsyncMock()
        repo.list_recent.return_value = []
        monkeypatch.setattr(activity_router, "_service", ActivityApplicationService(repo=repo))
        monkeypatch.setattr(settings, "ACTIVITY_PAGE_LIMIT", 250)

        raised = await api.get("/api/v1/activities", params={"limit": 200})
        capped = await api.get("/api/v1/activities", params={"limit": 1000})

        assert raised.status_code == 200
        assert capped.status_code == 200
        assert [c.args[1] for c in repo.list_recent.await_args_list] == [200, 250]


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
