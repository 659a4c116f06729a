"""Unit-test fixtures built on the in-memory repositories in ledger_fakes."""

import pytest
from ledger_fakes import (
    KST,
    NOW,
    FakeAccountRepository,
    FakeActivityRepository,
    FakeStore,
    FakeTransferRepository,
    make_account,
)

from src.vt_transfer.application.service import TransferApplicationService


@pytest.fixture
def store() -> FakeStore:
    s = FakeStore()
    s.add(make_account("taewook", "태욱", product="비즈니스 실행 코칭"))
    s.add(make_account("dowan", "도완"))
    return s


@pytest.fixture
def accounts_repo(store: FakeStore) -> FakeAccountRepository:
    return FakeAccountRepository(store)


@pytest.fixture
def transfer_service(
    store: FakeStore, accounts_repo: FakeAccountRepository
) -> TransferApplicationService:
    return TransferApplicationService(
        accounts=accounts_repo,
        transfers=FakeTransferRepository(store),
        activities=FakeActivityRepository(store),
        clock=lambda: NOW,
        tz=KST,
    )
