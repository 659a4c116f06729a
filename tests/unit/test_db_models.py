"""Schema checks: ORM mirrors, alembic revisions and the versioned account write."""

import re
from dataclasses import fields
from pathlib import Path

from src.vt_account.domain.models import Account
from src.vt_account.infrastructure.db_models import AccountORM
from src.vt_account.infrastructure.persistence import _SAVE_ACCOUNT_SQL
from src.vt_activity.domain.models import ActivityEntry
from src.vt_activity.infrastructure.db_models import ActivityORM
from src.vt_transfer.domain.models import PendingTransfer
from src.vt_transfer.infrastructure.db_models import PendingTransferORM

_VERSIONS = Path(__file__).resolve().parents[2] / "alembic" / "versions"


def _columns(orm: type) -> set[str]:
    return {c.name for c in orm.__table__.columns}  # type: ignore[attr-defined]


class TestTables:
    def test_accounts(self) -> None:
        assert AccountORM.__tablename__ == "accounts"
        assert _columns(AccountORM) == {f.name for f in fields(Account)}

    def test_pending_transfers(self) -> None:
        assert PendingTransferORM.__tablename__ == "pending_transfers"
        assert _columns(PendingTransferORM) == {f.name for f in fields(PendingTransfer)}

    def test_activities(self) -> None:
        assert ActivityORM.__tablename__ == "activities"
        assert _columns(ActivityORM) == {f.name for f in fields(ActivityEntry)}

    def test_transfer_foreign_keys_reference_accounts(self) -> None:
        targets = {
            fk.target_fullname for fk in PendingTransferORM.__table__.foreign_keys  # type: ignore[attr-defined]
        }
        assert targets == {"accounts.user_id"}


class TestMigrations:
    def test_no_triggers_behind_the_write_path(self) -> None:
        for path in sorted(_VERSIONS.glob("*.py")):
            assert "CREATE TRIGGER" not in path.read_text(encoding="utf-8"), path.name

    def test_revisions_form_one_chain(self) -> None:
        chain: dict[str, str] = {}
        for path in _VERSIONS.glob("*.py"):
            source = path.read_text(encoding="utf-8")
            revision = re.search(r'^revision: str = "(\w+)"', source, re.M)
            parent = re.search(r"^down_revision: [^=]+= (None|\"\w+\")", source, re.M)
            assert revision and parent, path.name
            chain[revision.group(1)] = parent.group(1).strip('"')
        assert chain == {"001": "None", "002": "001", "003": "002", "004": "003"}

    def test_save_refreshes_updated_at(self) -> None:
        sql = str(_SAVE_ACCOUNT_SQL)
        assert "updated_at = NOW()" in sql
        assert "version = version + 1" in sql
