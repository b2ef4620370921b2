import pytest

from portal.security.demo_accounts import DEMO_ACCOUNTS
from portal.storage.snapshot_store import SnapshotStorage


@pytest.fixture
def storage(tmp_path):
    return SnapshotStorage(str(tmp_path / "portal"))


@pytest.fixture
def accounts():
    """Demo accounts keyed by base role (first account per role)."""
    by_role = {}
    for account in DEMO_ACCOUNTS:
        by_role.setdefault(account.role, account)
    return by_role
