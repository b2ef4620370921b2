import pytest

from portal.core.session_store import (
    AUTH_STORAGE,
    SessionStore,
    auth_storage_name,
    is_valid_client_id,
    new_client_id,
)
from portal.security.demo_accounts import Account
from portal.security.roles import ALL_ROLES, ROLE_SWITCH_PERMISSIONS

DISALLOWED_SWITCHES = [
    (base, target)
    for base in ALL_ROLES
    for target in ALL_ROLES + ["intern", ""]
    if target != base and target not in ROLE_SWITCH_PERMISSIONS[base]
]


def _signed_in(storage, account):
    session = SessionStore(storage)
    session.hydrate()
    session.login(account)
    return session


def test_starts_loading_until_hydrated(storage):
    session = SessionStore(storage)
    assert session.loading is True
    assert session.user is None

    session.hydrate()

    assert session.loading is False
    assert session.user is None


def test_login_sets_base_and_current_role(storage, accounts):
    session = _signed_in(storage, accounts["manager"])

    assert session.user.base_role.value == "manager"
    assert session.user.current_role.value == "manager"
    assert [r.value for r in session.user.roles] == ["manager", "teamlead", "employee"]


def test_login_rejects_unknown_role(storage):
    session = SessionStore(storage)
    with pytest.raises(ValueError):
        session.login(Account("X1", "Ghost", "ghost@example.com", "intern"))
    assert session.user is None


def test_admin_switches_down_and_back(storage, accounts):
    session = _signed_in(storage, accounts["admin"])

    assert session.set_current_role("manager") is True
    assert session.user.current_role.value == "manager"
    assert session.user.base_role.value == "admin"

    assert session.set_current_role("admin") is True
    assert session.user.current_role.value == "admin"


def test_rejected_switch_changes_nothing(storage, accounts):
    session = _signed_in(storage, accounts["teamlead"])
    before = storage.read(AUTH_STORAGE)

    assert session.set_current_role("admin") is False
    assert session.user.current_role.value == "teamlead"
    assert storage.read(AUTH_STORAGE) == before


@pytest.mark.parametrize("base,target", DISALLOWED_SWITCHES)
def test_disallowed_switch_is_rejected_for_every_role(storage, base, target):
    session = _signed_in(storage, Account("U1", "N", "n@example.com", base))
    before = storage.read(AUTH_STORAGE)

    assert session.set_current_role(target) is False
    assert session.user.current_role.value == base
    assert session.user.base_role.value == base
    assert storage.read(AUTH_STORAGE) == before


def test_switch_to_current_role_succeeds_without_writing(storage, accounts):
    session = _signed_in(storage, accounts["manager"])
    session.set_current_role("teamlead")
    before = storage.read(AUTH_STORAGE)
    seen = []
    session.subscribe(lambda s: seen.append(s.user))

    assert session.set_current_role("teamlead") is True
    assert session.user.current_role.value == "teamlead"
    assert storage.read(AUTH_STORAGE) == before
    assert seen == []


def test_switch_without_user_fails(storage):
    session = SessionStore(storage)
    session.hydrate()

    assert session.set_current_role("admin") is False
    assert session.reset_to_base_role() is False
    assert session.get_available_roles_for_switching() == []


def test_reset_to_base_role(storage, accounts):
    session = _signed_in(storage, accounts["superadmin"])
    session.set_current_role("accounts")

    assert session.reset_to_base_role() is True
    assert session.user.current_role.value == "superadmin"


def test_switched_role_survives_reload(storage, accounts):
    session = _signed_in(storage, accounts["admin"])
    session.set_current_role("hr")

    restored = SessionStore(storage)
    restored.hydrate()

    assert restored.user.email == "admin@example.com"
    assert restored.user.base_role.value == "admin"
    assert restored.user.current_role.value == "hr"


def test_impermissible_persisted_role_falls_back_to_base(storage):
    storage.write(AUTH_STORAGE, {"user": {
        "id": "USR004",
        "name": "Team Lead User",
        "email": "teamlead@example.com",
        "baseRole": "teamlead",
        "currentRole": "admin",
    }})

    session = SessionStore(storage)
    session.hydrate()

    assert session.user.current_role.value == "teamlead"


@pytest.mark.parametrize("state,version", [
    ({"user": {"id": "U1", "name": "N", "email": "e@example.com", "baseRole": "intern"}}, 0),
    ({"user": {"id": "U1", "baseRole": "admin"}}, 0),
    ({"user": {"id": "U1", "name": "N", "email": "e@example.com", "baseRole": "admin"}}, 5),
])
def test_bad_snapshot_hydrates_signed_out(storage, state, version):
    storage.write(AUTH_STORAGE, state, version=version)

    session = SessionStore(storage)
    session.hydrate()

    assert session.loading is False
    assert session.user is None


def test_logout_clears_persistence(storage, accounts):
    session = _signed_in(storage, accounts["hr"])
    assert storage.exists(AUTH_STORAGE)

    session.logout()

    assert session.user is None
    assert not storage.exists(AUTH_STORAGE)

    restored = SessionStore(storage)
    restored.hydrate()
    assert restored.user is None


def test_subscribers_notified_until_unsubscribed(storage, accounts):
    session = SessionStore(storage)
    seen = []
    unsubscribe = session.subscribe(lambda s: seen.append(s.user))

    session.hydrate()
    session.login(accounts["employee"])
    unsubscribe()
    session.logout()

    assert len(seen) == 2
    assert seen[1].email == "employee@example.com"


# ==================================================
# PER-BROWSER SNAPSHOTS
# ==================================================

def test_auth_storage_name_per_client():
    client_id = new_client_id()

    assert is_valid_client_id(client_id)
    assert auth_storage_name() == AUTH_STORAGE
    assert auth_storage_name(client_id) == f"{AUTH_STORAGE}-{client_id}"
    assert auth_storage_name(client_id) != auth_storage_name(new_client_id())


@pytest.mark.parametrize("client_id", ["../x", "short", "a/b/c/d/e/f", "x" * 65, "", 12345678])
def test_invalid_client_ids_rejected(client_id):
    assert is_valid_client_id(client_id) is False
    with pytest.raises(ValueError):
        auth_storage_name(client_id)


def test_sessions_on_different_snapshots_are_independent(storage, accounts):
    first = SessionStore(storage, auth_storage_name("browser-one"))
    first.hydrate()
    first.login(accounts["admin"])

    second = SessionStore(storage, auth_storage_name("browser-two"))
    second.hydrate()
    assert second.user is None

    second.logout()

    assert storage.exists(auth_storage_name("browser-one"))
    restored = SessionStore(storage, auth_storage_name("browser-one"))
    restored.hydrate()
    assert restored.user.email == "admin@example.com"
