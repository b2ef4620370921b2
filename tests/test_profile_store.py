import pytest

from portal.core.profile_store import INITIAL_REWARD_POINTS, NOMINATION_POINTS, ProfileStore
from portal.core.session_store import SessionStore


@pytest.fixture
def session(storage):
    return SessionStore(storage)


@pytest.fixture
def profiles(storage, session):
    store = ProfileStore(storage)
    store.attach(session)
    return store


def test_no_profile_while_loading_or_signed_out(session, profiles):
    assert profiles.profile is None
    session.hydrate()
    assert profiles.profile is None


def test_login_creates_default_profile(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["hr"])

    assert profiles.email == "hr@example.com"
    assert profiles.profile["personal"]["name"] == "HR User"
    assert profiles.profile["rewards"]["points"] == INITIAL_REWARD_POINTS


def test_role_switch_keeps_profile_edits(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["admin"])
    profiles.update_personal_information({"phone": "+91 98450 00000"})

    session.set_current_role("manager")

    assert profiles.profile["personal"]["phone"] == "+91 98450 00000"


def test_initialize_is_idempotent_by_email(storage, session, profiles, accounts):
    session.hydrate()
    session.login(accounts["manager"])
    profiles.update_personal_information({"address": "Bengaluru"})

    reloaded = SessionStore(storage)
    reloaded.hydrate()
    same_user = profiles.initialize_profile_for_user(reloaded.user)

    assert reloaded.user is not session.user
    assert same_user["personal"]["address"] == "Bengaluru"


def test_switching_users_loads_other_profile(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["manager"])
    profiles.update_personal_information({"address": "Mysuru"})

    session.login(accounts["employee"])
    assert profiles.email == "employee@example.com"
    assert profiles.profile["personal"]["address"] == ""

    session.login(accounts["manager"])
    assert profiles.profile["personal"]["address"] == "Mysuru"


def test_logout_clears_in_memory_profile(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["employee"])

    session.logout()

    assert profiles.profile is None


def test_company_email_is_not_editable(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["employee"])

    profiles.update_personal_information({"companyEmail": "me@elsewhere.com", "name": "Emp"})

    assert profiles.email == "employee@example.com"
    assert profiles.profile["personal"]["name"] == "Emp"


def test_nomination_awards_points(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["teamlead"])

    profile = profiles.add_nomination("Bob Employee", "Shipped the release", "Team Player")

    assert profile["rewards"]["points"] == INITIAL_REWARD_POINTS + NOMINATION_POINTS
    assert profile["rewards"]["nominations"][0]["nominee"] == "Bob Employee"


def test_nomination_validation(session, profiles, accounts):
    session.hydrate()
    session.login(accounts["teamlead"])

    with pytest.raises(ValueError):
        profiles.add_nomination("Bob Employee", "reason", "Best Dressed")
    with pytest.raises(ValueError):
        profiles.add_nomination("", "reason", "Innovation")


def test_edits_require_profile(storage):
    with pytest.raises(RuntimeError):
        ProfileStore(storage).update_personal_information({"name": "X"})
