from portal.core.route_guard import GuardState, RouteGuard, evaluate
from portal.core.session_store import SessionStore
from portal.security.roles import DASHBOARD_PATH, LOGIN_PATH


def test_no_decision_while_loading():
    decision = evaluate(None, True, DASHBOARD_PATH)
    assert decision.state == GuardState.UNKNOWN
    assert decision.redirect_to is None


def test_no_redirect_on_login_page():
    decision = evaluate(None, False, LOGIN_PATH)
    assert decision.state == GuardState.UNAUTHENTICATED
    assert decision.redirect_to is None


def test_guard_waits_for_hydration(storage):
    session = SessionStore(storage)
    targets = []
    guard = RouteGuard(on_redirect=targets.append)

    guard.attach(session)
    assert guard.state == GuardState.UNKNOWN
    assert guard.redirects == []

    session.hydrate()

    assert guard.state == GuardState.UNAUTHENTICATED
    assert guard.redirects == [LOGIN_PATH]
    assert targets == [LOGIN_PATH]
    assert guard.path == LOGIN_PATH


def test_persisted_session_never_redirects(storage, accounts):
    SessionStore(storage).login(accounts["manager"])

    session = SessionStore(storage)
    guard = RouteGuard()
    guard.attach(session)
    session.hydrate()

    assert guard.state == GuardState.AUTHENTICATED
    assert guard.redirects == []


def test_guard_follows_login_and_logout(storage, accounts):
    session = SessionStore(storage)
    guard = RouteGuard()
    guard.attach(session)
    session.hydrate()

    session.login(accounts["employee"])
    guard.navigate(DASHBOARD_PATH, session)
    assert guard.state == GuardState.AUTHENTICATED
    assert guard.path == DASHBOARD_PATH

    session.logout()
    assert guard.state == GuardState.UNAUTHENTICATED
    assert guard.path == LOGIN_PATH
    assert guard.redirects == [LOGIN_PATH, LOGIN_PATH]


def test_detached_guard_stops_observing(storage, accounts):
    session = SessionStore(storage)
    guard = RouteGuard()
    unsubscribe = guard.attach(session)
    unsubscribe()

    session.hydrate()

    assert guard.state == GuardState.UNKNOWN
