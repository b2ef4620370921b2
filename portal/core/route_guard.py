"""
ROUTE GUARD

Decide, from the session's (user, loading) pair, whether the current
page may render or the visitor must be sent to the login page.

States:
- UNKNOWN          session still hydrating; no decision, no redirect
- AUTHENTICATED    a user is present
- UNAUTHENTICATED  no user and hydration finished

Rules:
• Never redirect while loading
• Never redirect when already on the login page
• Re-evaluate on every session change, not once
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, TYPE_CHECKING

from portal.security.roles import LOGIN_PATH, DASHBOARD_PATH

if TYPE_CHECKING:
    from portal.core.session_store import Identity, SessionStore

logger = logging.getLogger(__name__)


class GuardState(str, Enum):
    UNKNOWN = "UNKNOWN"
    AUTHENTICATED = "AUTHENTICATED"
    UNAUTHENTICATED = "UNAUTHENTICATED"


@dataclass(frozen=True)
class GuardDecision:
    state: GuardState
    redirect_to: Optional[str] = None


def evaluate(user: Optional["Identity"], loading: bool, path: str) -> GuardDecision:
    """Pure guard decision for one (user, loading, path) observation."""
    if loading:
        return GuardDecision(GuardState.UNKNOWN)

    if user is not None:
        return GuardDecision(GuardState.AUTHENTICATED)

    if path == LOGIN_PATH:
        return GuardDecision(GuardState.UNAUTHENTICATED)

    return GuardDecision(GuardState.UNAUTHENTICATED, redirect_to=LOGIN_PATH)


class RouteGuard:
    """Stateful guard bound to a session store and the current path."""

    def __init__(
        self,
        path: str = DASHBOARD_PATH,
        on_redirect: Optional[Callable[[str], None]] = None,
    ):
        self.path = path
        self.state = GuardState.UNKNOWN
        self.redirects: List[str] = []
        self._on_redirect = on_redirect

    def observe(self, user: Optional["Identity"], loading: bool) -> GuardDecision:
        decision = evaluate(user, loading, self.path)

        if decision.state != self.state:
            logger.debug(f"Route guard {self.state.value} -> {decision.state.value}")
        self.state = decision.state

        if decision.redirect_to is not None:
            logger.info(f"Redirecting {self.path} -> {decision.redirect_to}")
            self.redirects.append(decision.redirect_to)
            self.path = decision.redirect_to
            if self._on_redirect is not None:
                self._on_redirect(decision.redirect_to)

        return decision

    def navigate(self, path: str, session: "SessionStore") -> GuardDecision:
        """Move to `path` and re-check access there."""
        self.path = path
        return self.observe(session.user, session.loading)

    def attach(self, session: "SessionStore") -> Callable[[], None]:
        """Subscribe to `session` and evaluate immediately."""
        unsubscribe = session.subscribe(lambda s: self.observe(s.user, s.loading))
        self.observe(session.user, session.loading)
        return unsubscribe
