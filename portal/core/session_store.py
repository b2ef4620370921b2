"""
SESSION STORE

Purpose:
- Own the authenticated identity (base role + current role)
- Track hydration with a `loading` flag
- Persist across reloads; logout removes the persisted identity
- One snapshot per browser (auth-storage-<client id>), never shared
- Notify subscribers (profile synchronizer, route guard) on every change

Rules:
• loading is True until hydrate() has finished, whatever its outcome
• base_role never changes while a session lives
• current_role is always the base role or a permitted switch target
• Rejected role switches change nothing and raise nothing
"""

import logging
import re
import threading
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from portal.security.demo_accounts import Account
from portal.security.role_guard import available_targets, can_switch, get_role
from portal.security.roles import Role
from portal.storage.snapshot_store import SnapshotStorage, STATE_KEY, VERSION_KEY

logger = logging.getLogger(__name__)

AUTH_STORAGE = "auth-storage"
AUTH_STORAGE_VERSION = 0

_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{8,64}$")


def new_client_id() -> str:
    return uuid.uuid4().hex


def is_valid_client_id(client_id) -> bool:
    """8-64 characters of [A-Za-z0-9_-]; the id ends up in a file name."""
    return isinstance(client_id, str) and bool(_CLIENT_ID_PATTERN.match(client_id))


def auth_storage_name(client_id: Optional[str] = None) -> str:
    """
    Snapshot name holding one browser's identity.

    Raises:
        ValueError: client_id is not a valid client id
    """
    if client_id is None:
        return AUTH_STORAGE
    if not is_valid_client_id(client_id):
        raise ValueError(f"Invalid client id {client_id!r}")
    return f"{AUTH_STORAGE}-{client_id}"


@dataclass(frozen=True)
class Identity:
    """The signed-in user."""
    id: str
    name: str
    email: str
    base_role: Role
    current_role: Role

    @property
    def roles(self) -> List[Role]:
        """Base role followed by its switch targets, for display."""
        return [self.base_role] + available_targets(self.base_role.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "baseRole": self.base_role.value,
            "currentRole": self.current_role.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Identity":
        """
        Restore a persisted identity.

        A persisted current role that is no longer a permitted target
        falls back to the base role.

        Raises:
            KeyError / TypeError / ValueError for malformed data
        """
        base_role = get_role(data["baseRole"])
        if base_role is None:
            raise ValueError(f"Unknown base role {data['baseRole']!r}")

        current_value = data.get("currentRole", base_role.value)
        if not can_switch(base_role.value, current_value):
            current_value = base_role.value

        for key in ("id", "name", "email"):
            if not isinstance(data[key], str):
                raise TypeError(f"Identity field '{key}' must be a string")

        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            base_role=base_role,
            current_role=get_role(current_value),
        )


Listener = Callable[["SessionStore"], None]


class SessionStore:
    """Authenticated identity with role switching."""

    def __init__(self, storage: SnapshotStorage, storage_name: str = AUTH_STORAGE):
        self.storage = storage
        self.storage_name = storage_name
        self.user: Optional[Identity] = None
        self.loading = True
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()

    # ══════════════════════════════════════════════════════════════
    # SUBSCRIPTIONS
    # ══════════════════════════════════════════════════════════════

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ══════════════════════════════════════════════════════════════
    # PERSISTENCE
    # ══════════════════════════════════════════════════════════════

    def _persist(self, user: Identity) -> None:
        self.storage.write(self.storage_name, {"user": user.to_dict()}, version=AUTH_STORAGE_VERSION)

    def _decode(self, raw: Optional[Dict[str, Any]]) -> Optional[Identity]:
        if raw is None:
            return None

        if raw.get(VERSION_KEY) != AUTH_STORAGE_VERSION:
            logger.warning(f"Session snapshot version {raw.get(VERSION_KEY)!r} ignored")
            return None

        data = raw.get(STATE_KEY, {}).get("user")
        if data is None:
            return None

        try:
            return Identity.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Session snapshot is malformed, starting signed out: {e}")
            return None

    def hydrate(self) -> None:
        """Restore a persisted identity, then clear `loading`."""
        with self._lock:
            self.user = self._decode(self.storage.read(self.storage_name))
            self.loading = False

        if self.user:
            logger.info(f"Session restored for {self.user.email} as {self.user.current_role.value}")
        self._notify()

    # ══════════════════════════════════════════════════════════════
    # LOGIN / LOGOUT
    # ══════════════════════════════════════════════════════════════

    def login(self, account: Account) -> Identity:
        """
        Start a session. Base and current role both become the account's role.

        Raises:
            ValueError: the account's role is not in the catalog
        """
        role = get_role(account.role)
        if role is None:
            raise ValueError(f"Unknown role {account.role!r}")

        identity = Identity(
            id=account.id,
            name=account.name,
            email=account.email,
            base_role=role,
            current_role=role,
        )

        with self._lock:
            self._persist(identity)
            self.user = identity
            self.loading = False

        logger.info(f"Logged in {identity.email} as {role.value}")
        self._notify()
        return identity

    def logout(self) -> None:
        """Clear the identity and its durable snapshot."""
        with self._lock:
            email = self.user.email if self.user else None
            self.storage.delete(self.storage_name)
            self.user = None
            self.loading = False

        if email:
            logger.info(f"Logged out {email}")
        self._notify()

    # ══════════════════════════════════════════════════════════════
    # ROLE SWITCHING
    # ══════════════════════════════════════════════════════════════

    def set_current_role(self, role_value: str) -> bool:
        """
        Adopt `role_value` as the current role.

        Returns False (and changes nothing) when there is no user or the
        role is not the base role or one of its switch targets. Switching
        to the role already in effect succeeds without writing.
        """
        with self._lock:
            user = self.user
            if user is None:
                return False

            if not can_switch(user.base_role.value, role_value):
                logger.info(
                    f"Role switch rejected for {user.email}: "
                    f"{user.base_role.value} -> {role_value}"
                )
                return False

            if user.current_role.value == role_value:
                return True

            switched = Identity(
                id=user.id,
                name=user.name,
                email=user.email,
                base_role=user.base_role,
                current_role=get_role(role_value),
            )
            self._persist(switched)
            self.user = switched

        logger.info(f"{switched.email} switched to {role_value}")
        self._notify()
        return True

    def reset_to_base_role(self) -> bool:
        if self.user is None:
            return False
        return self.set_current_role(self.user.base_role.value)

    def get_available_roles_for_switching(self) -> List[Role]:
        """Switch targets of the base role, in catalog order."""
        if self.user is None:
            return []
        return available_targets(self.user.base_role.value)
