"""
PROFILE SYNCHRONIZER

Purpose:
- Keep the signed-in user's profile available to profile pages
- Re-initialize when the session identity becomes a different user
- Keep local edits for the same user (idempotent initialization)

Storage:
- Name: profile-storage
- Shape: {"profiles": {<email>: <profile>}}

Rules:
• "Different user" means a different email, never object identity
• Logout clears the in-memory profile; persisted profiles stay
"""

import copy
import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from portal.config import COMPANY_NAME
from portal.storage.snapshot_store import SnapshotStorage, STATE_KEY, VERSION_KEY

if TYPE_CHECKING:
    from portal.core.session_store import Identity, SessionStore

logger = logging.getLogger(__name__)

PROFILE_STORAGE = "profile-storage"
PROFILE_STORAGE_VERSION = 0

INITIAL_REWARD_POINTS = 100
NOMINATION_POINTS = 10

REWARD_REASON_CATEGORIES: List[str] = [
    "Team Player",
    "Innovation",
    "Customer Focus",
    "Leadership",
    "Going the Extra Mile",
]

EDITABLE_PERSONAL_FIELDS = ("name", "phone", "address", "dateOfBirth", "profilePhotoUrl")


def _default_profile(identity: "Identity") -> Dict[str, Any]:
    return {
        "personal": {
            "name": identity.name,
            "companyEmail": identity.email,
            "phone": "",
            "address": "",
            "dateOfBirth": "",
            "profilePhotoUrl": f"https://i.pravatar.cc/150?u={identity.email}",
        },
        "secondaryData": {
            "currentPosition": identity.base_role.name,
            "department": "",
            "joinDate": datetime.now().date().isoformat(),
        },
        "rewards": {
            "points": INITIAL_REWARD_POINTS,
            "nominations": [],
        },
        "companyName": COMPANY_NAME,
    }


class ProfileStore:
    """Per-user profile derived from the session identity."""

    def __init__(self, storage: SnapshotStorage):
        self.storage = storage
        self.profile: Optional[Dict[str, Any]] = None
        self._lock = threading.RLock()

    @property
    def email(self) -> Optional[str]:
        if self.profile is None:
            return None
        return self.profile["personal"]["companyEmail"]

    # ══════════════════════════════════════════════════════════════
    # PERSISTENCE
    # ══════════════════════════════════════════════════════════════

    def _load_profiles(self) -> Dict[str, Dict[str, Any]]:
        raw = self.storage.read(PROFILE_STORAGE)
        if raw is None or raw.get(VERSION_KEY) != PROFILE_STORAGE_VERSION:
            return {}

        profiles = raw.get(STATE_KEY, {}).get("profiles")
        if not isinstance(profiles, dict):
            logger.warning("Profile snapshot is malformed, ignoring it")
            return {}

        return {
            email: profile
            for email, profile in profiles.items()
            if isinstance(profile, dict) and isinstance(profile.get("personal"), dict)
        }

    def _persist(self, profile: Dict[str, Any]) -> None:
        profiles = self._load_profiles()
        profiles[profile["personal"]["companyEmail"]] = profile
        self.storage.write(
            PROFILE_STORAGE, {"profiles": profiles}, version=PROFILE_STORAGE_VERSION
        )

    # ══════════════════════════════════════════════════════════════
    # SYNCHRONIZATION
    # ══════════════════════════════════════════════════════════════

    def initialize_profile_for_user(self, identity: "Identity") -> Dict[str, Any]:
        """
        Make `identity`'s profile current.

        Same email as the loaded profile: returned untouched, edits kept.
        Otherwise the persisted profile for that email is loaded, or a
        default one is created and persisted.
        """
        with self._lock:
            if self.profile is not None and self.email == identity.email:
                return self.profile

            stored = self._load_profiles().get(identity.email)
            if stored is not None:
                self.profile = stored
                logger.info(f"Profile loaded for {identity.email}")
            else:
                profile = _default_profile(identity)
                self._persist(profile)
                self.profile = profile
                logger.info(f"Profile created for {identity.email}")

            return self.profile

    def clear(self) -> None:
        with self._lock:
            self.profile = None

    def sync_with_session(self, session: "SessionStore") -> None:
        """Session listener: follow the identity by email."""
        if session.loading:
            return

        if session.user is None:
            if self.profile is not None:
                self.clear()
            return

        if self.email != session.user.email:
            self.initialize_profile_for_user(session.user)

    def attach(self, session: "SessionStore") -> Callable[[], None]:
        """Subscribe to `session` and sync immediately."""
        unsubscribe = session.subscribe(self.sync_with_session)
        self.sync_with_session(session)
        return unsubscribe

    # ══════════════════════════════════════════════════════════════
    # EDITS
    # ══════════════════════════════════════════════════════════════

    def _require_profile(self) -> Dict[str, Any]:
        if self.profile is None:
            raise RuntimeError("No profile loaded; sign in first")
        return self.profile

    def update_personal_information(self, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Apply editable personal fields. companyEmail is never editable."""
        with self._lock:
            profile = copy.deepcopy(self._require_profile())

            for key, value in patch.items():
                if key in EDITABLE_PERSONAL_FIELDS:
                    profile["personal"][key] = value
                else:
                    logger.warning(f"Ignored non-editable profile field '{key}'")

            self._persist(profile)
            self.profile = profile
            return profile

    def add_nomination(self, nominee: str, reason: str, category: str) -> Dict[str, Any]:
        """
        Record a peer nomination made by the current user.

        Raises:
            ValueError: unknown reward category or empty nominee
        """
        if category not in REWARD_REASON_CATEGORIES:
            raise ValueError(f"Unknown reward category {category!r}")
        if not nominee:
            raise ValueError("Nominee is required")

        with self._lock:
            profile = copy.deepcopy(self._require_profile())
            rewards = profile["rewards"]

            rewards["nominations"].append({
                "nominee": nominee,
                "reason": reason,
                "category": category,
                "date": datetime.now().date().isoformat(),
            })
            rewards["points"] = rewards.get("points", 0) + NOMINATION_POINTS

            self._persist(profile)
            self.profile = profile

        logger.info(f"Nomination recorded for {nominee} ({category})")
        return profile
