# portal/storage/snapshot_store.py

import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# ==================================================
# ENVELOPE KEYS
# ==================================================

STATE_KEY = "state"
VERSION_KEY = "version"


class SnapshotStorage:
    """
    Durable key/value storage for store snapshots.

    One JSON file per store name, each holding a
    `{"state": {...}, "version": N}` envelope.

    - Thread-safe
    - Crash-safe writes (temp file + replace)
    - Reads never raise on missing or corrupt files
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self._lock = threading.Lock()
        os.makedirs(self.data_dir, exist_ok=True)

    def _path(self, name: str) -> str:
        return os.path.join(self.data_dir, f"{name}.json")

    # ==================================================
    # WRITE SNAPSHOT (ATOMIC)
    # ==================================================

    def write(self, name: str, state: Dict[str, Any], version: int = 0) -> None:
        """Atomically replace the snapshot stored under `name`."""
        path = self._path(name)
        tmp_path = f"{path}.tmp"
        envelope = {STATE_KEY: state, VERSION_KEY: version}

        with self._lock:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(envelope, f, ensure_ascii=False, indent=2)

            os.replace(tmp_path, path)

    # ==================================================
    # READ SNAPSHOT (SAFE)
    # ==================================================

    def read(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Read the envelope stored under `name`.

        Returns:
        - The parsed envelope dict
        - None if the snapshot is absent, unreadable or not an envelope
        """
        path = self._path(name)

        if not os.path.exists(path):
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                envelope = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Snapshot '{name}' is unreadable: {e}")
            return None

        if not isinstance(envelope, dict) or not isinstance(envelope.get(STATE_KEY), dict):
            logger.warning(f"Snapshot '{name}' is not a state envelope")
            return None

        return envelope

    def delete(self, name: str) -> None:
        """Remove the snapshot stored under `name`, if any."""
        path = self._path(name)

        with self._lock:
            try:
                os.remove(path)
            except FileNotFoundError:
                pass

    def exists(self, name: str) -> bool:
        return os.path.exists(self._path(name))
