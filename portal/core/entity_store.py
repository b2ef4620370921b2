"""
ENTITY STORE

Purpose:
- Own one typed collection (jobs, departments, ...)
- Persist it write-through to durable storage
- Reseed deterministically when the snapshot is absent, empty or corrupt

Lifecycle:
1. load()       -> raw envelope or None
2. reconcile()  -> decoded collection, or the seed set
3. hydrate()    runs both synchronously before any read is served

Rules:
• Every mutation goes through _mutate (single writer, under lock)
• Snapshot is written before in-memory state changes
• Missing ids on update/delete are no-ops, never errors
• Reads hand out copies; stored records change only through _mutate
"""

import copy
import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union

from portal.core.entities import Record
from portal.core.id_generator import generate_record_id
from portal.storage.snapshot_store import SnapshotStorage, VERSION_KEY, STATE_KEY

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class EntityStore(Generic[R]):
    """Persisted, reseeding collection of one record type."""

    def __init__(
        self,
        storage: SnapshotStorage,
        name: str,
        collection_field: str,
        record_type: Type[R],
        seed: List[Dict[str, Any]],
        id_prefix: str,
        version: int = 0,
    ):
        self.storage = storage
        self.name = name
        self.collection_field = collection_field
        self.record_type = record_type
        self.id_prefix = id_prefix
        self.version = version
        self._seed = [dict(item) for item in seed]
        self._records: List[R] = []
        self._hydrated = False
        self._lock = threading.RLock()

    # ══════════════════════════════════════════════════════════════
    # HYDRATION
    # ══════════════════════════════════════════════════════════════

    def seed_records(self) -> List[R]:
        """Fresh copy of this collection's seed set."""
        return [self.record_type.from_dict(item) for item in self._seed]

    def load(self) -> Optional[Dict[str, Any]]:
        return self.storage.read(self.name)

    def _decode(self, raw: Optional[Dict[str, Any]]) -> Optional[List[R]]:
        """Decode an envelope, or None when it must not be trusted."""
        if raw is None:
            logger.info(f"{self.name}: no snapshot")
            return None

        if raw.get(VERSION_KEY) != self.version:
            logger.warning(
                f"{self.name}: snapshot version {raw.get(VERSION_KEY)!r} "
                f"does not match {self.version}"
            )
            return None

        items = raw.get(STATE_KEY, {}).get(self.collection_field)
        if not isinstance(items, list) or not items:
            logger.warning(f"{self.name}: snapshot collection is empty or invalid")
            return None

        try:
            records = [self.record_type.from_dict(item) for item in items]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"{self.name}: snapshot record is malformed: {e}")
            return None

        if len({record.id for record in records}) != len(records):
            logger.warning(f"{self.name}: snapshot contains duplicate ids")
            return None

        return records

    def reconcile(self, raw: Optional[Dict[str, Any]]) -> List[R]:
        """Decoded snapshot collection, or the seed set if it is not trustworthy."""
        records = self._decode(raw)
        if records is None:
            return self.seed_records()
        return records

    def hydrate(self) -> None:
        """Load and reconcile the durable snapshot. Idempotent per process."""
        with self._lock:
            if self._hydrated:
                return

            records = self._decode(self.load())

            if records is None:
                records = self.seed_records()
                logger.info(f"{self.name}: reseeded with {len(records)} records")
                try:
                    self._persist(records)
                except OSError as e:
                    logger.warning(f"{self.name}: could not persist seed set: {e}")

            self._records = records
            self._hydrated = True

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def _ensure_hydrated(self) -> None:
        if not self._hydrated:
            self.hydrate()

    # ══════════════════════════════════════════════════════════════
    # READS (PURE)
    # ══════════════════════════════════════════════════════════════

    def list(self) -> List[R]:
        """All records, most recent first."""
        self._ensure_hydrated()
        return copy.deepcopy(self._records)

    def __len__(self) -> int:
        self._ensure_hydrated()
        return len(self._records)

    def get_by_id(self, record_id: str) -> Optional[R]:
        self._ensure_hydrated()
        for record in self._records:
            if record.id == record_id:
                return copy.deepcopy(record)
        return None

    def find(self, predicate: Callable[[R], bool]) -> List[R]:
        self._ensure_hydrated()
        return [copy.deepcopy(record) for record in self._records if predicate(record)]

    def filter(self, **criteria: Any) -> List[R]:
        """
        Records whose fields equal every given value.

        Keys may be snake_case or camelCase. Unknown keys match nothing.
        """
        resolved = {}
        for key, value in criteria.items():
            name = self.record_type.normalize_key(key)
            if name is None:
                return []
            resolved[name] = value

        return self.find(
            lambda record: all(getattr(record, k) == v for k, v in resolved.items())
        )

    # ══════════════════════════════════════════════════════════════
    # MUTATIONS (WRITE-THROUGH)
    # ══════════════════════════════════════════════════════════════

    def _persist(self, records: List[R]) -> None:
        self.storage.write(
            self.name,
            {self.collection_field: [record.to_dict() for record in records]},
            version=self.version,
        )

    def _mutate(self, change: Callable[[List[R]], Optional[List[R]]]) -> bool:
        """
        Single mutation entrypoint.

        `change` receives a copy of the collection and returns the new
        collection, or None for a no-op.
        """
        with self._lock:
            self._ensure_hydrated()
            updated = change(list(self._records))

            if updated is None:
                return False

            self._persist(updated)
            self._records = updated
            return True

    def _prepare_new(self, record: Union[R, Dict[str, Any]]) -> R:
        if isinstance(record, self.record_type):
            if record.id:
                return copy.deepcopy(record)
            data = record.to_dict()
        elif isinstance(record, dict):
            data = dict(record)
        else:
            raise TypeError(
                f"{self.name}: expected {self.record_type.__name__} or dict, "
                f"got {type(record).__name__}"
            )

        if not data.get("id"):
            data["id"] = generate_record_id(self.id_prefix)

        return self.record_type.from_dict(data)

    def add(self, record: Union[R, Dict[str, Any]]) -> R:
        """
        Insert a record at the front of the collection.

        A fresh id is assigned when the record has none.
        """
        new_record = self._prepare_new(record)

        def change(records: List[R]) -> List[R]:
            return [new_record] + [r for r in records if r.id != new_record.id]

        self._mutate(change)
        logger.debug(f"{self.name}: added {new_record.id}")
        return copy.deepcopy(new_record)

    def update(self, record_id: str, patch: Dict[str, Any]) -> Optional[R]:
        """
        Merge `patch` onto the record with `record_id`.

        Returns the updated record, or None when the id is unknown.
        """
        result: List[R] = []

        def change(records: List[R]) -> Optional[List[R]]:
            for i, record in enumerate(records):
                if record.id == record_id:
                    patched, ignored = record.with_patch(patch)
                    if ignored:
                        logger.warning(f"{self.name}: ignored patch fields {ignored} for {record_id}")
                    records[i] = patched
                    result.append(patched)
                    return records
            return None

        if not self._mutate(change):
            logger.debug(f"{self.name}: update skipped, no record {record_id}")
            return None

        return copy.deepcopy(result[0])

    def delete(self, record_id: str) -> bool:
        """Remove the record with `record_id`. Returns False if it was absent."""

        def change(records: List[R]) -> Optional[List[R]]:
            remaining = [r for r in records if r.id != record_id]
            if len(remaining) == len(records):
                return None
            return remaining

        deleted = self._mutate(change)
        if not deleted:
            logger.debug(f"{self.name}: delete skipped, no record {record_id}")
        return deleted

    def replace_all(self, records: List[Union[R, Dict[str, Any]]]) -> None:
        """Replace the whole collection (bulk load from the backend or an import)."""
        prepared = [self._prepare_new(record) for record in records]
        self._mutate(lambda _current: prepared)
