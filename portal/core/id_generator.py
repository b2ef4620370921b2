"""
RECORD ID GENERATOR

Purpose:
- Generate unique record IDs for every entity store
- Safe under rapid successive inserts and after deletions
- Human-readable, prefixed by entity kind

Format:
<PREFIX>-<COUNTER>-<RANDOM>

Where:
- PREFIX: Entity kind (JOB, DEPT, PROJ, TASK, RMB, APP, EMP, ATT; EMPVL for employee codes)
- COUNTER: Process-wide monotonic counter, zero-padded to 6 digits
- RANDOM: 6 hex chars from a UUID4, so IDs stay unique across restarts
"""

import itertools
import threading
import uuid


_COUNTER = itertools.count(1)
_COUNTER_LOCK = threading.Lock()


def generate_record_id(prefix: str) -> str:
    """
    Generate a unique record ID.

    Examples:
        >>> rid = generate_record_id("APP")
        >>> rid.startswith("APP-")
        True
        >>> generate_record_id("APP") != generate_record_id("APP")
        True
    """
    with _COUNTER_LOCK:
        counter = next(_COUNTER)

    suffix = uuid.uuid4().hex[:6].upper()
    return f"{prefix}-{counter:06d}-{suffix}"


def validate_record_id(record_id: str, prefix: str) -> bool:
    """
    Validate a generated record ID.

    Seed records use short legacy IDs (e.g. APP001) and are not
    expected to pass this check.
    """
    if not record_id or not isinstance(record_id, str):
        return False

    parts = record_id.split("-")

    if len(parts) != 3:
        return False

    head, counter, suffix = parts

    if head != prefix:
        return False

    if not counter.isdigit() or len(counter) < 6:
        return False

    if len(suffix) != 6:
        return False

    try:
        int(suffix, 16)
    except ValueError:
        return False

    return True
