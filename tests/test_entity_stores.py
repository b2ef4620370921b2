import os
from datetime import date

import pytest

from portal.core.entities import Department, Task
from portal.core.stores import (
    ApplicantStore,
    AttendanceStore,
    DepartmentStore,
    EmployeeStore,
    JobStore,
    ProjectStore,
    ReimbursementStore,
    TaskStore,
)
from portal.core.seeds import (
    INITIAL_APPLICANTS,
    INITIAL_DEPARTMENTS,
    INITIAL_EMPLOYEES,
    INITIAL_JOBS,
    INITIAL_PROJECTS,
    INITIAL_REIMBURSEMENTS,
    INITIAL_TASKS,
    initial_attendance,
)
from portal.core.id_generator import generate_record_id, validate_record_id

SEED_DAY = date(2024, 8, 1)


def _attendance_store(storage):
    return AttendanceStore(storage, today=SEED_DAY)


STORES = [
    (JobStore, INITIAL_JOBS),
    (DepartmentStore, INITIAL_DEPARTMENTS),
    (ProjectStore, INITIAL_PROJECTS),
    (TaskStore, INITIAL_TASKS),
    (ReimbursementStore, INITIAL_REIMBURSEMENTS),
    (ApplicantStore, INITIAL_APPLICANTS),
    (EmployeeStore, INITIAL_EMPLOYEES),
    (_attendance_store, initial_attendance(SEED_DAY)),
]


def _seed_ids(seed):
    return [item["id"] for item in seed]


def _ids(store):
    return [record.id for record in store.list()]


# ==================================================
# RESEEDING
# ==================================================

@pytest.mark.parametrize("store_cls,seed", STORES)
def test_absent_snapshot_reseeds_and_persists(storage, store_cls, seed):
    store = store_cls(storage)
    store.hydrate()

    assert _ids(store) == _seed_ids(seed)
    persisted = storage.read(store.name)["state"][store.collection_field]
    assert [item["id"] for item in persisted] == _seed_ids(seed)


@pytest.mark.parametrize("store_cls,seed", STORES)
def test_empty_collection_reseeds(storage, store_cls, seed):
    store = store_cls(storage)
    storage.write(store.name, {store.collection_field: []})

    store.hydrate()

    assert _ids(store) == _seed_ids(seed)


@pytest.mark.parametrize("store_cls,seed", STORES)
def test_corrupt_snapshot_reseeds(storage, store_cls, seed):
    store = store_cls(storage)
    with open(os.path.join(storage.data_dir, f"{store.name}.json"), "w") as f:
        f.write("\x00garbage")

    store.hydrate()

    assert _ids(store) == _seed_ids(seed)


@pytest.mark.parametrize("store_cls,seed", STORES)
def test_version_mismatch_reseeds(storage, store_cls, seed):
    store = store_cls(storage)
    storage.write(store.name, {store.collection_field: [{"id": "X"}]}, version=7)

    store.hydrate()

    assert _ids(store) == _seed_ids(seed)


def test_malformed_record_reseeds(storage):
    storage.write("task-storage", {"tasks": [{"id": "TASK999"}]})  # no title

    store = TaskStore(storage)
    store.hydrate()

    assert _ids(store) == _seed_ids(INITIAL_TASKS)


def test_duplicate_ids_reseed(storage):
    storage.write("department-storage", {"departments": [
        {"id": "D1", "name": "A"},
        {"id": "D1", "name": "B"},
    ]})

    store = DepartmentStore(storage)
    store.hydrate()

    assert _ids(store) == _seed_ids(INITIAL_DEPARTMENTS)


def test_hydrate_is_idempotent(storage):
    store = JobStore(storage)
    store.hydrate()
    store.add({"title": "QA Engineer", "department": "Technology", "location": "Remote", "type": "Full-time"})

    store.hydrate()

    assert len(store) == len(INITIAL_JOBS) + 1


# ==================================================
# ROUND TRIP
# ==================================================

def test_department_round_trip(storage):
    store = DepartmentStore(storage)
    store.hydrate()
    added = store.add(Department(id="", name="Finance", head="Meera Iyer"))

    reloaded = DepartmentStore(storage)
    reloaded.hydrate()

    assert reloaded.list() == store.list()
    assert reloaded.get_by_name("Finance") == added
    assert reloaded.list()[0].id == added.id


def test_task_round_trip_keeps_camel_case_keys(storage):
    store = TaskStore(storage)
    store.hydrate()
    task = store.add({"title": "Write onboarding doc", "assignee": "Bob Employee", "due_date": "2024-10-01"})

    persisted = storage.read("task-storage")["state"]["tasks"][0]
    assert persisted["dueDate"] == "2024-10-01"
    assert "due_date" not in persisted

    reloaded = TaskStore(storage)
    reloaded.hydrate()
    assert reloaded.get_by_id(task.id) == task
    assert reloaded.for_assignee("Bob Employee") == [task]


# ==================================================
# MUTATIONS
# ==================================================

def test_update_merges_patch(storage):
    store = TaskStore(storage)
    updated = store.update("TASK001", {"status": "Completed", "priority": "High"})

    assert updated.status == "Completed"
    assert updated.priority == "High"
    assert store.get_by_id("TASK001") == updated


def test_update_ignores_id_and_unknown_fields(storage):
    store = TaskStore(storage)
    updated = store.update("TASK001", {"id": "HIJACK", "colour": "red", "status": "Blocked"})

    assert updated.id == "TASK001"
    assert updated.status == "Blocked"
    assert store.get_by_id("HIJACK") is None


def test_update_unknown_id_is_noop(storage):
    store = ProjectStore(storage)
    store.hydrate()
    before = storage.read("project-storage")

    assert store.update("PROJ404", {"status": "COMPLETED"}) is None
    assert storage.read("project-storage") == before


def test_delete(storage):
    store = JobStore(storage)

    assert store.delete("JOB001") is True
    assert store.get_by_id("JOB001") is None

    reloaded = JobStore(storage)
    assert _ids(reloaded) == ["JOB002"]


def test_delete_unknown_id_is_noop(storage):
    store = JobStore(storage)
    store.hydrate()

    assert store.delete("JOB404") is False
    assert _ids(store) == _seed_ids(INITIAL_JOBS)


def test_add_rejects_wrong_type(storage):
    with pytest.raises(TypeError):
        TaskStore(storage).add(["not", "a", "record"])


def test_filter_accepts_camel_case_and_rejects_unknown_keys(storage):
    store = ApplicantStore(storage)

    assert [a.id for a in store.filter(jobId="JOB002")] == ["APP003", "APP005", "APP007"]
    assert store.filter(job_id="JOB002") == store.by_job_id("JOB002")
    assert store.filter(favourite_colour="blue") == []


def test_open_jobs(storage):
    store = JobStore(storage)
    store.update("JOB002", {"status": "Closed"})

    assert [job.id for job in store.open_jobs()] == ["JOB001"]


def test_replace_all(storage):
    store = TaskStore(storage)
    store.replace_all([Task(id="T1", title="Only task")])

    assert _ids(TaskStore(storage)) == ["T1"]


# ==================================================
# APPLICANTS
# ==================================================

def test_rapid_applicant_adds_get_distinct_ids(storage):
    store = ApplicantStore(storage)

    added = [
        store.add({"job_id": "JOB001", "name": f"Candidate {i}", "email": f"c{i}@example.com"})
        for i in range(50)
    ]

    ids = [a.id for a in added]
    assert len(set(ids)) == 50
    assert all(validate_record_id(record_id, "APP") for record_id in ids)
    assert len(store) == len(INITIAL_APPLICANTS) + 50


def test_ids_stay_unique_from_the_counter_alone():
    ids = [generate_record_id("TASK") for _ in range(2000)]
    counters = [int(record_id.split("-")[1]) for record_id in ids]

    assert counters == sorted(set(counters))
    assert len(set(ids)) == len(ids)
    assert all(validate_record_id(record_id, "TASK") for record_id in ids)


def test_new_applicants_start_pending(storage):
    store = ApplicantStore(storage)

    applicant = store.add({"job_id": "JOB999", "name": "Eve", "email": "eve@example.com", "offer_status": "Hired"})

    assert applicant.offer_status == "Pending"
    assert applicant.job_id == "JOB999"


def test_applicant_ids_survive_delete(storage):
    store = ApplicantStore(storage)
    first = store.add({"job_id": "JOB001", "name": "A", "email": "a@example.com"})
    store.delete(first.id)
    second = store.add({"job_id": "JOB001", "name": "B", "email": "b@example.com"})

    assert second.id != first.id


# ==================================================
# COPIES
# ==================================================

def test_reads_hand_out_copies(storage):
    store = ReimbursementStore(storage)

    store.get_by_id("RMB001").comments.append({"text": "edited in place", "user": "x"})
    store.list()[0].history.append({"action": "edited in place"})
    store.filter(id="RMB001")[0].comments.append({"text": "again"})

    assert store.get_by_id("RMB001").comments == []
    assert store.get_by_id("RMB001").history == []
    assert storage.read("reimbursement-storage")["state"]["reimbursements"][0]["comments"] == []


def test_added_record_is_not_shared_with_caller(storage):
    store = ReimbursementStore(storage)

    added = store.add({"employee_name": "Bob Employee", "category": "Travel", "amount": 120.0, "comments": []})
    added.comments.append({"text": "edited in place"})

    assert store.get_by_id(added.id).comments == []
