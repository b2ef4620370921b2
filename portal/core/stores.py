"""
COLLECTION STORES

The eight entity stores of the portal, each an EntityStore bound to its
record type, storage name, collection field, id prefix and seed set.
"""

import copy
import dataclasses
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from portal.core.entities import (
    Applicant,
    Attendance,
    Department,
    Employee,
    Job,
    Project,
    Reimbursement,
    Task,
    to_camel,
)
from portal.core.entity_store import EntityStore
from portal.core.id_generator import generate_record_id
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
from portal.security.roles import EMPLOYEE
from portal.storage.snapshot_store import SnapshotStorage

if TYPE_CHECKING:
    from portal.integrations.employee_service import EmployeeService
    from portal.integrations.reimbursement_service import ReimbursementService

logger = logging.getLogger(__name__)

# Storage names
JOB_STORAGE = "job-storage"
DEPARTMENT_STORAGE = "department-storage"
PROJECT_STORAGE = "project-storage"
TASK_STORAGE = "task-storage"
REIMBURSEMENT_STORAGE = "reimbursement-storage"
APPLICANT_STORAGE = "applicant-storage"
EMPLOYEE_STORAGE = "employee-storage"
ATTENDANCE_STORAGE = "attendance-storage"


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


class JobStore(EntityStore[Job]):
    def __init__(self, storage: SnapshotStorage):
        super().__init__(storage, JOB_STORAGE, "jobs", Job, INITIAL_JOBS, "JOB")

    def open_jobs(self) -> List[Job]:
        return self.filter(status="Open")


class DepartmentStore(EntityStore[Department]):
    def __init__(self, storage: SnapshotStorage):
        super().__init__(
            storage, DEPARTMENT_STORAGE, "departments", Department, INITIAL_DEPARTMENTS, "DEPT"
        )

    def get_by_name(self, name: str) -> Optional[Department]:
        matches = self.filter(name=name)
        return matches[0] if matches else None


class ProjectStore(EntityStore[Project]):
    def __init__(self, storage: SnapshotStorage):
        super().__init__(storage, PROJECT_STORAGE, "projects", Project, INITIAL_PROJECTS, "PROJ")


class TaskStore(EntityStore[Task]):
    def __init__(self, storage: SnapshotStorage):
        super().__init__(storage, TASK_STORAGE, "tasks", Task, INITIAL_TASKS, "TASK")

    def for_assignee(self, assignee: str) -> List[Task]:
        return self.filter(assignee=assignee)


class ApplicantStore(EntityStore[Applicant]):
    """Applicants; `job_id` is advisory and never checked against jobs."""

    def __init__(self, storage: SnapshotStorage):
        super().__init__(
            storage, APPLICANT_STORAGE, "applicants", Applicant, INITIAL_APPLICANTS, "APP"
        )

    def by_job_id(self, job_id: str) -> List[Applicant]:
        return self.filter(job_id=job_id)

    def add(self, record) -> Applicant:
        """New applicants always enter the pipeline as Pending."""
        if isinstance(record, dict):
            record = {**record, "offerStatus": "Pending"}
            record.pop("offer_status", None)
        else:
            record, _ = record.with_patch({"offer_status": "Pending"})
        return super().add(record)


class ReimbursementStore(EntityStore[Reimbursement]):
    def __init__(self, storage: SnapshotStorage):
        super().__init__(
            storage,
            REIMBURSEMENT_STORAGE,
            "reimbursements",
            Reimbursement,
            INITIAL_REIMBURSEMENTS,
            "RMB",
        )

    def add_comment(self, reimbursement_id: str, text: str, user: str) -> Optional[Reimbursement]:
        """Append a comment. No-op (None) when the claim is unknown."""
        with self._lock:
            claim = self.get_by_id(reimbursement_id)
            if claim is None:
                return None

            comment = {"text": text, "user": user, "timestamp": _now()}
            return self.update(reimbursement_id, {"comments": claim.comments + [comment]})

    def add_history_entry(
        self, reimbursement_id: str, entry: Dict[str, Any]
    ) -> Optional[Reimbursement]:
        """Append an audit entry (e.g. a status change). No-op when unknown."""
        with self._lock:
            claim = self.get_by_id(reimbursement_id)
            if claim is None:
                return None

            stamped = {"timestamp": _now(), **entry}
            return self.update(reimbursement_id, {"history": claim.history + [stamped]})

    def sync_from_remote(self, service: "ReimbursementService") -> int:
        """
        Replace the collection with the backend's list.

        An empty backend list leaves local data untouched. Backend errors
        propagate to the caller; there is no retry.
        """
        remote = service.get_all()

        if not remote:
            logger.info(f"{self.name}: backend returned no reimbursements, keeping local data")
            return 0

        self.replace_all(remote)
        logger.info(f"{self.name}: synced {len(remote)} reimbursements from backend")
        return len(remote)


# ══════════════════════════════════════════════════════════════
# EMPLOYEES
# ══════════════════════════════════════════════════════════════

# Backend fields never kept on the client
_PRIVATE_EMPLOYEE_FIELDS = ("passwordHash", "jwtToken")


def _avatar_url(email: str) -> str:
    return f"https://i.pravatar.cc/150?u={email}"


def employee_from_remote(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Backend employee -> persisted record form.

    The backend nests the department ({"name": ...}); the record keeps its name.
    """
    data = {k: v for k, v in payload.items() if k not in _PRIVATE_EMPLOYEE_FIELDS}

    department = data.get("department")
    if isinstance(department, dict):
        data["department"] = department.get("name")

    if not data.get("avatarUrl"):
        data["avatarUrl"] = _avatar_url(data.get("email", ""))

    return data


def _camel_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    return {to_camel(Employee.normalize_key(k) or k): v for k, v in data.items()}


def with_employee_defaults(data: Dict[str, Any]) -> Dict[str, Any]:
    """Fill the fields a new employee needs; role drives base and current role."""
    data = _camel_keys(data)
    role = data.get("role") or EMPLOYEE

    data["role"] = role
    data["baseRole"] = data.get("baseRole") or role
    data["currentRole"] = data.get("currentRole") or role
    data["employeeCode"] = data.get("employeeCode") or generate_record_id("EMPVL")
    data["status"] = data.get("status") or "ACTIVE"
    data["designation"] = data.get("designation") or "INTERN"
    data["employeeType"] = data.get("employeeType") or "FULL_TIME"
    data["gender"] = data.get("gender") or "OTHER"
    data["joinDate"] = data.get("joinDate") or date.today().isoformat()
    data["avatarUrl"] = data.get("avatarUrl") or _avatar_url(data.get("email", ""))
    return data


class EmployeeStore(EntityStore[Employee]):
    """Employee directory, kept in step with the backend when one is available."""

    def __init__(self, storage: SnapshotStorage):
        super().__init__(
            storage, EMPLOYEE_STORAGE, "employees", Employee, INITIAL_EMPLOYEES, "EMP"
        )

    def add(self, record: Union[Employee, Dict[str, Any]]) -> Employee:
        if isinstance(record, Employee):
            record = record.to_dict()
        return super().add(with_employee_defaults(record))

    def by_department(self, department_id: str) -> List[Employee]:
        return self.filter(department_id=department_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        matches = self.filter(email=email)
        return matches[0] if matches else None

    # Backend-backed variants: ApiError propagates and the local store is untouched.

    def sync_from_remote(self, service: "EmployeeService") -> int:
        """Replace the directory with the backend's. An empty backend list keeps local data."""
        remote = service.get_all()

        if not remote:
            logger.info(f"{self.name}: backend returned no employees, keeping local data")
            return 0

        self.replace_all([employee_from_remote(item) for item in remote])
        logger.info(f"{self.name}: synced {len(remote)} employees from backend")
        return len(remote)

    def create_remote(self, service: "EmployeeService", data: Dict[str, Any]) -> Employee:
        created = service.create(with_employee_defaults(data))
        return self.add(employee_from_remote(created))

    def update_remote(
        self, service: "EmployeeService", employee_id: str, patch: Dict[str, Any]
    ) -> Optional[Employee]:
        updated = employee_from_remote(service.update(employee_id, _camel_keys(patch)))
        updated.pop("id", None)
        return self.update(employee_id, updated)

    def delete_remote(self, service: "EmployeeService", employee_id: str) -> bool:
        service.delete(employee_id)
        return self.delete(employee_id)


# ══════════════════════════════════════════════════════════════
# ATTENDANCE
# ══════════════════════════════════════════════════════════════

# Cleared whenever a day's status is anything but Present
PRESENT_ONLY_FIELDS = (
    "check_in_time_category",
    "work_location",
    "user_coordinates",
    "check_out_time_category",
    "check_out_coordinates",
)

Day = Union[date, str]


def _day(day: Day) -> str:
    """date or 'YYYY-MM-DD' -> 'YYYY-MM-DD'. Raises ValueError for anything else."""
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    return date.fromisoformat(day).isoformat()


def attendance_id(employee_name: str, day: Day) -> str:
    return f"{employee_name}@{_day(day)}"


class AttendanceStore(EntityStore[Attendance]):
    """
    Daily attendance, one record per (employee, day).

    Records are upserted by day; the seed set is anchored to `today`.
    """

    def __init__(self, storage: SnapshotStorage, today: Optional[date] = None):
        super().__init__(
            storage,
            ATTENDANCE_STORAGE,
            "attendance",
            Attendance,
            initial_attendance(today or date.today()),
            "ATT",
        )

    def get_attendance_for_user_and_date(self, employee_name: str, day: Day) -> Optional[Attendance]:
        return self.get_by_id(attendance_id(employee_name, day))

    def for_employee(self, employee_name: str) -> List[Attendance]:
        return sorted(self.filter(employee_name=employee_name), key=lambda r: r.date, reverse=True)

    def save_attendance(self, employee_name: str, day: Day, data: Dict[str, Any]) -> Attendance:
        """
        Merge `data` onto the day's record, creating it if needed.

        A status other than Present clears the check-in/check-out fields.
        """
        key = _day(day)
        record_id = attendance_id(employee_name, key)
        saved: List[Attendance] = []

        def change(records: List[Attendance]) -> List[Attendance]:
            existing = next((r for r in records if r.id == record_id), None)
            base = existing or Attendance(id=record_id, employee_name=employee_name, date=key)

            updated, ignored = base.with_patch(data)
            if ignored:
                logger.warning(f"{self.name}: ignored attendance fields {ignored}")
            updated = dataclasses.replace(updated, employee_name=employee_name, date=key)

            if updated.status != "Present":
                updated = dataclasses.replace(updated, **{f: None for f in PRESENT_ONLY_FIELDS})

            saved.append(updated)
            if existing is None:
                return [updated] + records
            return [updated if r.id == record_id else r for r in records]

        self._mutate(change)
        return copy.deepcopy(saved[0])

    def mark_morning_check_in(
        self,
        employee_name: str,
        day: Day,
        check_in_time_category: Optional[str] = None,
        work_location: Optional[str] = None,
        user_coordinates: Optional[Dict[str, float]] = None,
        status: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Attendance:
        """Start the day. Any earlier checkout for that day is cleared."""
        status = status or "Present"
        default_notes = "Marked as Leave" if status == "Leave" else "Checked in"

        record = self.save_attendance(employee_name, day, {
            "status": status,
            "check_in_time_category": check_in_time_category,
            "work_location": work_location,
            "user_coordinates": user_coordinates,
            "notes": notes or default_notes,
            "check_out_time_category": None,
            "check_out_coordinates": None,
        })
        logger.info(f"{self.name}: {employee_name} checked in for {record.date} ({status})")
        return record

    def mark_evening_checkout(
        self,
        employee_name: str,
        day: Day,
        check_out_time_category: Optional[str],
        notes: Optional[str] = None,
        user_coordinates: Optional[Dict[str, float]] = None,
    ) -> Optional[Attendance]:
        """
        End the day. Returns None, changing nothing, unless the day is
        Present with a check-in.
        """
        with self._lock:
            existing = self.get_attendance_for_user_and_date(employee_name, day)

            if existing is None or existing.status != "Present" or not existing.check_in_time_category:
                logger.warning(f"{self.name}: no check-in for {employee_name} on {_day(day)}, checkout ignored")
                return None

            return self.save_attendance(employee_name, day, {
                "check_out_time_category": check_out_time_category,
                "notes": notes or existing.notes or "Checked out",
                "check_out_coordinates": user_coordinates,
            })
