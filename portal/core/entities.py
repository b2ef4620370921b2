"""
ENTITY RECORDS

Purpose:
- One immutable record type per collection
- Stable persisted shape (camelCase keys, as stored by the portal UI)
- Field-level patching for store updates

Rules:
- No IO
- Decoding a malformed record raises; stores treat that as a corrupt snapshot
"""

import copy
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

R = TypeVar("R", bound="Record")


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# ==================================================
# STATUS VOCABULARIES
# ==================================================

JOB_STATUSES = ["Open", "Closed", "On Hold"]
PROJECT_STATUSES = ["PLANNING", "IN_PROGRESS", "COMPLETED", "ON_HOLD", "CANCELLED"]
TASK_STATUSES = ["To Do", "In Progress", "Planning", "Blocked", "Completed", "Cancelled"]
TASK_PRIORITIES = ["Low", "Medium", "High", "Urgent"]
REIMBURSEMENT_STATUSES = ["Pending", "Approved", "Rejected", "Paid"]
CURRENCIES = ["INR", "USD", "EUR", "GBP", "JPY"]
OFFER_STATUSES = [
    "Pending",
    "Selected",
    "Rejected (Application)",
    "Offer Generated",
    "Offer Sent",
    "Offer Accepted",
    "Hired",
]
EMPLOYEE_STATUSES = ["ACTIVE", "INACTIVE", "ON_LEAVE", "TERMINATED"]
EMPLOYEE_TYPES = ["FULL_TIME", "PART_TIME", "CONTRACT", "INTERN"]
ATTENDANCE_STATUSES = ["Present", "Absent", "Leave", "Holiday"]
CHECK_IN_TIME_CATEGORIES = ["Before 9:30 AM", "9:30 AM - 10:30 AM", "After 10:30 AM"]
CHECK_OUT_TIME_CATEGORIES = ["Before 6:00 PM", "6:00 PM - 7:00 PM", "After 7:00 PM"]
WORK_LOCATIONS = ["Office", "HomeWithPermission", "HomeWithoutPermission"]


@dataclass(frozen=True)
class Record:
    """Base for every entity record. `id` is unique within its store."""
    id: str

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in dataclasses.fields(cls)]

    @classmethod
    def normalize_key(cls, key: str) -> Optional[str]:
        """Map a snake_case or camelCase key to a field name."""
        for name in cls.field_names():
            if key == name or key == to_camel(name):
                return name
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted (camelCase) form."""
        return {
            to_camel(f.name): copy.deepcopy(getattr(self, f.name))
            for f in dataclasses.fields(self)
        }

    @classmethod
    def from_dict(cls: Type[R], data: Dict[str, Any]) -> R:
        """
        Create a record from its persisted form.

        Raises:
            TypeError: data is not a mapping or `id` is not a string
            KeyError: a required field is missing
        """
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} record must be a mapping")

        values: Dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            camel = to_camel(f.name)
            if camel in data:
                values[f.name] = copy.deepcopy(data[camel])
            elif f.name in data:
                values[f.name] = copy.deepcopy(data[f.name])
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise KeyError(f"{cls.__name__} record missing '{camel}'")

        if not isinstance(values.get("id"), str) or not values["id"]:
            raise TypeError(f"{cls.__name__} record has no string id")

        return cls(**values)

    def with_patch(self: R, patch: Dict[str, Any]) -> Tuple[R, List[str]]:
        """
        Merge a field patch onto this record.

        Returns the patched record and the patch keys that were ignored
        (unknown fields, and `id`, which is immutable).
        """
        changes: Dict[str, Any] = {}
        ignored: List[str] = []

        for key, value in patch.items():
            name = self.normalize_key(key)
            if name is None or name == "id":
                ignored.append(key)
                continue
            changes[name] = copy.deepcopy(value)

        return dataclasses.replace(self, **changes), ignored


# ==================================================
# RECORD TYPES
# ==================================================

@dataclass(frozen=True)
class Job(Record):
    title: str
    department: str
    location: str = ""
    type: str = "Full-time"
    description: str = ""
    requirements: str = ""
    posted_date: str = ""
    status: str = "Open"
    application_link: str = ""


@dataclass(frozen=True)
class Department(Record):
    name: str
    head: str = ""
    description: str = ""
    creation_date: str = ""


@dataclass(frozen=True)
class Project(Record):
    name: str
    description: str = ""
    project_manager: str = ""
    start_date: str = ""
    end_date: str = ""
    status: str = "PLANNING"
    team_members: str = ""


@dataclass(frozen=True)
class Task(Record):
    title: str
    description: str = ""
    assignee: str = ""
    project: str = ""
    due_date: str = ""
    status: str = "To Do"
    priority: str = "Medium"


@dataclass(frozen=True)
class Reimbursement(Record):
    employee_name: str
    category: str
    amount: float
    currency: str = "INR"
    description: str = ""
    submission_date: str = ""
    status: str = "Pending"
    reason_for_rejection: Optional[str] = None
    comments: List[Dict[str, Any]] = field(default_factory=list)
    history: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class Applicant(Record):
    job_id: str  # advisory reference to a Job, never validated
    name: str
    email: str
    assertify_score: Optional[int] = None
    offer_status: str = "Pending"
    resume_link: Optional[str] = None
    offered_salary: Optional[str] = None
    offered_start_date: Optional[str] = None
    offer_letter_html: Optional[str] = None


@dataclass(frozen=True)
class Employee(Record):
    name: str
    email: str
    employee_code: str = ""
    role: str = "employee"
    designation: str = "INTERN"
    department_id: Optional[str] = None
    department: Optional[str] = None
    employee_type: str = "FULL_TIME"
    gender: str = "OTHER"
    join_date: str = ""
    status: str = "ACTIVE"
    salary: Optional[float] = None
    avatar_url: str = ""
    reporting_manager: Optional[str] = None
    reporting_manager_id: Optional[str] = None
    joining_letter_html: Optional[str] = None
    base_role: str = "employee"
    current_role: str = "employee"


@dataclass(frozen=True)
class Attendance(Record):
    """One employee's attendance for one day. Coordinates are {latitude, longitude}."""
    employee_name: str
    date: str  # YYYY-MM-DD
    status: Optional[str] = None
    notes: str = ""
    check_in_time_category: Optional[str] = None
    work_location: Optional[str] = None
    user_coordinates: Optional[Dict[str, float]] = None
    check_out_time_category: Optional[str] = None
    check_out_coordinates: Optional[Dict[str, float]] = None
