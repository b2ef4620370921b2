"""
PORTAL COMPOSITION ROOT

Builds every store once, hydrates them synchronously, and wires the
session → profile and session → route guard subscriptions.

Order:
1. Route guard and profile synchronizer attach while the session is loading
2. Session store hydrates (loading → False) and notifies them
3. Entity stores hydrate independently
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from portal.config import PORTAL_DATA_DIR
from portal.core.profile_store import ProfileStore
from portal.core.route_guard import RouteGuard
from portal.core.session_store import SessionStore, auth_storage_name, new_client_id
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
from portal.integrations.api_client import ApiClient
from portal.integrations.employee_service import EmployeeService
from portal.integrations.reimbursement_service import ReimbursementService
from portal.storage.snapshot_store import SnapshotStorage

logger = logging.getLogger(__name__)


@dataclass
class Portal:
    storage: SnapshotStorage
    session: SessionStore
    profile: ProfileStore
    guard: RouteGuard
    jobs: JobStore
    departments: DepartmentStore
    projects: ProjectStore
    tasks: TaskStore
    reimbursements: ReimbursementStore
    applicants: ApplicantStore
    employees: EmployeeStore
    attendance: AttendanceStore
    api: ApiClient
    reimbursement_service: ReimbursementService
    employee_service: EmployeeService
    client_id: str
    _unsubscribers: List[Callable[[], None]] = field(default_factory=list)

    def entity_stores(self):
        return [
            self.jobs,
            self.departments,
            self.projects,
            self.tasks,
            self.reimbursements,
            self.applicants,
            self.employees,
            self.attendance,
        ]

    def close(self) -> None:
        """Detach all session subscriptions."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()


def build_portal(
    data_dir: Optional[str] = None,
    api_url: Optional[str] = None,
    on_redirect: Optional[Callable[[str], None]] = None,
    client_id: Optional[str] = None,
) -> Portal:
    """
    Construct and hydrate the whole store layer for one browser.

    `client_id` names that browser's session snapshot; a fresh one (no
    saved sign-in) is used when omitted.

    Raises:
        ValueError: client_id is not a valid client id
    """
    storage = SnapshotStorage(data_dir or PORTAL_DATA_DIR)
    client_id = client_id or new_client_id()

    session = SessionStore(storage, auth_storage_name(client_id))
    profile = ProfileStore(storage)
    guard = RouteGuard(on_redirect=on_redirect)

    api_kwargs = {"on_unauthorized": session.logout}
    if api_url:
        api_kwargs["base_url"] = api_url
    api = ApiClient(**api_kwargs)

    portal = Portal(
        storage=storage,
        session=session,
        profile=profile,
        guard=guard,
        jobs=JobStore(storage),
        departments=DepartmentStore(storage),
        projects=ProjectStore(storage),
        tasks=TaskStore(storage),
        reimbursements=ReimbursementStore(storage),
        applicants=ApplicantStore(storage),
        employees=EmployeeStore(storage),
        attendance=AttendanceStore(storage),
        api=api,
        reimbursement_service=ReimbursementService(api),
        employee_service=EmployeeService(api),
        client_id=client_id,
    )

    portal._unsubscribers.append(guard.attach(session))
    portal._unsubscribers.append(profile.attach(session))
    session.hydrate()

    for store in portal.entity_stores():
        store.hydrate()

    logger.info(f"Portal ready (data dir: {storage.data_dir})")
    return portal
