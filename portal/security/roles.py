"""
ROLE DEFINITIONS

Define portal roles, who may switch into what, and per-role navigation.

Rules:
- No IO
- Declarations only; lookups live in role_guard.py
- Role values are explicit lowercase strings
- Catalog order is display order (highest privilege first)
"""

from dataclasses import dataclass
from typing import Dict, List, Literal


@dataclass(frozen=True)
class Role:
    """One entry of the role catalog. `value` is the stable identity."""
    value: str
    name: str
    description: str
    icon: str


@dataclass(frozen=True)
class NavItem:
    """Sidebar entry shown for a role."""
    path: str
    label: str
    icon: str


# Role values
SUPERADMIN: Literal["superadmin"] = "superadmin"
ADMIN: Literal["admin"] = "admin"
MANAGER: Literal["manager"] = "manager"
TEAMLEAD: Literal["teamlead"] = "teamlead"
HR: Literal["hr"] = "hr"
ACCOUNTS: Literal["accounts"] = "accounts"
EMPLOYEE: Literal["employee"] = "employee"

LOWEST_PRIVILEGE_ROLE = EMPLOYEE

# ==================================================
# ROLE CATALOG (ORDERED)
# ==================================================

ROLES: List[Role] = [
    Role(SUPERADMIN, "Super Admin", "Full system access and control.", "👑"),
    Role(ADMIN, "Admin", "Administrative access to most features.", "🛡️"),
    Role(MANAGER, "Manager", "Manages teams, projects, and approvals.", "💼"),
    Role(TEAMLEAD, "Team Lead", "Leads a team's day-to-day tasks.", "🧭"),
    Role(HR, "HR", "Manages employee data, recruitment, and HR processes.", "🧑‍💼"),
    Role(ACCOUNTS, "Accounts", "Manages finances, payroll, and reimbursements.", "🧮"),
    Role(EMPLOYEE, "Employee", "Standard employee access.", "👤"),
]

ALL_ROLES: List[str] = [role.value for role in ROLES]

# ==================================================
# ROLE → ROLES IT MAY SWITCH INTO
# ==================================================
# The base role itself is never listed; returning to it is always allowed.

ROLE_SWITCH_PERMISSIONS: Dict[str, List[str]] = {
    SUPERADMIN: [ADMIN, MANAGER, TEAMLEAD, HR, ACCOUNTS, EMPLOYEE],
    ADMIN: [MANAGER, TEAMLEAD, HR, ACCOUNTS, EMPLOYEE],
    MANAGER: [TEAMLEAD, EMPLOYEE],
    TEAMLEAD: [EMPLOYEE],
    HR: [EMPLOYEE],
    ACCOUNTS: [EMPLOYEE],
    EMPLOYEE: [],
}

# ==================================================
# NAVIGATION PER ROLE
# ==================================================

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"

_DASHBOARD = NavItem(DASHBOARD_PATH, "Dashboard", "📊")
_PROFILE = NavItem("/dashboard/profile", "Profile", "🪪")
_ATTENDANCE = NavItem("/dashboard/attendance", "Attendance", "🕘")
_EMPLOYEES = NavItem("/dashboard/employees", "Employees", "👥")

_MANAGEMENT_ITEMS: List[NavItem] = [
    NavItem("/dashboard/departments", "Departments", "🏢"),
    NavItem("/dashboard/projects", "Projects", "🗂️"),
    NavItem("/dashboard/tasks", "Tasks", "✅"),
    NavItem("/dashboard/reimbursements", "Reimbursements", "🧾"),
    NavItem("/dashboard/jobs", "Jobs", "📌"),
]

ROLE_NAV_CONFIG: Dict[str, List[NavItem]] = {
    SUPERADMIN: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        _EMPLOYEES,
        *_MANAGEMENT_ITEMS,
        NavItem("/dashboard/offers", "Offers", "✉️"),
        NavItem("/dashboard/analytics", "HR Analytics", "📈"),
    ],
    ADMIN: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        _EMPLOYEES,
        *_MANAGEMENT_ITEMS,
        NavItem("/dashboard/offers", "Offers", "✉️"),
        NavItem("/dashboard/analytics", "HR Analytics", "📈"),
    ],
    MANAGER: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        NavItem("/dashboard/projects", "Team Projects", "🗂️"),
        NavItem("/dashboard/tasks", "Team Tasks", "✅"),
        NavItem("/dashboard/reimbursements", "Approve Claims", "🧾"),
        NavItem("/dashboard/jobs", "Job Openings", "📌"),
    ],
    TEAMLEAD: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        NavItem("/dashboard/tasks", "Team Tasks", "✅"),
        NavItem("/dashboard/projects", "Team Projects", "🗂️"),
    ],
    HR: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        _EMPLOYEES,
        NavItem("/dashboard/departments", "Manage Departments", "🏢"),
        NavItem("/dashboard/jobs", "Manage Jobs", "📌"),
        NavItem("/dashboard/offers", "Manage Offers", "✉️"),
        NavItem("/dashboard/reimbursements", "Reimbursements", "🧾"),
        NavItem("/dashboard/analytics", "HR Analytics", "📈"),
    ],
    ACCOUNTS: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        NavItem("/dashboard/reimbursements", "Manage Reimbursements", "🧾"),
    ],
    EMPLOYEE: [
        _DASHBOARD,
        _PROFILE,
        _ATTENDANCE,
        NavItem("/dashboard/tasks", "My Tasks", "✅"),
        NavItem("/dashboard/reimbursements", "My Reimbursements", "🧾"),
    ],
}
