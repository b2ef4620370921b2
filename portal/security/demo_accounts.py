"""
DEMO ACCOUNTS

Mocked identity directory used by the login page.

Rules:
- Not credential verification; every account shares one demo password
- One account per role, plus a few extras for switching between users
"""

import hmac
import logging
from dataclasses import dataclass
from typing import List, Optional

from portal.security.roles import (
    SUPERADMIN,
    ADMIN,
    MANAGER,
    TEAMLEAD,
    HR,
    ACCOUNTS,
    EMPLOYEE,
)

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"


@dataclass(frozen=True)
class Account:
    """Login payload: who is signing in and with which base role."""
    id: str
    name: str
    email: str
    role: str


DEMO_ACCOUNTS: List[Account] = [
    Account("USR001", "Super Admin User", "superadmin@example.com", SUPERADMIN),
    Account("USR002", "Admin User", "admin@example.com", ADMIN),
    Account("USR003", "Manager User", "manager@example.com", MANAGER),
    Account("USR004", "Team Lead User", "teamlead@example.com", TEAMLEAD),
    Account("USR005", "HR User", "hr@example.com", HR),
    Account("USR006", "Accounts User", "accounts@example.com", ACCOUNTS),
    Account("USR007", "Employee User", "employee@example.com", EMPLOYEE),
    Account("USR008", "Alice Manager", "alice.manager@example.com", MANAGER),
    Account("USR009", "Bob Employee", "bob.employee@example.com", EMPLOYEE),
]


def authenticate(email: str, password: str) -> Optional[Account]:
    """Look up a demo account. Returns None for unknown email or wrong password."""
    normalized = (email or "").strip().lower()

    for account in DEMO_ACCOUNTS:
        if account.email == normalized:
            if hmac.compare_digest(password or "", DEMO_PASSWORD):
                return account
            break

    logger.info("Demo login rejected")
    return None
