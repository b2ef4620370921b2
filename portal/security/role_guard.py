"""
ROLE AUTHORIZATION ENGINE

Pure lookups over the role catalog and the switch-permission table.

Rules:
- No mutation
- No IO
- Unknown role values never raise; they simply grant nothing
"""

from typing import Dict, List, Optional

from portal.errors import RoleConfigurationError
from portal.security.roles import (
    ROLES,
    ROLE_SWITCH_PERMISSIONS,
    ROLE_NAV_CONFIG,
    LOWEST_PRIVILEGE_ROLE,
    NavItem,
    Role,
)

_ROLES_BY_VALUE: Dict[str, Role] = {role.value: role for role in ROLES}
_CATALOG_ORDER: Dict[str, int] = {role.value: i for i, role in enumerate(ROLES)}


def get_role(value: Optional[str]) -> Optional[Role]:
    """Resolve a role value to its catalog entry."""
    if value is None:
        return None
    return _ROLES_BY_VALUE.get(value)


def can_switch(base_role: str, target_role: str) -> bool:
    """
    Check whether a session with `base_role` may adopt `target_role`.

    Returning to the base role is always allowed for a known base role.
    """
    if base_role not in _ROLES_BY_VALUE:
        return False

    if target_role == base_role:
        return True

    return target_role in ROLE_SWITCH_PERMISSIONS.get(base_role, [])


def available_targets(base_role: str) -> List[Role]:
    """Roles `base_role` may switch into, in catalog order."""
    targets = [
        _ROLES_BY_VALUE[value]
        for value in ROLE_SWITCH_PERMISSIONS.get(base_role, [])
        if value in _ROLES_BY_VALUE
    ]
    targets.sort(key=lambda role: _CATALOG_ORDER[role.value])
    return targets


def show_role_switcher(base_role: Optional[str]) -> bool:
    """The switcher is hidden for the lowest-privilege role."""
    if base_role is None or base_role not in _ROLES_BY_VALUE:
        return False
    return base_role != LOWEST_PRIVILEGE_ROLE


def navigation_for(role_value: Optional[str]) -> List[NavItem]:
    """Sidebar entries for the active role."""
    if role_value is None:
        return []
    return list(ROLE_NAV_CONFIG.get(role_value, []))


def validate_permission_table() -> None:
    """
    Check that the switch table is total over the catalog, references only
    known roles, and never lists a role as its own target.
    """
    for role in ROLES:
        if role.value not in ROLE_SWITCH_PERMISSIONS:
            raise RoleConfigurationError(
                f"Role '{role.value}' has no switch-permission entry"
            )

    for base, targets in ROLE_SWITCH_PERMISSIONS.items():
        if base not in _ROLES_BY_VALUE:
            raise RoleConfigurationError(
                f"Switch-permission entry for unknown role '{base}'"
            )
        for target in targets:
            if target == base:
                raise RoleConfigurationError(
                    f"Role '{base}' lists itself as a switch target"
                )
            if target not in _ROLES_BY_VALUE:
                raise RoleConfigurationError(
                    f"Role '{base}' lists unknown switch target '{target}'"
                )


validate_permission_table()
