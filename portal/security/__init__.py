"""
Security Package

Role catalog and role-switch authorization.
"""

from portal.security.role_guard import (
    get_role,
    can_switch,
    available_targets,
    show_role_switcher,
    navigation_for,
)

__all__ = [
    'get_role',
    'can_switch',
    'available_targets',
    'show_role_switcher',
    'navigation_for',
]
