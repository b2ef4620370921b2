"""Exception types raised at the portal's collaborator boundaries."""

from typing import Any, Optional


class PortalError(Exception):
    """Base class for portal errors."""
    pass


class ApiError(PortalError):
    """
    Backend HTTP call failed.

    Carries the HTTP status (None for transport failures) and the decoded
    backend body so callers can surface the backend's own message.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)


class RoleConfigurationError(PortalError):
    """Role catalog or switch-permission table is inconsistent."""
    pass
