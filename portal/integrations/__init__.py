"""
Integrations Package

Backend API access for the portal.
"""

from portal.integrations.api_client import ApiClient, ApiResponse
from portal.integrations.employee_service import EmployeeService
from portal.integrations.reimbursement_service import ReimbursementService

__all__ = [
    'ApiClient',
    'ApiResponse',
    'EmployeeService',
    'ReimbursementService',
]
