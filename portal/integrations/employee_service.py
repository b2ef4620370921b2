"""
Employee endpoints of the portal backend.

Every call returns the decoded response body; ApiError propagates.
"""

from typing import Any, Dict, List

from portal.integrations.api_client import ApiClient


class EmployeeService:

    def __init__(self, api: ApiClient):
        self.api = api

    def get_all(self) -> List[Dict[str, Any]]:
        data = self.api.get("/employees").data
        return data if isinstance(data, list) else []

    def get_by_id(self, employee_id: str) -> Dict[str, Any]:
        return self.api.get(f"/employees/{employee_id}").data

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.post("/employees", data).data

    def update(self, employee_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.put(f"/employees/{employee_id}", data).data

    def delete(self, employee_id: str) -> Any:
        return self.api.delete(f"/employees/{employee_id}").data
