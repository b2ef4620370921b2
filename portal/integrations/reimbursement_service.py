"""
Reimbursement endpoints of the portal backend.

Every call returns the decoded response body; ApiError propagates.
"""

from typing import Any, Dict, List

from portal.integrations.api_client import ApiClient


class ReimbursementService:

    def __init__(self, api: ApiClient):
        self.api = api

    def get_all(self) -> List[Dict[str, Any]]:
        data = self.api.get("/reimbursements").data
        return data if isinstance(data, list) else []

    def get_by_id(self, reimbursement_id: str) -> Dict[str, Any]:
        return self.api.get(f"/reimbursements/{reimbursement_id}").data

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.post("/reimbursements", data).data

    def update(self, reimbursement_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.put(f"/reimbursements/{reimbursement_id}", data).data

    def delete(self, reimbursement_id: str) -> Any:
        return self.api.delete(f"/reimbursements/{reimbursement_id}").data

    def add_comment(self, reimbursement_id: str, text: str, user: str) -> Dict[str, Any]:
        return self.api.post(
            f"/reimbursements/{reimbursement_id}/comments", {"text": text, "user": user}
        ).data

    def add_history_entry(self, reimbursement_id: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        return self.api.post(f"/reimbursements/{reimbursement_id}/history", entry).data
