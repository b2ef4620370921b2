import json

import pytest
import requests
import responses

from portal.errors import ApiError
from portal.integrations import ApiClient, ReimbursementService

BASE_URL = "http://backend.test/api"


@pytest.fixture
def api():
    return ApiClient(base_url=BASE_URL + "/", timeout=2)


@responses.activate
def test_get_decodes_json(api):
    responses.add(responses.GET, f"{BASE_URL}/reimbursements", json=[{"id": "R1"}], status=200)

    response = api.get("/reimbursements")

    assert response.status_code == 200
    assert response.data == [{"id": "R1"}]


@responses.activate
def test_bearer_token_attached():
    responses.add(responses.GET, f"{BASE_URL}/me", json={}, status=200)
    api = ApiClient(base_url=BASE_URL, token_provider=lambda: "tok-123")

    api.get("me")

    assert responses.calls[0].request.headers["Authorization"] == "Bearer tok-123"


@responses.activate
def test_error_carries_backend_message(api):
    responses.add(responses.GET, f"{BASE_URL}/reimbursements/R9", json={"error": "Reimbursement not found"}, status=404)

    with pytest.raises(ApiError) as exc_info:
        api.get("/reimbursements/R9")

    assert str(exc_info.value) == "Reimbursement not found"
    assert exc_info.value.status_code == 404
    assert exc_info.value.payload == {"error": "Reimbursement not found"}


@responses.activate
def test_error_without_body_gets_default_message(api):
    responses.add(responses.DELETE, f"{BASE_URL}/reimbursements/R1", status=500)

    with pytest.raises(ApiError) as exc_info:
        api.delete("/reimbursements/R1")

    assert "500" in str(exc_info.value)
    assert exc_info.value.payload is None


@responses.activate
def test_unauthorized_triggers_hook():
    signed_out = []
    responses.add(responses.GET, f"{BASE_URL}/reimbursements", json={"message": "Token expired"}, status=401)
    api = ApiClient(base_url=BASE_URL, on_unauthorized=lambda: signed_out.append(True))

    with pytest.raises(ApiError) as exc_info:
        api.get("/reimbursements")

    assert signed_out == [True]
    assert exc_info.value.status_code == 401


@responses.activate
def test_timeout_raises_api_error(api):
    responses.add(responses.GET, f"{BASE_URL}/reimbursements", body=requests.exceptions.ConnectTimeout("slow"))

    with pytest.raises(ApiError) as exc_info:
        api.get("/reimbursements")

    assert exc_info.value.status_code is None


@responses.activate
def test_service_endpoints(api):
    service = ReimbursementService(api)
    responses.add(responses.POST, f"{BASE_URL}/reimbursements", json={"id": "R2"}, status=201)
    responses.add(responses.PUT, f"{BASE_URL}/reimbursements/R2", json={"id": "R2", "status": "Approved"}, status=200)
    responses.add(responses.POST, f"{BASE_URL}/reimbursements/R2/comments", json={"id": "R2"}, status=201)

    assert service.create({"amount": 10})["id"] == "R2"
    assert service.update("R2", {"status": "Approved"})["status"] == "Approved"
    service.add_comment("R2", "Looks fine", "Accounts User")

    assert json.loads(responses.calls[2].request.body) == {"text": "Looks fine", "user": "Accounts User"}


@responses.activate
def test_service_get_all_tolerates_non_list(api):
    responses.add(responses.GET, f"{BASE_URL}/reimbursements", json={"items": []}, status=200)

    assert ReimbursementService(api).get_all() == []
