import base64
import json

import pytest
import requests
import responses

from portal.notifications import email_service
from portal.notifications.email_service import BREVO_API_URL, Attachment, send_email


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(email_service.time, "sleep", lambda seconds: None)


@responses.activate
def test_send_email_success():
    responses.add(responses.POST, BREVO_API_URL, json={"messageId": "msg-1"}, status=201)

    result = send_email(
        to="sneha.g@example.com",
        subject="Job Offer",
        html_body="<p>Hi</p>",
        attachments=[Attachment("Offer_Letter.html", "<p>Offer</p>")],
        api_key="test-key",
    )

    assert result.success
    assert "msg-1" in result.message

    request = responses.calls[0].request
    assert request.headers["api-key"] == "test-key"
    payload = json.loads(request.body)
    assert payload["to"] == [{"email": "sneha.g@example.com"}]
    assert payload["attachment"][0]["name"] == "Offer_Letter.html"
    assert base64.b64decode(payload["attachment"][0]["content"]) == b"<p>Offer</p>"


def test_missing_api_key_skips_send(monkeypatch):
    monkeypatch.setattr(email_service, "BREVO_API_KEY", None)

    result = send_email(to="a@example.com", subject="s", html_body="b")

    assert not result.success
    assert result.message == "Email service is not configured"


def test_missing_recipient():
    result = send_email(to="", subject="s", html_body="b", api_key="test-key")
    assert not result.success


@responses.activate
def test_timeout_retries_then_fails():
    responses.add(responses.POST, BREVO_API_URL, body=requests.exceptions.ReadTimeout("slow"))

    result = send_email(to="a@example.com", subject="s", html_body="b", api_key="test-key")

    assert not result.success
    assert len(responses.calls) == email_service.MAX_RETRIES + 1


@responses.activate
def test_http_error_is_reported():
    responses.add(responses.POST, BREVO_API_URL, json={"code": "unauthorized"}, status=401)

    result = send_email(to="a@example.com", subject="s", html_body="b", api_key="bad-key")

    assert not result.success
    assert "401" in result.message
    assert len(responses.calls) == 1
