"""
EMAIL SERVICE (BREVO)

Purpose:
- Send transactional HR emails (offer letters, joining letters, pay slips)
- Graceful failure handling: callers always get an EmailResult

Requirements:
• Never hardcode API keys (use os.getenv via config)
• Timeout protection
• Retry on timeout with backoff
• Log all failures
• Never raise past this module
"""

import base64
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from portal.config import (
    API_TIMEOUT,
    BREVO_API_KEY,
    EMAIL_SENDER_ADDRESS,
    EMAIL_SENDER_NAME,
)

logger = logging.getLogger(__name__)

BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"
MAX_RETRIES = 2

DEFAULT_SENDER = {
    "email": EMAIL_SENDER_ADDRESS,
    "name": EMAIL_SENDER_NAME,
}


@dataclass(frozen=True)
class EmailResult:
    success: bool
    message: str


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: str

    def to_payload(self) -> Dict[str, str]:
        encoded = base64.b64encode(self.content.encode("utf-8")).decode("ascii")
        return {"name": self.filename, "content": encoded}


def _build_headers(api_key: Optional[str]) -> Dict[str, str]:
    """Build API request headers."""
    if not api_key:
        raise ValueError("BREVO_API_KEY not configured")

    return {
        "api-key": api_key,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def _send_email_request(
    payload: Dict[str, Any],
    api_key: Optional[str],
    retry_count: int = 0,
) -> EmailResult:
    """
    Send email via Brevo API with retry logic.

    Args:
        payload: Email payload
        api_key: Brevo API key
        retry_count: Current retry attempt
    """
    try:
        headers = _build_headers(api_key)

        logger.info(f"Sending email to {[r['email'] for r in payload.get('to', [])]} (attempt {retry_count + 1})")

        response = requests.post(
            BREVO_API_URL,
            json=payload,
            headers=headers,
            timeout=API_TIMEOUT,
        )

        response.raise_for_status()

        message_id = response.json().get("messageId", "N/A")
        logger.info(f"Email sent successfully: {message_id}")
        return EmailResult(True, f"Email sent ({message_id})")

    except requests.exceptions.Timeout:
        logger.error(f"Email API timeout (attempt {retry_count + 1})")

        if retry_count < MAX_RETRIES:
            time.sleep(2 ** retry_count)
            return _send_email_request(payload, api_key, retry_count + 1)

        return EmailResult(False, "Email service timed out")

    except requests.exceptions.HTTPError as e:
        logger.error(f"Email API HTTP error: {e.response.status_code} - {e.response.text}")
        return EmailResult(False, f"Email service rejected the message ({e.response.status_code})")

    except requests.exceptions.RequestException as e:
        logger.error(f"Email API error: {str(e)}")
        return EmailResult(False, f"Could not reach email service: {e}")

    except ValueError as e:
        logger.error(f"Email configuration error: {str(e)}")
        return EmailResult(False, str(e))


def send_email(
    to: str,
    subject: str,
    html_body: str,
    sender: Optional[Dict[str, str]] = None,
    attachments: Optional[List[Attachment]] = None,
    api_key: Optional[str] = None,
) -> EmailResult:
    """
    Send one HTML email.

    Args:
        to: Recipient address
        subject: Email subject
        html_body: HTML email body
        sender: Sender info {email, name} (optional)
        attachments: Files to attach (optional)
        api_key: Overrides the configured Brevo key (optional)

    Returns:
        EmailResult; never raises
    """
    api_key = api_key or BREVO_API_KEY

    if not api_key:
        logger.warning("BREVO_API_KEY not configured, skipping email")
        return EmailResult(False, "Email service is not configured")

    if not to:
        logger.warning("No recipient specified")
        return EmailResult(False, "No recipient specified")

    payload: Dict[str, Any] = {
        "sender": sender or DEFAULT_SENDER,
        "to": [{"email": to}],
        "subject": subject,
        "htmlContent": html_body,
    }

    if attachments:
        payload["attachment"] = [a.to_payload() for a in attachments]

    return _send_email_request(payload, api_key)
