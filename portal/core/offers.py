"""
OFFER WORKFLOW

Generate an offer letter for an applicant and email it.

Flow:
Selected/Pending → Offer Generated (letter stored on the applicant)
Offer Generated  → Offer Sent (only after the email service succeeds)
"""

import html
import logging
from typing import Any, Callable, Dict, Optional

from portal.core.entities import Applicant
from portal.core.stores import ApplicantStore
from portal.documents.templates import attachment_filename, offer_letter_html
from portal.config import COMPANY_NAME
from portal.notifications import email_service
from portal.notifications.email_service import Attachment, EmailResult

logger = logging.getLogger(__name__)

OFFER_GENERATED = "Offer Generated"
OFFER_SENT = "Offer Sent"

EmailSender = Callable[..., EmailResult]


def generate_offer(
    applicants: ApplicantStore,
    applicant_id: str,
    offer: Dict[str, Any],
) -> Optional[Applicant]:
    """
    Render the offer letter and store it on the applicant.

    `offer` needs position_title, salary and start_date; department,
    reporting_manager and offer_expiry_date are optional.
    Returns None when the applicant is unknown.
    """
    applicant = applicants.get_by_id(applicant_id)
    if applicant is None:
        return None

    letter = offer_letter_html({
        "candidate_name": applicant.name,
        **offer,
    })

    updated = applicants.update(applicant_id, {
        "offer_status": OFFER_GENERATED,
        "offered_salary": offer["salary"],
        "offered_start_date": offer["start_date"],
        "offer_letter_html": letter,
    })
    logger.info(f"Offer generated for applicant {applicant_id}")
    return updated


def send_offer(
    applicants: ApplicantStore,
    applicant_id: str,
    send: EmailSender = email_service.send_email,
) -> EmailResult:
    """
    Email the stored offer letter as an attachment.

    The applicant moves to Offer Sent only when the email succeeds.
    """
    applicant = applicants.get_by_id(applicant_id)

    if applicant is None:
        return EmailResult(False, f"No applicant {applicant_id}")

    if not applicant.offer_letter_html:
        return EmailResult(False, f"No offer letter generated for {applicant.name}")

    body = (
        f"<p>Dear {html.escape(applicant.name)},</p>"
        f"<p>Please find your offer letter attached.</p>"
        f"<p>Sincerely,<br/>{COMPANY_NAME} HR</p>"
    )
    result = send(
        to=applicant.email,
        subject=f"Job Offer from {COMPANY_NAME} for {applicant.name}",
        html_body=body,
        attachments=[
            Attachment(attachment_filename(applicant.name, "Offer_Letter"), applicant.offer_letter_html)
        ],
    )

    if result.success:
        applicants.update(applicant_id, {"offer_status": OFFER_SENT})
        logger.info(f"Offer sent to applicant {applicant_id}")
    else:
        logger.warning(f"Offer email failed for applicant {applicant_id}: {result.message}")

    return result
