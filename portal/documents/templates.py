"""
DOCUMENT TEMPLATES

Purpose:
- Centralized HR document templates (offer letter, joining letter, pay slip)
- Pure functions: record in, HTML string out

Requirements:
• No state, no IO
• Every interpolated value is HTML-escaped
"""

import html
from datetime import date
from string import Template
from typing import Any, Dict, List, Optional, Tuple

from portal.config import COMPANY_NAME

COMPANY_ADDRESS = (
    "PES University, 12th Floor, B-Wing, 100 Feet Ring Road, "
    "Banashankari Stage III, Bengaluru, Karnataka 560085"
)
DEFAULT_REPORTING_MANAGER = "Mr. Prashanth R"


class DocumentTemplate:
    """HTML template with $placeholders."""

    def __init__(self, title: str, body: str):
        self.title = title
        self.body = Template(body)

    def render(self, **values: Any) -> str:
        escaped = {key: html.escape(str(value)) for key, value in values.items()}
        escaped.setdefault("title", html.escape(self.title))
        return _PAGE.substitute(title=escaped["title"], content=self.body.substitute(escaped))


def _today() -> str:
    return date.today().strftime("%d %B %Y")


_PAGE = Template("""
<div style="font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 40px;">
  <div style="text-align: right; font-size: 14px;">
    <p style="margin: 0;"><strong>$company_header</strong></p>
  </div>
  <div style="text-align: center; margin: 30px 0;">
    <h1 style="font-size: 24px;">$title</h1>
  </div>
  $content
</div>
""".replace("$company_header", html.escape(COMPANY_NAME).replace("$", "$$")))


# ────────────────────────────────────────────────────────────
# OFFER LETTER
# ────────────────────────────────────────────────────────────

OFFER_LETTER = DocumentTemplate(
    title="OFFER LETTER",
    body="""
  <p>Date: $date</p>
  <p>Dear $candidate_name,</p>
  <p>Welcome Aboard! After careful consideration of your application and subsequent
  interviews, we are delighted to extend an offer for you to join $company_name.</p>
  <table style="width: 100%; border-collapse: collapse;">
    <tr><td>Designation:</td><td>$position_title</td></tr>
    <tr><td>Department:</td><td>$department</td></tr>
    <tr><td>Joining Date:</td><td>$start_date</td></tr>
    <tr><td>Compensation:</td><td>$salary</td></tr>
    <tr><td>Reporting Manager:</td><td>$reporting_manager</td></tr>
  </table>
  <p>This offer is valid until $offer_expiry_date.</p>
  <p>Sincerely,<br/>$company_name HR</p>
""",
)


def offer_letter_html(data: Dict[str, Any]) -> str:
    """Render an offer letter from an offer record."""
    return OFFER_LETTER.render(
        date=_today(),
        candidate_name=data["candidate_name"],
        company_name=data.get("company_name", COMPANY_NAME),
        position_title=data["position_title"],
        department=data.get("department", ""),
        start_date=data["start_date"],
        salary=data["salary"],
        reporting_manager=data.get("reporting_manager", DEFAULT_REPORTING_MANAGER),
        offer_expiry_date=data.get("offer_expiry_date", "15 days from the date of this letter"),
    )


# ────────────────────────────────────────────────────────────
# JOINING LETTER
# ────────────────────────────────────────────────────────────

JOINING_LETTER = DocumentTemplate(
    title="JOINING LETTER",
    body="""
  <p>$company_address</p>
  <p>Date: $date</p>
  <p>Dear $employee_name,</p>
  <p>We are pleased to confirm your appointment as $position_title in the
  $department department, effective from $start_date.</p>
  <table style="width: 100%; border-collapse: collapse;">
    <tr><td>Employment Type:</td><td>$employee_type</td></tr>
    <tr><td>Monthly Salary:</td><td>$salary</td></tr>
    <tr><td>Reporting Manager:</td><td>$reporting_manager</td></tr>
  </table>
  <p>Employee Name: $employee_name</p>
""",
)


def joining_letter_html(data: Dict[str, Any]) -> str:
    """Render a joining letter from an employee record."""
    return JOINING_LETTER.render(
        company_address=COMPANY_ADDRESS,
        date=_today(),
        employee_name=data["employee_name"],
        position_title=data["position_title"],
        department=data.get("department", ""),
        start_date=data["start_date"],
        employee_type=data.get("employee_type", "Full-time"),
        salary=data.get("salary", ""),
        reporting_manager=data.get("reporting_manager", DEFAULT_REPORTING_MANAGER),
    )


# ────────────────────────────────────────────────────────────
# PAY SLIP
# ────────────────────────────────────────────────────────────

PAY_SLIP = DocumentTemplate(
    title="PAY SLIP",
    body="""
  <p>Date: $date</p>
  <table style="width: 100%; border-collapse: collapse;">
    <tr><td>Employee:</td><td>$employee_name ($employee_id)</td></tr>
    <tr><td>Designation:</td><td>$position_title</td></tr>
    <tr><td>Department:</td><td>$department</td></tr>
    <tr><td>Pay Period:</td><td>$pay_period_start to $pay_period_end</td></tr>
    <tr><td>Payment Date:</td><td>$payment_date</td></tr>
  </table>
  <h3>Earnings</h3>
  <table style="width: 100%;">$allowances_rows</table>
  <h3>Deductions</h3>
  <table style="width: 100%;">$deductions_rows</table>
  <p><strong>Net Pay: $net_pay</strong></p>
""",
)


def _rows(items: List[Tuple[str, float]]) -> str:
    return "".join(
        f"<tr><td>{html.escape(str(name))}</td><td>{amount:,.2f}</td></tr>"
        for name, amount in items
    )


def pay_slip_html(data: Dict[str, Any]) -> str:
    """
    Render a pay slip.

    `allowances` and `deductions` are lists of (name, amount) pairs.
    """
    allowances = list(data.get("allowances", []))
    deductions = list(data.get("deductions", []))
    net_pay = sum(a for _, a in allowances) - sum(d for _, d in deductions)

    # Row markup is built and escaped here, so it bypasses render()'s escaping.
    page = PAY_SLIP.render(
        date=_today(),
        employee_name=data["employee_name"],
        employee_id=data.get("employee_id", ""),
        position_title=data.get("position_title", ""),
        department=data.get("department", ""),
        pay_period_start=data["pay_period_start"],
        pay_period_end=data["pay_period_end"],
        payment_date=data.get("payment_date", ""),
        allowances_rows="@@ALLOWANCES@@",
        deductions_rows="@@DEDUCTIONS@@",
        net_pay=f"{net_pay:,.2f}",
    )
    return (
        page.replace("@@ALLOWANCES@@", _rows(allowances))
        .replace("@@DEDUCTIONS@@", _rows(deductions))
    )


def attachment_filename(person_name: Optional[str], document: str) -> str:
    """`Sneha Gupta`, `Offer_Letter` -> `Sneha_Gupta_Offer_Letter.html`."""
    base = (person_name or "document").strip().replace(" ", "_")
    return f"{base}_{document}.html"
