from portal.documents.templates import (
    attachment_filename,
    joining_letter_html,
    offer_letter_html,
    pay_slip_html,
)


def test_offer_letter_contains_offer_details():
    letter = offer_letter_html({
        "candidate_name": "Bhavana Reddy",
        "position_title": "Senior Software Engineer",
        "department": "Technology",
        "start_date": "2024-10-01",
        "salary": "₹18,00,000 per annum",
    })

    assert "OFFER LETTER" in letter
    assert "Bhavana Reddy" in letter
    assert "Senior Software Engineer" in letter
    assert "₹18,00,000 per annum" in letter


def test_values_are_html_escaped():
    letter = offer_letter_html({
        "candidate_name": "<script>alert(1)</script>",
        "position_title": "Engineer & Lead",
        "start_date": "2024-10-01",
        "salary": "$100",
    })

    assert "<script>" not in letter
    assert "&lt;script&gt;" in letter
    assert "Engineer &amp; Lead" in letter
    assert "$100" in letter


def test_joining_letter():
    letter = joining_letter_html({
        "employee_name": "Anita Desai",
        "position_title": "HR Executive",
        "start_date": "2024-07-01",
    })

    assert "JOINING LETTER" in letter
    assert "Anita Desai" in letter
    assert "Full-time" in letter


def test_pay_slip_net_pay_and_rows():
    slip = pay_slip_html({
        "employee_name": "Priya Sharma",
        "pay_period_start": "2024-07-01",
        "pay_period_end": "2024-07-31",
        "allowances": [("Basic", 50000), ("HRA", 20000)],
        "deductions": [("Income Tax", 7500), ("PF <12%>", 2500)],
    })

    assert "Net Pay: 60,000.00" in slip
    assert "<td>Basic</td><td>50,000.00</td>" in slip
    assert "PF &lt;12%&gt;" in slip


def test_attachment_filename():
    assert attachment_filename("Sneha Gupta", "Offer_Letter") == "Sneha_Gupta_Offer_Letter.html"
    assert attachment_filename(None, "Pay_Slip") == "document_Pay_Slip.html"
