"""
Offers page - generate and email offer letters
"""
import streamlit as st

from portal.core.offers import generate_offer, send_offer


def render_offers(portal):
    st.markdown("## ✉️ Offers")

    candidates = portal.applicants.find(
        lambda a: a.offer_status in ("Selected", "Offer Generated")
    )
    if not candidates:
        st.info("No selected applicants awaiting an offer")
        return

    by_id = {a.id: a for a in candidates}
    applicant_id = st.selectbox(
        "Applicant",
        list(by_id),
        format_func=lambda aid: f"{by_id[aid].name} ({by_id[aid].offer_status})",
    )
    applicant = by_id[applicant_id]

    job = portal.jobs.get_by_id(applicant.job_id)

    with st.form("generate_offer"):
        position = st.text_input("Position", value=job.title if job else "")
        department = st.text_input("Department", value=job.department if job else "")
        salary = st.text_input("Salary", value=applicant.offered_salary or "")
        start_date = st.date_input("Start date")
        if st.form_submit_button("Generate offer letter"):
            generate_offer(portal.applicants, applicant_id, {
                "position_title": position,
                "department": department,
                "salary": salary,
                "start_date": start_date.isoformat(),
            })
            st.success(f"Offer for {applicant.name} is ready.")
            st.rerun()

    if applicant.offer_letter_html:
        with st.expander("Preview offer letter"):
            st.html(applicant.offer_letter_html)

        if st.button("📧 Email offer letter", type="primary"):
            with st.spinner("Sending..."):
                result = send_offer(portal.applicants, applicant_id)
            if result.success:
                st.success(f"Sent to {applicant.email}.")
            else:
                st.error(result.message)
