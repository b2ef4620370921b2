"""
Profile page - personal information and rewards
"""
from datetime import timedelta

import streamlit as st

from portal.core.profile_store import REWARD_REASON_CATEGORIES
from portal.documents.templates import attachment_filename, pay_slip_html


def render_profile(portal):
    profile = portal.profile.profile
    if profile is None:
        st.info("Loading profile...")
        return

    personal = profile["personal"]
    secondary = profile["secondaryData"]
    rewards = profile["rewards"]

    st.markdown(f"## 🪪 {personal['name']}")
    st.caption(f"{secondary['currentPosition']} at {profile['companyName']}")

    col1, col2 = st.columns(2)
    col1.write(f"**Email:** {personal['companyEmail']}")
    col1.write(f"**Phone:** {personal['phone'] or 'N/A'}")
    col1.write(f"**Address:** {personal['address'] or 'N/A'}")
    col2.metric("Reward points", rewards["points"])
    col2.write(f"**Joined:** {secondary['joinDate']}")

    with st.expander("✏️ Edit personal information"):
        with st.form("personal_info"):
            name = st.text_input("Name", value=personal["name"])
            phone = st.text_input("Phone", value=personal["phone"])
            address = st.text_input("Address", value=personal["address"])
            if st.form_submit_button("Save"):
                portal.profile.update_personal_information(
                    {"name": name, "phone": phone, "address": address}
                )
                st.success("Your details have been saved.")
                st.rerun()

    with st.expander("🏅 Nominate a colleague"):
        with st.form("nomination"):
            nominee = st.text_input("Colleague")
            category = st.selectbox("Category", REWARD_REASON_CATEGORIES)
            reason = st.text_area("Why?")
            if st.form_submit_button("Nominate"):
                try:
                    portal.profile.add_nomination(nominee, reason, category)
                except ValueError as e:
                    st.error(str(e))
                else:
                    st.success(f"Nominated {nominee}")
                    st.rerun()

    if rewards["nominations"]:
        st.markdown("### My nominations")
        for nomination in reversed(rewards["nominations"]):
            st.write(f"- {nomination['date']}: **{nomination['nominee']}** ({nomination['category']})")

    with st.expander("🧾 Download pay slip"):
        with st.form("pay_slip"):
            period = st.date_input("Pay period start")
            basic = st.number_input("Basic", min_value=0.0, step=1000.0)
            hra = st.number_input("HRA", min_value=0.0, step=500.0)
            tax = st.number_input("Income Tax", min_value=0.0, step=500.0)
            generated = st.form_submit_button("Generate")

        if generated:
            slip = pay_slip_html({
                "employee_name": personal["name"],
                "position_title": secondary["currentPosition"],
                "department": secondary["department"],
                "pay_period_start": period.isoformat(),
                "pay_period_end": (period + timedelta(days=30)).isoformat(),
                "allowances": [("Basic", basic), ("HRA", hra)],
                "deductions": [("Income Tax", tax)],
            })
            st.download_button(
                "Download",
                data=slip,
                file_name=attachment_filename(personal["name"], "Pay_Slip"),
                mime="text/html",
            )
