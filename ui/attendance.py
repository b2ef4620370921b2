"""
Attendance page - morning check-in, evening checkout, history
"""
from datetime import date

import pandas as pd
import streamlit as st

from portal.core.entities import (
    CHECK_IN_TIME_CATEGORIES,
    CHECK_OUT_TIME_CATEGORIES,
    WORK_LOCATIONS,
)


def render_attendance(portal):
    user = portal.session.user
    store = portal.attendance
    today = date.today()

    st.markdown("## 🕘 Attendance")
    record = store.get_attendance_for_user_and_date(user.name, today)

    col1, col2 = st.columns(2)

    with col1:
        st.markdown("### Morning check-in")
        if record and record.status == "Present" and record.check_in_time_category:
            st.success(f"Checked in ({record.check_in_time_category}, {record.work_location})")
        else:
            with st.form("check_in"):
                on_leave = st.checkbox("I am on leave today")
                category = st.selectbox("Check-in time", CHECK_IN_TIME_CATEGORIES)
                location = st.selectbox("Work location", WORK_LOCATIONS)
                notes = st.text_input("Notes")
                if st.form_submit_button("Check in"):
                    if on_leave:
                        store.mark_morning_check_in(user.name, today, status="Leave", notes=notes)
                    else:
                        store.mark_morning_check_in(
                            user.name,
                            today,
                            check_in_time_category=category,
                            work_location=location,
                            notes=notes,
                        )
                    st.rerun()

    with col2:
        st.markdown("### Evening checkout")
        if record and record.check_out_time_category:
            st.success(f"Checked out ({record.check_out_time_category})")
        elif record and record.status == "Present" and record.check_in_time_category:
            with st.form("check_out"):
                category = st.selectbox("Checkout time", CHECK_OUT_TIME_CATEGORIES)
                notes = st.text_input("Notes")
                if st.form_submit_button("Check out"):
                    store.mark_evening_checkout(user.name, today, category, notes=notes)
                    st.rerun()
        else:
            st.info("Check in first")

    history = store.for_employee(user.name)
    st.markdown("### History")
    if history:
        df = pd.DataFrame([
            {
                "Date": r.date,
                "Status": r.status,
                "Check-in": r.check_in_time_category,
                "Location": r.work_location,
                "Checkout": r.check_out_time_category,
                "Notes": r.notes,
            }
            for r in history
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)
    else:
        st.info("No attendance recorded yet")
