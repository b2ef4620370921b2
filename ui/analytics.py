"""
HR Analytics - recruitment funnel and task progress
Charts render only when explicitly requested
"""
import streamlit as st


def status_counts(records, field):
    """{status: count} for a list of records, ordered by count."""
    import pandas as pd

    if not records:
        return pd.Series(dtype="int64")
    df = pd.DataFrame([{field: getattr(r, field)} for r in records])
    return df[field].value_counts()


def render_analytics(portal):
    import plotly.express as px

    st.markdown("## 📈 HR Analytics")

    applicants = portal.applicants.list()
    tasks = portal.tasks.list()

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Open Jobs", len(portal.jobs.open_jobs()))
    col2.metric("Applicants", len(applicants))
    col3.metric("Hired", len([a for a in applicants if a.offer_status == "Hired"]))
    col4.metric("Pending Claims", len(portal.reimbursements.filter(status="Pending")))

    if not st.button("📊 Load charts"):
        return

    offers = status_counts(applicants, "offer_status")
    if not offers.empty:
        st.plotly_chart(px.bar(offers, title="Applicants by Offer Status"), use_container_width=True)

    task_status = status_counts(tasks, "status")
    if not task_status.empty:
        st.plotly_chart(px.pie(values=task_status.values, names=task_status.index, title="Tasks by Status"), use_container_width=True)
