"""
Collection pages - list, add, update status, delete

One generic renderer drives every entity store.
"""
import pandas as pd
import streamlit as st

from portal.core.entities import (
    CURRENCIES,
    EMPLOYEE_STATUSES,
    JOB_STATUSES,
    OFFER_STATUSES,
    PROJECT_STATUSES,
    REIMBURSEMENT_STATUSES,
    TASK_PRIORITIES,
    TASK_STATUSES,
)
from portal.errors import ApiError
from portal.security.roles import ALL_ROLES

# path -> (title, store attribute, add-form text fields, status field, status options)
COLLECTION_PAGES = {
    "/dashboard/jobs": ("📌 Jobs", "jobs", ["title", "department", "location", "description"], "status", JOB_STATUSES),
    "/dashboard/departments": ("🏢 Departments", "departments", ["name", "head", "description"], None, None),
    "/dashboard/projects": ("🗂️ Projects", "projects", ["name", "project_manager", "team_members", "description"], "status", PROJECT_STATUSES),
    "/dashboard/tasks": ("✅ Tasks", "tasks", ["title", "assignee", "project", "due_date"], "status", TASK_STATUSES),
    "/dashboard/reimbursements": ("🧾 Reimbursements", "reimbursements", ["employee_name", "category", "description"], "status", REIMBURSEMENT_STATUSES),
    "/dashboard/offers": ("✉️ Applicants", "applicants", ["job_id", "name", "email"], "offer_status", OFFER_STATUSES),
    "/dashboard/employees": ("👥 Employees", "employees", ["name", "email", "designation", "department"], "status", EMPLOYEE_STATUSES),
}

# store attribute -> backend service attribute on the portal
SYNCED_COLLECTIONS = {
    "reimbursements": "reimbursement_service",
    "employees": "employee_service",
}


def _label(field_name):
    return field_name.replace("_", " ").title()


def _extra_inputs(store_attr):
    """Non-text fields some collections need on creation."""
    extra = {}
    if store_attr == "tasks":
        extra["priority"] = st.selectbox("Priority", TASK_PRIORITIES, index=1)
    elif store_attr == "employees":
        extra["role"] = st.selectbox("Role", ALL_ROLES, index=len(ALL_ROLES) - 1)
    elif store_attr == "reimbursements":
        extra["amount"] = st.number_input("Amount", min_value=0.0, step=100.0)
        extra["currency"] = st.selectbox("Currency", CURRENCIES)
    return extra


def render_collection(portal, path):
    title, store_attr, fields, status_field, status_options = COLLECTION_PAGES[path]
    store = getattr(portal, store_attr)

    st.markdown(f"## {title}")

    if store_attr in SYNCED_COLLECTIONS and st.button("🔄 Sync from backend"):
        try:
            count = store.sync_from_remote(getattr(portal, SYNCED_COLLECTIONS[store_attr]))
        except ApiError as e:
            st.error(f"Sync failed: {e}")
        else:
            st.success(f"Synced {count} records")

    records = store.list()
    if records:
        df = pd.DataFrame([record.to_dict() for record in records])
        df = df.drop(columns=[c for c in ("offerLetterHtml", "joiningLetterHtml", "comments", "history", "userCoordinates", "checkOutCoordinates") if c in df.columns])
        st.dataframe(df, use_container_width=True, hide_index=True)
    else:
        st.info("Nothing here yet")

    with st.expander("➕ Add"):
        with st.form(f"add_{store_attr}", clear_on_submit=True):
            values = {name: st.text_input(_label(name)) for name in fields}
            values.update(_extra_inputs(store_attr))
            if st.form_submit_button("Save"):
                missing = [name for name in fields[:1] if not values[name].strip()]
                if missing:
                    st.error(f"{_label(missing[0])} is required")
                else:
                    record = store.add(values)
                    st.success(f"Added {record.id}")
                    st.rerun()

    if not records:
        return

    ids = [record.id for record in records]

    if status_field:
        with st.expander("✏️ Update status"):
            with st.form(f"status_{store_attr}"):
                record_id = st.selectbox("Record", ids, key=f"status_id_{store_attr}")
                status = st.selectbox("Status", status_options)
                if st.form_submit_button("Update"):
                    store.update(record_id, {status_field: status})
                    if store_attr == "reimbursements":
                        store.add_history_entry(
                            record_id,
                            {"action": f"Status set to {status}", "user": portal.session.user.name},
                        )
                    st.rerun()

    with st.expander("🗑️ Delete"):
        record_id = st.selectbox("Record", ids, key=f"delete_id_{store_attr}")
        if st.button("Delete", key=f"delete_{store_attr}"):
            store.delete(record_id)
            st.rerun()
