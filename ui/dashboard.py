"""
Dashboard - role-aware overview
"""
import streamlit as st


def render_dashboard(portal):
    user = portal.session.user
    role = user.current_role

    st.markdown(f"## 📊 Welcome, {user.name}")
    st.caption(f"{role.icon} Acting as {role.name}: {role.description}")

    col1, col2, col3 = st.columns(3)
    col1.metric("Departments", len(portal.departments.list()))
    col2.metric("Projects", len(portal.projects.list()))
    col3.metric("Tasks", len(portal.tasks.list()))

    my_tasks = portal.tasks.for_assignee(user.name)
    if my_tasks:
        st.markdown("### My tasks")
        for task in my_tasks:
            st.write(f"- **{task.title}** ({task.status}, due {task.due_date or 'N/A'})")
