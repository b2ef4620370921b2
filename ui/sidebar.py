"""
Sidebar - identity, role switcher, per-role navigation, logout
"""
import streamlit as st

from portal.security.role_guard import navigation_for, show_role_switcher


def render_role_switcher(portal):
    """Base role first, then its switch targets. Hidden for the lowest role."""
    user = portal.session.user
    if user is None or not show_role_switcher(user.base_role.value):
        return

    options = user.roles
    values = [role.value for role in options]
    labels = {role.value: f"{role.icon} {role.name}" for role in options}

    selected = st.sidebar.selectbox(
        "Acting as",
        values,
        index=values.index(user.current_role.value),
        format_func=lambda value: labels[value],
        key="role_switcher",
    )

    if selected != user.current_role.value:
        if portal.session.set_current_role(selected):
            st.toast(f"Switched to {labels[selected]}")
            st.rerun()
        else:
            st.sidebar.error("You don't have permission to switch to this role")


def render_sidebar(portal):
    """Render the sidebar and return the selected navigation path."""
    user = portal.session.user

    st.sidebar.markdown(f"### {user.name}")
    st.sidebar.caption(user.email)
    st.sidebar.caption(f"Base role: {user.base_role.name}")

    render_role_switcher(portal)

    items = navigation_for(user.current_role.value)
    paths = [item.path for item in items]
    labels = {item.path: f"{item.icon} {item.label}" for item in items}

    current = portal.guard.path if portal.guard.path in paths else paths[0]
    selected = st.sidebar.radio(
        "Navigate",
        paths,
        index=paths.index(current),
        format_func=lambda path: labels[path],
    )

    st.sidebar.divider()
    if st.sidebar.button("Log out"):
        portal.session.logout()
        st.rerun()

    return selected
