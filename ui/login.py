"""
Login page - demo accounts only
"""
import streamlit as st

from portal.security.demo_accounts import DEMO_ACCOUNTS, DEMO_PASSWORD, authenticate
from portal.security.role_guard import get_role
from portal.security.roles import DASHBOARD_PATH


def render_login(portal):
    """Render the login form. On success the session store notifies the guard."""
    st.markdown("## 🔐 Sign in")

    with st.form("login_form"):
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if submitted:
        account = authenticate(email, password)
        if account is None:
            st.error("Invalid email or password.")
        else:
            portal.session.login(account)
            portal.guard.navigate(DASHBOARD_PATH, portal.session)
            st.rerun()

    with st.expander("Demo accounts"):
        for account in DEMO_ACCOUNTS:
            role = get_role(account.role)
            st.write(f"{role.icon} **{role.name}**: `{account.email}`")
        st.caption(f"Password for every demo account: `{DEMO_PASSWORD}`")
