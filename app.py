"""
HR Portal - Streamlit entrypoint
Role-aware employee portal: login, role switching, HR collections
"""
import streamlit as st

from portal.config import configure_logging

# ═══════════════════════════════════════════════════════════════
# PAGE CONFIG (MUST BE FIRST)
# ═══════════════════════════════════════════════════════════════
st.set_page_config(
    page_title="HR Portal",
    page_icon="🏢",
    layout="wide",
)

configure_logging()

# ═══════════════════════════════════════════════════════════════
# PORTAL (ONCE PER SESSION)
# ═══════════════════════════════════════════════════════════════
if "portal" not in st.session_state:
    from portal.bootstrap import build_portal
    from portal.core.session_store import is_valid_client_id, new_client_id

    # The browser keeps its id in the URL so a reload finds its own session
    client_id = st.query_params.get("client")
    if not is_valid_client_id(client_id):
        client_id = new_client_id()
        st.query_params["client"] = client_id

    st.session_state.portal = build_portal(client_id=client_id)

portal = st.session_state.portal

from portal.security.roles import LOGIN_PATH

# ═══════════════════════════════════════════════════════════════
# ROUTE GUARD
# ═══════════════════════════════════════════════════════════════
portal.guard.observe(portal.session.user, portal.session.loading)

if portal.session.loading:
    st.info("Loading...")
    st.stop()

if portal.guard.path == LOGIN_PATH and portal.session.user is None:
    from ui.login import render_login
    render_login(portal)
    st.stop()

# ═══════════════════════════════════════════════════════════════
# NAVIGATION
# ═══════════════════════════════════════════════════════════════
from ui.sidebar import render_sidebar

path = render_sidebar(portal)
portal.guard.navigate(path, portal.session)

# ═══════════════════════════════════════════════════════════════
# PAGES (LAZY)
# ═══════════════════════════════════════════════════════════════
if path == "/dashboard/profile":
    from ui.profile import render_profile
    render_profile(portal)

elif path == "/dashboard/analytics":
    from ui.analytics import render_analytics
    render_analytics(portal)

elif path == "/dashboard/offers":
    from ui.offers import render_offers
    from ui.collection_pages import render_collection
    render_offers(portal)
    st.divider()
    render_collection(portal, path)

elif path == "/dashboard/attendance":
    from ui.attendance import render_attendance
    render_attendance(portal)

elif path != "/dashboard":
    from ui.collection_pages import COLLECTION_PAGES, render_collection
    if path in COLLECTION_PAGES:
        render_collection(portal, path)
    else:
        st.warning(f"No page at {path}")

else:
    from ui.dashboard import render_dashboard
    render_dashboard(portal)
