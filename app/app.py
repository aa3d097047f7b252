"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from auth.routing import DASHBOARD, LOGIN, resolve_route  # noqa: E402
from auth.session import AuthSession  # noqa: E402
from components.header import render_header  # noqa: E402
from components.narrative import queue_flash, render_flash  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import APP_TITLE, apply_theme  # noqa: E402
from config import get_config  # noqa: E402
from logging_utils import configure_logging  # noqa: E402

from views import dashboard, login  # noqa: E402


def _go(page: str) -> None:
    st.query_params["page"] = page
    st.rerun()


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg.log_level)
    render_flash(st.session_state)

    session = AuthSession.initialize(st.session_state)
    requested = st.query_params.get("page")
    page = resolve_route(requested, session.authenticated)
    if page != requested:
        st.query_params["page"] = page

    # Routing only
    if page == LOGIN:
        login.render(cfg, session)
        return

    state = render_sidebar(cfg, session.username)
    if state.logout:
        session.clear()
        queue_flash(st.session_state, "Logged out successfully", icon="ℹ️")
        _go(LOGIN)

    render_header(
        app_name=APP_TITLE,
        subtitle="Sales, users, inventory and product performance",
        right_pill=f"{session.username} · Data: {'Mock' if state.use_mock else 'Live'}",
    )

    if state.view == DASHBOARD:
        dashboard.render(cfg, state.use_mock)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
