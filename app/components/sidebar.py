from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool
    logout: bool


NAV_ITEMS = [
    ("📊 Dashboard", "dashboard"),
]


def render_sidebar(cfg: AppConfig, username: str | None) -> SidebarState:
    with st.sidebar:
        st.markdown("### 📈 Metrics Dashboard")
        st.caption(f"Signed in as **{username or 'unknown'}**")

        labels = [l for l, _ in NAV_ITEMS]
        label = st.radio(
            "Nav",
            labels,
            index=0,
            label_visibility="collapsed",
        )
        view = dict(NAV_ITEMS)[label]

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, widgets read the metrics API and Databricks SQL. Failures are shown, not hidden.",
            )
            st.session_state["use_mock"] = use_mock

            st.markdown("**API**")
            st.code(cfg.api_base_url, language="text")
            st.markdown("**Tables schema**")
            st.code(f"{cfg.databricks_catalog}.{cfg.databricks_schema}", language="text")

        logout = st.button("Logout", use_container_width=True)
    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

    return SidebarState(view=view, use_mock=use_mock, logout=logout)
