from __future__ import annotations

import html

import streamlit as st

from auth.routing import DASHBOARD
from auth.session import AuthSession
from components.narrative import queue_flash
from config import AppConfig


def render(cfg: AppConfig, session: AuthSession) -> None:
    _, center, _ = st.columns([1, 1.2, 1])
    with center:
        st.markdown("## Sign in")
        st.caption("Enter your credentials to access the dashboard")

        with st.form("login", clear_on_submit=False):
            username = st.text_input("Username", placeholder="Username")
            password = st.text_input("Password", type="password", placeholder="Password")
            submitted = st.form_submit_button("Sign in")

        if submitted:
            if session.authenticate(username, password, cfg):
                queue_flash(st.session_state, "Login successful", icon="✅")
                st.query_params["page"] = DASHBOARD
                st.rerun()
            else:
                st.toast("Invalid username or password", icon="🚫")

        st.markdown(
            f"""
<div class="login-hint">
  Demo credentials:<br/>
  Username: {html.escape(cfg.demo_username)}<br/>
  Password: {html.escape(cfg.demo_password)}
</div>
            """,
            unsafe_allow_html=True,
        )
