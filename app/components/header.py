from __future__ import annotations

import html

import streamlit as st


def header_html(app_name: str, subtitle: str, right_pill: str) -> str:
    return f"""
<div class="dash-header">
  <div class="dash-header-left">
    <div class="dash-mark">▦</div>
    <div>
      <div class="dash-title">{html.escape(app_name)}</div>
      <div class="dash-subtitle">{html.escape(subtitle)}</div>
    </div>
  </div>
  <div class="pill"><span class="dot"></span>{html.escape(right_pill)}</div>
</div>
"""


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(header_html(app_name, subtitle, right_pill), unsafe_allow_html=True)
