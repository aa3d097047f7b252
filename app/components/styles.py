from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Business Metrics Dashboard"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="📈",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

:root{
  --accent: __ACCENT__;
  --accent-2: __ACCENT_2__;
  --navy-900: __NAVY_900__;
  --navy-800: __NAVY_800__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --bg-muted: __BG_MUTED__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

/* App background + global typography */
html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  font-family: "Inter", system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif !important;
  color: var(--text-primary) !important;
}

/* Sidebar background */
[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

.block-container{
  padding-top: 0.75rem !important;
  padding-bottom: 2rem !important;
}

/* Header */
.dash-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.dash-header-left{
  display:flex;
  align-items:center;
  gap: 10px;
}
.dash-mark{
  font-size: 22px;
  color: var(--accent);
}
.dash-title{
  font-size: 20px;
  font-weight: 700;
  color: var(--navy-900);
  line-height: 1.1;
}
.dash-subtitle{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  background: white;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--navy-800);
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: var(--accent);
  display:inline-block;
}

/* Page intro */
.page-intro{
  margin: 0 0 14px 0;
}
.page-intro-title{
  font-size: 24px;
  font-weight: 700;
  color: var(--navy-900);
}
.page-intro-subtitle{
  font-size: 14px;
  color: var(--text-secondary);
}

/* Widget panels (st.container(border=True)) */
div[data-testid="stVerticalBlockBorderWrapper"]{
  background: var(--card-bg);
  border-radius: var(--radius) !important;
  box-shadow: var(--shadow);
}

/* Metric cards */
.metric-card{
  background: var(--bg-muted);
  border-radius: var(--radius);
  padding: 12px 14px;
}
.metric-label{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
  margin-bottom: 6px;
}
.metric-value{
  font-size: 24px;
  font-weight: 700;
  color: var(--text-primary);
  line-height: 1.2;
}

/* Empty / error placeholder */
.placeholder{
  display:flex;
  align-items:center;
  justify-content:center;
  min-height: 180px;
  background: var(--bg-muted);
  border-radius: var(--radius);
  margin: 6px 0;
}
.placeholder-body{
  font-size: 14px;
  color: var(--text-secondary);
}

/* Sign-in */
.login-hint{
  margin-top: 24px;
  text-align: center;
  font-size: 13px;
  color: var(--text-secondary);
  line-height: 1.6;
}

/* Buttons */
div.stButton > button, div.stFormSubmitButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
}
div.stFormSubmitButton > button{
  background: var(--navy-900) !important;
  color: white !important;
  width: 100%;
}

/* Charts on card surface */
div[data-testid="stPlotlyChart"]{
  background: var(--card-bg);
  border-radius: var(--radius);
  padding: 4px 6px;
}

.subtle{ color: var(--text-secondary); font-size: 14px; }
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_2__": str(THEME["accent_secondary"]),
        "__NAVY_900__": str(THEME["navy_900"]),
        "__NAVY_800__": str(THEME["navy_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__BG_MUTED__": str(THEME["bg_muted"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
