from __future__ import annotations

import html
from typing import Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from components.formatting import Kpi
from config import THEME


def kpi_card_html(k: Kpi) -> str:
    return f"""
<div class="metric-card">
  <div class="metric-label">{html.escape(k.label)}</div>
  <div class="metric-value">{html.escape(k.value)}</div>
</div>
"""


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            st.markdown(kpi_card_html(k), unsafe_allow_html=True)


def create_plotly_theme() -> dict:
    """
    Shared Plotly styling:
    - white chart surface (cards)
    - Inter / system font
    - series colours from THEME
    - soft grids
    """
    return {
        "font_family": "Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif",
        "font_color": THEME["text_primary"],
        "paper_bgcolor": THEME["bg_card"],
        "plot_bgcolor": THEME["bg_card"],
        "colorway": [
            THEME["accent_secondary"],
            THEME["accent_primary"],
            THEME["accent_tertiary"],
            THEME["navy_800"],
            "#6B7280",
        ],
        "gridcolor": THEME["grid"],
        "axis_linecolor": THEME["border_color"],
        "legend": {
            "orientation": "h",
            "yanchor": "bottom",
            "y": 1.02,
            "xanchor": "left",
            "x": 0,
            "font": {"color": THEME["text_secondary"]},
        },
        "title_font": {"color": THEME["navy_900"], "size": 16},
    }


def apply_plotly_theme(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    theme = create_plotly_theme()
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(family=theme["font_family"], color=theme["font_color"]),
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        colorway=theme["colorway"],
        legend=theme["legend"],
        legend_title_text="",
        title_font=theme["title_font"],
    )
    fig.update_xaxes(
        title_text=x_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
        title_font=dict(color=THEME["text_secondary"]),
    )
    fig.update_yaxes(
        title_text=y_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
        title_font=dict(color=THEME["text_secondary"]),
        separatethousands=True,
    )
    return fig


def line_chart(
    df: pd.DataFrame,
    x: str,
    y: Sequence[str],
    labels: Optional[dict[str, str]] = None,
    title: str = "",
    hover_label: str = "Time",
):
    fig = px.line(df, x=x, y=list(y), title=title, markers=True)
    fig = apply_plotly_theme(fig, x_title="", y_title="")
    fig.update_traces(line=dict(width=2), hovertemplate=f"{hover_label}: %{{x}}<br>%{{fullData.name}}: %{{y:,}}<extra></extra>")
    if labels:
        fig.for_each_trace(lambda t: t.update(name=labels.get(t.name, t.name)))
    st.plotly_chart(fig, use_container_width=True)


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: Sequence[str],
    labels: Optional[dict[str, str]] = None,
    title: str = "",
    hover_label: str = "Month",
):
    fig = px.bar(df, x=x, y=list(y), barmode="group", title=title)
    fig = apply_plotly_theme(fig, x_title="", y_title="")
    fig.update_traces(hovertemplate=f"{hover_label}: %{{x}}<br>%{{fullData.name}}: %{{y:,}}<extra></extra>")
    if labels:
        fig.for_each_trace(lambda t: t.update(name=labels.get(t.name, t.name)))
    st.plotly_chart(fig, use_container_width=True)
