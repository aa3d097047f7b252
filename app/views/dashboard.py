from __future__ import annotations

from typing import Callable, Dict

import pandas as pd
import streamlit as st

from components.formatting import (
    inventory_status_kpis,
    sales_overview_kpis,
    table_rows,
    user_metrics_kpis,
)
from components.metrics import bar_chart, line_chart, render_kpi_row
from components.narrative import render_notifications, render_page_intro, render_placeholder
from config import AppConfig
from data.models import as_records
from data.service import load_dashboard
from data.widget_state import WidgetRun

MONTHLY_COLUMNS = [("name", "Month"), ("previous_value", "Last Year"), ("value", "This Year")]
SALES_COLUMNS = [("id", "ID"), ("date", "Date"), ("web_sales", "Web Sales"), ("offline_sales", "Offline Sales")]
PRODUCT_COLUMNS = [
    ("product", "Product"),
    ("sold_amount", "Sold Amount"),
    ("unit_price", "Unit Price"),
    ("revenue", "Revenue"),
    ("rating", "Rating"),
]


def _data_table(records, columns) -> None:
    st.dataframe(pd.DataFrame(table_rows(records, columns), columns=[label for _, label in columns]), hide_index=True, use_container_width=True)


def _snapshot(run: WidgetRun) -> dict:
    # errors render every field as its placeholder
    return run.result.value if run.result is not None and run.result.ok else {}


def _sales_overview(run: WidgetRun) -> None:
    kpis = sales_overview_kpis(_snapshot(run))
    render_kpi_row(kpis[:2])
    render_kpi_row(kpis[2:])


def _user_metrics(run: WidgetRun) -> None:
    kpis = user_metrics_kpis(_snapshot(run))
    render_kpi_row(kpis[:2])
    render_kpi_row(kpis[2:])


def _inventory_status(run: WidgetRun) -> None:
    render_kpi_row(inventory_status_kpis(_snapshot(run)))


def _monthly_comparison(run: WidgetRun) -> None:
    if not run.result.ok:
        render_placeholder(run.result.message)
        return
    rows = as_records(run.result.value)
    chart = pd.DataFrame(
        {
            "month": [r["name"] for r in rows],
            "lastYear": [r["previous_value"] for r in rows],
            "thisYear": [r["value"] for r in rows],
        }
    )
    bar_chart(chart, x="month", y=["lastYear", "thisYear"], labels={"lastYear": "Last Year", "thisYear": "This Year"})
    st.divider()
    _data_table(rows, MONTHLY_COLUMNS)


def _sales_comparison(run: WidgetRun) -> None:
    if not run.result.ok:
        render_placeholder(run.result.message)
        return
    comparison = run.result.value

    if comparison.chart.ok:
        chart = pd.DataFrame(as_records(comparison.chart.value.points))
        line_chart(chart, x="date", y=["web_sales", "offline_sales"], labels={"web_sales": "Web Sales", "offline_sales": "Offline Sales"})
        with st.expander("API data", expanded=False):
            st.json(comparison.chart.value.raw)
    else:
        render_placeholder(comparison.chart.message)

    st.divider()
    st.markdown('<div class="subtle">Sales Data Table</div>', unsafe_allow_html=True)
    if comparison.table.ok:
        _data_table(as_records(comparison.table.value), SALES_COLUMNS)
    else:
        render_placeholder(comparison.table.message)


def _product_performance(run: WidgetRun) -> None:
    if not run.result.ok:
        render_placeholder(run.result.message)
        return
    _data_table(as_records(run.result.value), PRODUCT_COLUMNS)


PANELS: Dict[str, Callable[[WidgetRun], None]] = {
    "sales_overview": _sales_overview,
    "monthly_comparison": _monthly_comparison,
    "user_metrics": _user_metrics,
    "sales_comparison": _sales_comparison,
    "inventory_status": _inventory_status,
    "product_performance": _product_performance,
}


def render(cfg: AppConfig, use_mock: bool) -> None:
    render_page_intro("Dashboard", "View data from multiple components")

    # every render fetches again; widgets load concurrently
    with st.spinner("Loading dashboard data..."):
        runs = load_dashboard(cfg, use_mock)

    st.caption(f"Data source: **{'mock' if use_mock else 'metrics API + Databricks SQL'}**")

    cols = st.columns(2, gap="medium")
    for i, run in enumerate(runs):
        with cols[i % 2]:
            with st.container(border=True):
                st.subheader(run.title)
                PANELS[run.key](run)
        render_notifications(run.notifications)
