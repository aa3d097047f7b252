from __future__ import annotations

from dataclasses import dataclass
from typing import List

from config import AppConfig
from data import adapters
from data import mock_data
from data.accessor import TableAccessor, get_table_accessor
from data.api_client import ApiClient, get_api_client
from data.models import SalesComparison
from data.notifications import NotificationLog
from data.result import Ok, Result
from data.widget_state import WidgetRun, WidgetSpec, run_widgets


@dataclass
class WidgetSources:
    api: ApiClient
    tables: TableAccessor
    notifier: NotificationLog

    def close(self) -> None:
        self.api.close()


def build_sources(cfg: AppConfig, use_mock: bool) -> WidgetSources:
    """Fresh, unshared sources for one widget fetch."""
    notifier = NotificationLog()
    if use_mock:
        return WidgetSources(
            api=mock_data.get_mock_api_client(cfg, notifier),
            tables=mock_data.get_mock_table_accessor(cfg),
            notifier=notifier,
        )
    return WidgetSources(
        api=get_api_client(cfg, notifier),
        tables=get_table_accessor(cfg),
        notifier=notifier,
    )


def get_sales_overview(sources: WidgetSources) -> Result:
    return adapters.load_sales_overview(sources.api)


def get_monthly_comparison(sources: WidgetSources) -> Result:
    return adapters.load_monthly_comparison(sources.tables, sources.notifier)


def get_user_metrics(sources: WidgetSources) -> Result:
    return adapters.load_user_metrics(sources.api)


def get_sales_comparison(sources: WidgetSources) -> Result:
    # chart (API) and table (store) fail independently; the panel is an
    # error only when both do
    chart = adapters.load_sales_chart(sources.api)
    table = adapters.load_sales_table(sources.tables, sources.notifier)
    if not chart.ok and not table.ok:
        return chart
    return Ok(SalesComparison(chart=chart, table=table))


def get_inventory_status(sources: WidgetSources) -> Result:
    return adapters.load_inventory_status(sources.api)


def get_product_performance(sources: WidgetSources) -> Result:
    return adapters.load_product_performance(sources.tables, sources.notifier)


DASHBOARD_WIDGETS: List[WidgetSpec] = [
    WidgetSpec("sales_overview", "Sales Overview", get_sales_overview),
    WidgetSpec("monthly_comparison", "Monthly Comparison", get_monthly_comparison),
    WidgetSpec("user_metrics", "User Metrics", get_user_metrics),
    WidgetSpec("sales_comparison", "Sales Comparison", get_sales_comparison),
    WidgetSpec("inventory_status", "Inventory Status", get_inventory_status),
    WidgetSpec("product_performance", "Product Performance", get_product_performance),
]


def load_dashboard(cfg: AppConfig, use_mock: bool) -> List[WidgetRun]:
    return run_widgets(DASHBOARD_WIDGETS, lambda: build_sources(cfg, use_mock))
