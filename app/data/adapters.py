"""
View-model adapters, one per dashboard widget.

Each public ``load_*`` function pulls from the API client and/or the table
accessor and returns ``Ok(view_model)`` or ``Err(kind, message)``; none of
them raise. The ``to_*`` mappers are pure and hold the normalization rules:
missing numbers become ``0``, missing labels get a positional fallback and
ids are 1-based positions in source order.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, List, Sequence

from data.accessor import Row, TableAccessor
from data.api_client import ApiClient, Endpoint
from data.errors import DashboardDataError, ErrorKind, QueryFailedError
from data.labels import parse_time_label
from data.models import (
    MetricSnapshot,
    MonthlyComparisonRow,
    Number,
    ProductRecord,
    SalesChart,
    SalesChartPoint,
    SalesRecord,
)
from data.notifications import NotificationLog
from data.queries import Table
from data.result import Err, Ok, Result
from logging_utils import log_event

logger = logging.getLogger(__name__)

SALES_CHART_POINTS = 12
SALES_TABLE_ROWS = 10


def as_number(value: Any) -> Number:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
        if value.is_integer():
            value = int(value)
    if isinstance(value, numbers.Real):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return 0
        return value
    return 0


def as_label(value: Any, fallback: str) -> str:
    if value is None:
        return fallback
    if isinstance(value, float) and math.isnan(value):
        return fallback
    text = str(value).strip()
    return text if text else fallback


# ---------------------------------------------------------------------------
# Pure mappers
# ---------------------------------------------------------------------------


def to_monthly_rows(rows: Sequence[Row]) -> List[MonthlyComparisonRow]:
    return [
        MonthlyComparisonRow(
            id=i,
            name=as_label(row.get("Month"), f"Month {i}"),
            value=as_number(row.get("This_year")),
            previous_value=as_number(row.get("Last_year")),
        )
        for i, row in enumerate(rows, start=1)
    ]


def to_sales_records(rows: Sequence[Row]) -> List[SalesRecord]:
    return [
        SalesRecord(
            id=i,
            date=as_label(row.get("date"), "Unknown"),
            web_sales=as_number(row.get("web_sales")),
            offline_sales=as_number(row.get("offline_sales")),
        )
        for i, row in enumerate(rows[:SALES_TABLE_ROWS], start=1)
    ]


def to_product_records(rows: Sequence[Row]) -> List[ProductRecord]:
    return [
        ProductRecord(
            id=i,
            product=as_label(row.get("Product"), f"Product {i}"),
            sold_amount=as_number(row.get("sold_amount")),
            unit_price=as_number(row.get("unit_price")),
            revenue=as_number(row.get("revenue")),
            rating=as_number(row.get("rating")),
        )
        for i, row in enumerate(rows, start=1)
    ]


def to_sales_chart(records: Sequence[Any]) -> List[SalesChartPoint]:
    points = []
    for item in records[:SALES_CHART_POINTS]:
        item = item if isinstance(item, Mapping) else {}
        points.append(
            SalesChartPoint(
                date=parse_time_label(item.get("date")),
                web_sales=as_number(item.get("web_sales")),
                offline_sales=as_number(item.get("offline_sales")),
            )
        )
    return points


# ---------------------------------------------------------------------------
# Fetch + map
# ---------------------------------------------------------------------------


def _failed(widget: str, exc: DashboardDataError) -> Err:
    log_event(logger, logging.WARNING, "adapter_failed", widget=widget, kind=exc.kind.value, error=str(exc))
    return Err.from_exception(exc)


def _succeeded(widget: str, value: Any, **fields: Any) -> Ok:
    log_event(logger, logging.INFO, "adapter_succeeded", widget=widget, **fields)
    return Ok(value)


def _snapshot(api: ApiClient, endpoint: Endpoint, widget: str, label: str) -> Result[MetricSnapshot]:
    try:
        payload = api.get(endpoint)
    except DashboardDataError as exc:
        # the client already notified
        return _failed(widget, exc)

    if not isinstance(payload, Mapping):
        message = f"Unexpected {label} payload: {type(payload).__name__}"
        api.notifier.error(f"Failed to fetch {label} data")
        log_event(logger, logging.WARNING, "adapter_failed", widget=widget, kind=ErrorKind.INVALID_RESPONSE_FORMAT.value, error=message)
        return Err(kind=ErrorKind.INVALID_RESPONSE_FORMAT, message=message)
    return _succeeded(widget, dict(payload), fields=sorted(payload))


def _table_rows(tables: TableAccessor, table: Table, notifier: NotificationLog, widget: str, label: str) -> Result[List[Row]]:
    try:
        rows = tables.fetch_rows(table)
    except QueryFailedError as exc:
        notifier.error(f"Failed to fetch {label} data")
        return _failed(widget, exc)

    if not rows:
        message = f"No data available for {label}"
        notifier.warning(message)
        log_event(logger, logging.WARNING, "adapter_failed", widget=widget, kind=ErrorKind.NO_DATA.value, error=message)
        return Err(kind=ErrorKind.NO_DATA, message=message)
    return Ok(rows)


def load_sales_overview(api: ApiClient) -> Result[MetricSnapshot]:
    return _snapshot(api, Endpoint.SALES_OVERVIEW, "sales_overview", "sales overview")


def load_user_metrics(api: ApiClient) -> Result[MetricSnapshot]:
    return _snapshot(api, Endpoint.USER_METRICS, "user_metrics", "user metrics")


def load_inventory_status(api: ApiClient) -> Result[MetricSnapshot]:
    return _snapshot(api, Endpoint.INVENTORY_STATUS, "inventory_status", "inventory status")


def load_monthly_comparison(tables: TableAccessor, notifier: NotificationLog) -> Result[List[MonthlyComparisonRow]]:
    res = _table_rows(tables, Table.MONTHLY_COMPARISON, notifier, "monthly_comparison", "monthly comparison")
    if not res.ok:
        return res
    rows = to_monthly_rows(res.value)
    return _succeeded("monthly_comparison", rows, rows=len(rows))


def load_sales_table(tables: TableAccessor, notifier: NotificationLog) -> Result[List[SalesRecord]]:
    res = _table_rows(tables, Table.SALES_DATA, notifier, "sales_table", "sales data table")
    if not res.ok:
        return res
    rows = to_sales_records(res.value)
    return _succeeded("sales_table", rows, rows=len(rows))


def load_product_performance(tables: TableAccessor, notifier: NotificationLog) -> Result[List[ProductRecord]]:
    res = _table_rows(tables, Table.PRODUCT_DATA, notifier, "product_performance", "product performance")
    if not res.ok:
        return res
    rows = to_product_records(res.value)
    return _succeeded("product_performance", rows, rows=len(rows))


def load_sales_chart(api: ApiClient) -> Result[SalesChart]:
    try:
        payload = api.get(Endpoint.SALES_COMPARISON)
    except DashboardDataError as exc:
        return _failed("sales_chart", exc)

    if not isinstance(payload, list) or not payload:
        message = "No data available for sales comparison chart"
        api.notifier.warning(message)
        log_event(logger, logging.WARNING, "adapter_failed", widget="sales_chart", kind=ErrorKind.NO_DATA.value, error=message)
        return Err(kind=ErrorKind.NO_DATA, message=message)

    points = to_sales_chart(payload)
    return _succeeded("sales_chart", SalesChart(points=points, raw=payload), points=len(points))
