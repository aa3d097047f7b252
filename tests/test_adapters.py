"""
tests/test_adapters.py

View-model adapters for the six widgets.

Coverage
--------
- Pure mappers: defaults, fallback labels, positional ids, truncation
- Idempotence: same input, structurally identical output
- Pass-through snapshots, including the API error path
- Empty table and failing table both end as Err, with distinct kinds
- Sales chart: first 12 points, short time labels, empty/non-list payloads
"""

from __future__ import annotations

from decimal import Decimal

import pandas as pd
import pytest
import requests

from conftest import StubSession, StubSqlClient, make_response
from data import adapters
from data.accessor import TableAccessor
from data.api_client import ApiClient
from data.errors import ErrorKind
from data.models import MonthlyComparisonRow, SalesChartPoint, SalesRecord


def _api(cfg, notifier, body=None, exc=None) -> ApiClient:
    session = StubSession(make_response(body=body) if exc is None else None, exc=exc)
    return ApiClient(cfg, notifier, session=session)


def _tables(cfg, df=None, exc=None) -> TableAccessor:
    return TableAccessor(cfg, client=StubSqlClient(df=df, exc=exc))


def _ok(data):
    return {"status": "success", "message": "ok", "data": data}


# ---------------------------------------------------------------------------
# Normalization helpers
# ---------------------------------------------------------------------------


class TestNormalizers:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, 0),
            (float("nan"), 0),
            (True, 0),
            ("abc", 0),
            ("12", 12),
            ("12.5", 12.5),
            (Decimal("3.25"), 3.25),
            (7, 7),
            (0, 0),
        ],
    )
    def test_as_number(self, value, expected) -> None:
        assert adapters.as_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "  ", float("nan")])
    def test_as_label_fallback(self, value) -> None:
        assert adapters.as_label(value, "Month 1") == "Month 1"

    def test_as_label_keeps_value(self) -> None:
        assert adapters.as_label("Jan", "Month 1") == "Jan"


# ---------------------------------------------------------------------------
# Pure mappers
# ---------------------------------------------------------------------------


class TestMonthlyRows:
    def test_null_row_at_index_two(self) -> None:
        rows = [
            {"Month": "Jan", "This_year": 10, "Last_year": 8},
            {"Month": "Feb", "This_year": 11, "Last_year": 9},
            {"Month": None, "This_year": None, "Last_year": None},
        ]
        out = adapters.to_monthly_rows(rows)
        assert out[2] == MonthlyComparisonRow(id=3, name="Month 3", value=0, previous_value=0)

    def test_keeps_source_order_without_dedup(self) -> None:
        rows = [{"Month": "Mar"}, {"Month": "Jan"}, {"Month": "Mar"}]
        assert [r.name for r in adapters.to_monthly_rows(rows)] == ["Mar", "Jan", "Mar"]

    def test_idempotent(self) -> None:
        rows = [{"Month": "Jan", "This_year": 1, "Last_year": 2}]
        assert adapters.to_monthly_rows(rows) == adapters.to_monthly_rows(rows)


class TestSalesRecords:
    def test_first_ten_rows_with_ids(self) -> None:
        rows = [{"date": f"2024-01-{i:02d}", "web_sales": i, "offline_sales": i * 2} for i in range(1, 16)]
        out = adapters.to_sales_records(rows)

        assert len(out) == 10
        assert [r.id for r in out] == list(range(1, 11))
        assert out[0] == SalesRecord(id=1, date="2024-01-01", web_sales=1, offline_sales=2)

    def test_missing_fields_default(self) -> None:
        assert adapters.to_sales_records([{}]) == [SalesRecord(id=1, date="Unknown", web_sales=0, offline_sales=0)]


class TestProductRecords:
    def test_defaults_and_fallback_name(self) -> None:
        out = adapters.to_product_records([{"Product": "Widget A", "sold_amount": 5}, {}])

        assert out[0].product == "Widget A"
        assert out[0].sold_amount == 5
        assert out[0].rating == 0
        assert out[1].product == "Product 2"
        assert (out[1].unit_price, out[1].revenue) == (0, 0)


class TestSalesChart:
    def test_first_twelve_points(self) -> None:
        records = [{"date": f"2024-05-01 {h:02d}:00:00", "web_sales": h, "offline_sales": 1} for h in range(20)]
        points = adapters.to_sales_chart(records)

        assert len(points) == 12
        assert points[0] == SalesChartPoint(date="00:00", web_sales=0, offline_sales=1)
        assert points[-1].date == "11:00"

    def test_malformed_items_default(self) -> None:
        points = adapters.to_sales_chart(["junk", {"date": "20240501"}])
        assert points == [
            SalesChartPoint(date="Unknown", web_sales=0, offline_sales=0),
            SalesChartPoint(date="20240501", web_sales=0, offline_sales=0),
        ]


# ---------------------------------------------------------------------------
# Snapshot widgets (API 1, 3, 5)
# ---------------------------------------------------------------------------


class TestSnapshots:
    def test_sales_overview_end_to_end(self, cfg, notifier) -> None:
        body = _ok({"totalSales": 50000, "growth": 12, "topProduct": "Widget A"})
        res = adapters.load_sales_overview(_api(cfg, notifier, body=body))

        assert res.ok
        assert res.value == {"totalSales": 50000, "growth": 12, "topProduct": "Widget A"}
        assert len(notifier) == 0

    def test_user_metrics_passthrough_of_unenveloped_object(self, cfg, notifier) -> None:
        res = adapters.load_user_metrics(_api(cfg, notifier, body={"activeUsers": 9}))
        assert res.ok and res.value == {"activeUsers": 9}

    def test_timeout_is_err_with_single_notification(self, cfg, notifier) -> None:
        res = adapters.load_inventory_status(_api(cfg, notifier, exc=requests.ReadTimeout("slow")))

        assert not res.ok
        assert res.kind is ErrorKind.TIMEOUT
        assert len(notifier) == 1

    def test_list_payload_is_invalid_for_cards(self, cfg, notifier) -> None:
        res = adapters.load_sales_overview(_api(cfg, notifier, body=_ok([1, 2])))

        assert not res.ok
        assert res.kind is ErrorKind.INVALID_RESPONSE_FORMAT
        assert [n.message for n in notifier.drain()] == ["Failed to fetch sales overview data"]


# ---------------------------------------------------------------------------
# Table widgets (monthly_comparison, sales_data, product_data)
# ---------------------------------------------------------------------------


class TestTableWidgets:
    def test_sales_table_fifteen_rows_gives_ten(self, cfg, notifier) -> None:
        df = pd.DataFrame({"id": range(100, 115), "date": ["2024-01-01"] * 15, "web_sales": range(15), "offline_sales": range(15)})
        res = adapters.load_sales_table(_tables(cfg, df=df), notifier)

        assert res.ok
        assert [r.id for r in res.value] == list(range(1, 11))
        assert [r.web_sales for r in res.value] == list(range(10))

    def test_empty_table_is_no_data(self, cfg, notifier) -> None:
        res = adapters.load_monthly_comparison(_tables(cfg, df=pd.DataFrame()), notifier)

        assert not res.ok
        assert res.kind is ErrorKind.NO_DATA
        assert [(n.level, n.message) for n in notifier.drain()] == [("warning", "No data available for monthly comparison")]

    def test_backend_failure_is_query_failed(self, cfg, notifier) -> None:
        res = adapters.load_product_performance(_tables(cfg, exc=RuntimeError("down")), notifier)

        assert not res.ok
        assert res.kind is ErrorKind.QUERY_FAILED
        assert [(n.level, n.message) for n in notifier.drain()] == [("error", "Failed to fetch product performance data")]

    def test_empty_and_failure_both_collapse_to_err(self, cfg, notifier) -> None:
        empty = adapters.load_sales_table(_tables(cfg, df=pd.DataFrame()), notifier)
        failed = adapters.load_sales_table(_tables(cfg, exc=RuntimeError("down")), notifier)

        assert not empty.ok and not failed.ok
        assert empty.kind is not failed.kind

    def test_monthly_comparison_normalizes_nulls(self, cfg, notifier) -> None:
        df = pd.DataFrame(
            {
                "id": [1, 2, 3],
                "Month": ["Jan", "Feb", None],
                "Last_year": [1.0, 2.0, None],
                "This_year": [3.0, 4.0, None],
            }
        )
        res = adapters.load_monthly_comparison(_tables(cfg, df=df), notifier)

        assert res.ok
        assert res.value[2] == MonthlyComparisonRow(id=3, name="Month 3", value=0, previous_value=0)

    def test_same_upstream_data_gives_same_output(self, cfg, notifier) -> None:
        df = pd.DataFrame({"id": [1, 2], "Product": ["A", None], "sold_amount": [1, 2], "unit_price": [1.5, 2.5], "revenue": [1.5, 5.0], "rating": [4.0, None]})

        first = adapters.load_product_performance(_tables(cfg, df=df), notifier)
        second = adapters.load_product_performance(_tables(cfg, df=df), notifier)

        assert first == second


# ---------------------------------------------------------------------------
# Sales comparison chart (API 4)
# ---------------------------------------------------------------------------


class TestSalesChartWidget:
    def test_chart_points_and_raw_payload(self, cfg, notifier) -> None:
        data = [{"date": "2024-05-01 14:30:00", "web_sales": 5, "offline_sales": 3}]
        res = adapters.load_sales_chart(_api(cfg, notifier, body=_ok(data)))

        assert res.ok
        assert res.value.points == [SalesChartPoint(date="14:30", web_sales=5, offline_sales=3)]
        assert res.value.raw == data

    @pytest.mark.parametrize("data", [[], {"not": "a list"}])
    def test_empty_or_non_list_is_no_data(self, cfg, notifier, data) -> None:
        res = adapters.load_sales_chart(_api(cfg, notifier, body=_ok(data)))

        assert not res.ok
        assert res.kind is ErrorKind.NO_DATA
        assert [n.message for n in notifier.drain()] == ["No data available for sales comparison chart"]

    def test_request_failure_keeps_client_notification_only(self, cfg, notifier) -> None:
        res = adapters.load_sales_chart(_api(cfg, notifier, exc=requests.ConnectionError("refused")))

        assert not res.ok
        assert res.kind is ErrorKind.REQUEST_FAILED
        assert len(notifier) == 1
