"""
tests/test_accessor.py

TableAccessor over a stubbed SQL client.

Coverage
--------
- Full-table query text (no filter, ordering or limit)
- Row normalization: projection, case-insensitive columns, NULL/NaN -> None
- Empty table vs backend failure are distinct outcomes at this boundary
- SqlClient picks the SDK OAuth path only when the app name is configured
"""

from __future__ import annotations

import math

import pandas as pd
import pytest

from conftest import StubSqlClient, make_config
from data import connection
from data.connection import DatabricksAuthError, SqlClient
from data.accessor import TableAccessor, normalize_rows
from data.errors import ErrorKind, QueryFailedError
from data.queries import Table, q_full_table


class TestQuery:
    @pytest.mark.parametrize("table", list(Table))
    def test_full_table_select(self, cfg, table) -> None:
        sql = q_full_table(cfg, table)
        assert "SELECT *" in sql
        assert f"`main`.`metrics_dashboard`.{table.value}" in sql
        for clause in ("WHERE", "ORDER BY", "LIMIT"):
            assert clause not in sql.upper()


class TestNormalizeRows:
    def test_projects_expected_columns_in_order(self) -> None:
        df = pd.DataFrame(
            [
                {"id": 1, "Month": "Jan", "Last_year": 10, "This_year": 12, "extra": "x"},
                {"id": 2, "Month": "Feb", "Last_year": 11, "This_year": 13, "extra": "y"},
            ]
        )
        rows = normalize_rows(df, ("id", "Month", "Last_year", "This_year"))
        assert rows == [
            {"id": 1, "Month": "Jan", "Last_year": 10, "This_year": 12},
            {"id": 2, "Month": "Feb", "Last_year": 11, "This_year": 13},
        ]

    def test_nulls_and_missing_columns_become_none(self) -> None:
        df = pd.DataFrame([{"id": 1, "date": None, "web_sales": float("nan")}])
        rows = normalize_rows(df, ("id", "date", "web_sales", "offline_sales"))

        assert rows[0]["date"] is None
        assert rows[0]["web_sales"] is None
        assert rows[0]["offline_sales"] is None

    def test_case_insensitive_column_match(self) -> None:
        df = pd.DataFrame([{"id": 1, "product": "Widget", "SOLD_AMOUNT": 5}])
        rows = normalize_rows(df, ("id", "Product", "sold_amount"))
        assert rows == [{"id": 1, "Product": "Widget", "sold_amount": 5}]

    def test_empty_frame(self) -> None:
        assert normalize_rows(pd.DataFrame(), ("id",)) == []


class TestFetchRows:
    def test_returns_rows_in_source_order(self, cfg) -> None:
        df = pd.DataFrame({"id": [3, 1, 2], "date": ["c", "a", "b"], "web_sales": [1, 2, 3], "offline_sales": [4, 5, 6]})
        client = StubSqlClient(df=df)

        rows = TableAccessor(cfg, client=client).fetch_rows(Table.SALES_DATA)

        assert [r["id"] for r in rows] == [3, 1, 2]
        assert "sales_data" in client.queries[0]

    def test_empty_table_is_not_an_error(self, cfg) -> None:
        rows = TableAccessor(cfg, client=StubSqlClient(df=pd.DataFrame())).fetch_rows(Table.PRODUCT_DATA)
        assert rows == []

    def test_backend_error_is_query_failed(self, cfg) -> None:
        boom = RuntimeError("warehouse unreachable")
        accessor = TableAccessor(cfg, client=StubSqlClient(exc=boom))

        with pytest.raises(QueryFailedError) as info:
            accessor.fetch_rows(Table.MONTHLY_COMPARISON)

        assert info.value.kind is ErrorKind.QUERY_FAILED
        assert info.value.table == "monthly_comparison"
        assert info.value.cause is boom

    def test_numeric_values_come_back_as_python_numbers(self, cfg) -> None:
        df = pd.DataFrame({"id": [1], "Product": ["A"], "sold_amount": [5], "unit_price": [2.5], "revenue": [12.5], "rating": [float("nan")]})
        rows = TableAccessor(cfg, client=StubSqlClient(df=df)).fetch_rows(Table.PRODUCT_DATA)

        assert rows[0]["unit_price"] == 2.5
        assert rows[0]["rating"] is None
        assert not (isinstance(rows[0]["revenue"], float) and math.isnan(rows[0]["revenue"]))


class TestSqlClientAuthPath:
    def test_app_name_routes_through_sdk(self, monkeypatch) -> None:
        calls = []

        def fake_sdk(query, http_path):
            calls.append((query, http_path))
            return pd.DataFrame({"id": [1]})

        monkeypatch.setattr(SqlClient, "_query_with_sdk", staticmethod(fake_sdk))
        client = SqlClient(cfg=make_config(databricks_app_name="metrics-dashboard"))

        df = client.query("SELECT 1")

        assert list(df["id"]) == [1]
        assert calls == [("SELECT 1", "/sql/1.0/warehouses/abc")]

    def test_without_app_name_the_sdk_is_not_tried(self, monkeypatch) -> None:
        def fail_sdk(query, http_path):
            raise AssertionError("SDK path must not run outside Databricks Apps")

        monkeypatch.setattr(SqlClient, "_query_with_sdk", staticmethod(fail_sdk))
        client = SqlClient(cfg=make_config(databricks_app_name=None, databricks_token=None))

        with pytest.raises(DatabricksAuthError):
            client.query("SELECT 1")

    def test_connection_module_reads_no_env(self) -> None:
        assert not hasattr(connection, "os")
