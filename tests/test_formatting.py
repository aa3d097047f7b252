from __future__ import annotations

import pytest

from components.formatting import (
    PLACEHOLDER,
    Kpi,
    format_count,
    format_currency,
    format_number,
    format_percent,
    format_text,
    inventory_status_kpis,
    sales_overview_kpis,
    table_rows,
    user_metrics_kpis,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (50000, "50,000"),
        (1234.5, "1,234.5"),
        (1234567.891, "1,234,567.891"),
        (0.12345, "0.123"),
        (12.0, "12"),
        (0, "0"),
        (-4200, "-4,200"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize("value", [None, "x", True, float("nan")])
def test_format_number_rejects_non_numbers(value) -> None:
    assert format_number(value) is None


def test_placeholders() -> None:
    assert format_count(None) == PLACEHOLDER
    assert format_currency(None) == PLACEHOLDER
    assert format_percent(None) == "0%"
    assert format_text("") == PLACEHOLDER


def test_string_values_pass_through() -> None:
    assert format_count("lots") == "lots"
    assert format_currency("12k") == "$12k"


def test_sales_overview_golden() -> None:
    kpis = sales_overview_kpis({"totalSales": 50000, "growth": 12, "topProduct": "Widget A"})
    assert kpis == [
        Kpi("Total Sales", "$50,000"),
        Kpi("Growth", "12%"),
        Kpi("Top Product", "Widget A"),
    ]


def test_sales_overview_empty_snapshot() -> None:
    assert [k.value for k in sales_overview_kpis({})] == ["N/A", "0%", "N/A"]


def test_user_metrics_cards() -> None:
    kpis = user_metrics_kpis({"activeUsers": 12500, "newUsers": 830, "retentionRate": 72.5})
    assert [k.value for k in kpis] == ["12,500", "830", "72.5%"]


def test_inventory_cards_field_by_field() -> None:
    kpis = inventory_status_kpis({"inventoryItems": 3200})
    assert [k.value for k in kpis] == ["3,200", "N/A", "N/A"]


def test_table_rows_formats_numbers_only() -> None:
    rows = table_rows(
        [{"id": 1, "product": "Widget A", "revenue": 12345.5, "rating": None}],
        [("product", "Product"), ("revenue", "Revenue"), ("rating", "Rating")],
    )
    assert rows == [{"Product": "Widget A", "Revenue": "12,345.5", "Rating": "N/A"}]
