"""
Display formatting for metric cards and tables (en-US grouping).

Missing or non-numeric values never raise: counts and currency fall back to
"N/A", percentages to "0%", text to "N/A".
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

PLACEHOLDER = "N/A"


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str


def _as_real(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, numbers.Real):
        value = float(value)
        return None if math.isnan(value) or math.isinf(value) else value
    return None


def format_number(value: Any) -> Optional[str]:
    """``50000 -> "50,000"``, ``1234.5 -> "1,234.5"``; at most three decimals."""
    real = _as_real(value)
    if real is None:
        return None
    if real.is_integer():
        return f"{int(real):,}"
    return f"{real:,.3f}".rstrip("0").rstrip(".")


def format_count(value: Any) -> str:
    formatted = format_number(value)
    if formatted is not None:
        return formatted
    if isinstance(value, str) and value.strip():
        return value.strip()
    return PLACEHOLDER


def format_currency(value: Any) -> str:
    formatted = format_count(value)
    return PLACEHOLDER if formatted == PLACEHOLDER else f"${formatted}"


def format_percent(value: Any) -> str:
    formatted = format_count(value)
    return f"{'0' if formatted == PLACEHOLDER else formatted}%"


def format_text(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    text = str(value).strip()
    return text if text else PLACEHOLDER


# ---------------------------------------------------------------------------
# Card layouts for the three snapshot widgets
# ---------------------------------------------------------------------------


def sales_overview_kpis(snapshot: Mapping[str, Any]) -> list[Kpi]:
    return [
        Kpi("Total Sales", format_currency(snapshot.get("totalSales"))),
        Kpi("Growth", format_percent(snapshot.get("growth"))),
        Kpi("Top Product", format_text(snapshot.get("topProduct"))),
    ]


def user_metrics_kpis(snapshot: Mapping[str, Any]) -> list[Kpi]:
    return [
        Kpi("Active Users", format_count(snapshot.get("activeUsers"))),
        Kpi("New Users", format_count(snapshot.get("newUsers"))),
        Kpi("Retention Rate", format_percent(snapshot.get("retentionRate"))),
    ]


def inventory_status_kpis(snapshot: Mapping[str, Any]) -> list[Kpi]:
    return [
        Kpi("Total Items", format_count(snapshot.get("inventoryItems"))),
        Kpi("Low Stock", format_count(snapshot.get("lowStockItems"))),
        Kpi("Out of Stock", format_count(snapshot.get("outOfStockItems"))),
    ]


def table_rows(records: Sequence[Mapping[str, Any]], columns: Sequence[tuple[str, str]]) -> list[dict[str, str]]:
    """Project records onto ``(key, label)`` columns with display formatting."""
    rows = []
    for record in records:
        row = {}
        for key, label in columns:
            value = record.get(key)
            row[label] = format_count(value) if _as_real(value) is not None else format_text(value)
        rows.append(row)
    return rows
