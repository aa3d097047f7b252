from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Union

from data.result import Result

Number = Union[int, float]

# Card payloads from the metrics API carry no schema guarantee.
MetricSnapshot = Dict[str, Any]


@dataclass(frozen=True)
class MonthlyComparisonRow:
    """One month of the year-over-year comparison. ``value`` is this year."""

    id: int
    name: str
    value: Number
    previous_value: Number


@dataclass(frozen=True)
class SalesChartPoint:
    date: str
    web_sales: Number
    offline_sales: Number


@dataclass(frozen=True)
class SalesRecord:
    id: int
    date: str
    web_sales: Number
    offline_sales: Number


@dataclass(frozen=True)
class ProductRecord:
    id: int
    product: str
    sold_amount: Number
    unit_price: Number
    revenue: Number
    rating: Number


def as_records(items: Iterable[Any]) -> List[Dict[str, Any]]:
    return [asdict(item) for item in items]


@dataclass(frozen=True)
class SalesChart:
    points: List[SalesChartPoint]
    raw: Any  # API payload as received, shown beside the chart


@dataclass(frozen=True)
class SalesComparison:
    chart: Result[SalesChart]
    table: Result[List[SalesRecord]]
