from __future__ import annotations

import json
import random
from datetime import datetime, timedelta
from typing import Any

import pandas as pd
import requests
from faker import Faker

from config import AppConfig
from data.accessor import TableAccessor
from data.api_client import ApiClient, Endpoint
from data.notifications import NotificationLog
from data.queries import Table


MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
PRODUCTS = ["Widget A", "Widget B", "Gadget Pro", "Gadget Mini", "Sensor Kit", "Cable Pack", "Dock Station", "Smart Plug"]


def _faker(seed: int) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def envelope(data: Any, status: str = "success", message: str = "Data fetched successfully") -> dict:
    return {"status": status, "message": message, "data": data}


def sales_overview_mock() -> dict:
    rng = random.Random(3)
    return {
        "totalSales": rng.randint(40_000, 90_000),
        "growth": round(rng.uniform(-5.0, 25.0), 1),
        "topProduct": rng.choice(PRODUCTS),
    }


def user_metrics_mock() -> dict:
    rng = random.Random(5)
    return {
        "activeUsers": rng.randint(8_000, 15_000),
        "newUsers": rng.randint(500, 2_500),
        "retentionRate": round(rng.uniform(55.0, 85.0), 1),
    }


def inventory_status_mock() -> dict:
    rng = random.Random(7)
    return {
        "inventoryItems": rng.randint(1_000, 5_000),
        "lowStockItems": rng.randint(10, 80),
        "outOfStockItems": rng.randint(0, 15),
    }


def sales_comparison_mock(n_points: int = 24, end: datetime | None = None) -> list[dict]:
    rng = random.Random(9)
    end = (end or datetime(2024, 5, 1, 23, 0, 0)).replace(minute=0, second=0, microsecond=0)
    start = end - timedelta(hours=n_points - 1)
    rows = []
    for i in range(n_points):
        ts = start + timedelta(hours=i)
        rows.append(
            {
                "date": ts.strftime("%Y-%m-%d %H:%M:%S"),
                "web_sales": rng.randint(200, 1_200),
                "offline_sales": rng.randint(100, 900),
            }
        )
    return rows


def api_payload_mock(endpoint: Endpoint) -> dict:
    builders = {
        Endpoint.SALES_OVERVIEW: sales_overview_mock,
        Endpoint.USER_METRICS: user_metrics_mock,
        Endpoint.SALES_COMPARISON: sales_comparison_mock,
        Endpoint.INVENTORY_STATUS: inventory_status_mock,
    }
    return envelope(builders[endpoint]())


def monthly_comparison_mock() -> pd.DataFrame:
    rng = random.Random(11)
    rows = []
    for i, month in enumerate(MONTHS, start=1):
        last = rng.randint(20_000, 60_000)
        rows.append({"id": i, "Month": month, "Last_year": last, "This_year": int(last * rng.uniform(0.85, 1.3))})
    return pd.DataFrame(rows)


def sales_data_mock(n_rows: int = 15) -> pd.DataFrame:
    rng = random.Random(13)
    fake = _faker(13)
    rows = []
    for i in range(1, n_rows + 1):
        rows.append(
            {
                "id": i,
                "date": fake.date_between(start_date=datetime(2024, 1, 1), end_date=datetime(2024, 6, 30)).isoformat(),
                "web_sales": rng.randint(1_000, 9_000),
                "offline_sales": rng.randint(500, 7_000),
            }
        )
    return pd.DataFrame(rows)


def product_data_mock() -> pd.DataFrame:
    rng = random.Random(17)
    rows = []
    for i, product in enumerate(PRODUCTS, start=1):
        sold = rng.randint(50, 1_500)
        price = round(rng.uniform(9.99, 249.99), 2)
        rows.append(
            {
                "id": i,
                "Product": product,
                "sold_amount": sold,
                "unit_price": price,
                "revenue": round(sold * price, 2),
                "rating": round(rng.uniform(3.0, 5.0), 1),
            }
        )
    return pd.DataFrame(rows)


def table_mock(table: Table) -> pd.DataFrame:
    builders = {
        Table.MONTHLY_COMPARISON: monthly_comparison_mock,
        Table.SALES_DATA: sales_data_mock,
        Table.PRODUCT_DATA: product_data_mock,
    }
    return builders[table]()


class MockApiClient(ApiClient):
    """Serves enveloped mock payloads through the regular parsing path."""

    def _send(self, endpoint: Endpoint, url: str) -> requests.Response:
        response = requests.Response()
        response.status_code = 200
        response.reason = "OK"
        response.url = url
        response.headers["Content-Type"] = "application/json"
        response._content = json.dumps(api_payload_mock(endpoint)).encode("utf-8")
        return response


class MockTableAccessor(TableAccessor):
    def _read(self, table: Table) -> pd.DataFrame:
        return table_mock(table)


def get_mock_api_client(cfg: AppConfig, notifier: NotificationLog) -> MockApiClient:
    return MockApiClient(cfg, notifier)


def get_mock_table_accessor(cfg: AppConfig) -> MockTableAccessor:
    return MockTableAccessor(cfg)
