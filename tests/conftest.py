from __future__ import annotations

import json
from typing import Any, List, Optional

import pandas as pd
import pytest
import requests

from config import AppConfig
from data.notifications import NotificationLog


def make_config(**overrides: Any) -> AppConfig:
    values = dict(
        api_base_url="http://api.test",
        api_username="trial",
        api_password="assignment123",
        api_timeout_seconds=15.0,
        databricks_host="https://dbc.test",
        databricks_http_path="/sql/1.0/warehouses/abc",
        databricks_catalog="main",
        databricks_schema="metrics_dashboard",
        databricks_token="token",
        databricks_app_name=None,
        demo_username="trial",
        demo_password="assignment123",
        default_use_mock=True,
        log_level="INFO",
    )
    values.update(overrides)
    return AppConfig(**values)


def make_response(
    status_code: int = 200,
    body: Any = None,
    raw: Optional[bytes] = None,
    reason: str = "OK",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response._content_consumed = True
    return response


class StubSession:
    """Stands in for requests.Session: returns a canned response or raises."""

    def __init__(self, response: Optional[requests.Response] = None, exc: Optional[BaseException] = None):
        self.response = response
        self.exc = exc
        self.calls: List[dict] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


class StubSqlClient:
    def __init__(self, df: Optional[pd.DataFrame] = None, exc: Optional[BaseException] = None):
        self.df = df
        self.exc = exc
        self.queries: List[str] = []

    def query(self, query: str, params: Any = None) -> pd.DataFrame:
        self.queries.append(query)
        if self.exc is not None:
            raise self.exc
        return self.df


@pytest.fixture()
def cfg() -> AppConfig:
    return make_config()


@pytest.fixture()
def notifier() -> NotificationLog:
    return NotificationLog()
