"""
Metrics API Client
==================
Authenticated GET access to the four metric endpoints behind the remote
dashboard API. Every endpoint answers with a uniform envelope

    {"status": "success", "message": "...", "data": {...} | [...]}

which is unwrapped here so adapters only ever see the payload.
"""
from __future__ import annotations

import base64
import logging
import time
from enum import Enum
from typing import Any, Dict, Optional

import requests
from urllib3.exceptions import ReadTimeoutError

from config import AppConfig
from data.errors import (
    ApiTimeoutError,
    DashboardDataError,
    InvalidResponseFormatError,
    RequestFailedError,
)
from data.notifications import NotificationLog
from logging_utils import log_event

logger = logging.getLogger(__name__)

# Small reads keep the deadline check close to real time on slow bodies.
_BODY_CHUNK_BYTES = 1


class Endpoint(Enum):
    SALES_OVERVIEW = "/api/v1/sample_assignment_api_1/"
    USER_METRICS = "/api/v1/sample_assignment_api_3/"
    SALES_COMPARISON = "/api/v1/sample_assignment_api_4/"
    INVENTORY_STATUS = "/api/v1/sample_assignment_api_5/"

    @property
    def path(self) -> str:
        return self.value


def _is_read_timeout(exc: requests.ConnectionError) -> bool:
    cause = exc.args[0] if exc.args else None
    return isinstance(cause, ReadTimeoutError) or isinstance(exc.__context__, ReadTimeoutError)


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def unwrap_envelope(body: Any) -> Any:
    """
    Return ``data`` from a success envelope, or the body itself when it is
    some other JSON object. Anything else is not a payload we can render.
    """
    if isinstance(body, dict):
        if body.get("status") == "success" and body.get("data") is not None:
            return body["data"]
        return body
    raise InvalidResponseFormatError()


class ApiClient:
    """
    Metrics API client.

    One instance per widget fetch: it owns its ``requests.Session`` and
    reports failures to the widget's notification log before re-raising.
    No retries; the timeout is the only bound.
    """

    def __init__(
        self,
        cfg: AppConfig,
        notifier: NotificationLog,
        session: Optional[requests.Session] = None,
    ):
        self.cfg = cfg
        self.notifier = notifier
        self._session = session or requests.Session()
        self._base_url = cfg.api_base_url.rstrip("/")
        self._headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": basic_auth_header(cfg.api_username, cfg.api_password),
        }

    def url_for(self, endpoint: Endpoint) -> str:
        return f"{self._base_url}{endpoint.path}"

    def get(self, endpoint: Endpoint) -> Any:
        """Fetch ``endpoint`` and return the unwrapped payload."""
        url = self.url_for(endpoint)
        log_event(logger, logging.INFO, "api_request_started", endpoint=endpoint.name, url=url)
        try:
            response = self._send(endpoint, url)
            payload = self._parse(response)
        except DashboardDataError as exc:
            self._report_failure(endpoint, exc)
            raise
        log_event(
            logger,
            logging.INFO,
            "api_request_succeeded",
            endpoint=endpoint.name,
            payload_type=type(payload).__name__,
        )
        return payload

    def close(self) -> None:
        self._session.close()

    def _send(self, endpoint: Endpoint, url: str) -> requests.Response:
        """
        GET ``url`` with one wall-clock bound covering connect, headers and
        body. ``timeout=`` alone only limits each socket operation, so the
        body is streamed and checked against the deadline chunk by chunk.
        """
        timeout = self.cfg.api_timeout_seconds
        deadline = time.monotonic() + timeout
        try:
            response = self._session.get(url, headers=self._headers, timeout=timeout, stream=True)
            try:
                body = bytearray()
                for chunk in response.iter_content(chunk_size=_BODY_CHUNK_BYTES):
                    body.extend(chunk)
                    if time.monotonic() > deadline:
                        raise ApiTimeoutError(endpoint.path, timeout)
                if time.monotonic() > deadline:
                    raise ApiTimeoutError(endpoint.path, timeout)
                response._content = bytes(body)
            finally:
                response.close()
        except requests.Timeout as exc:
            raise ApiTimeoutError(endpoint.path, timeout) from exc
        except requests.ConnectionError as exc:
            # a read timeout while streaming the body surfaces as ConnectionError
            if _is_read_timeout(exc):
                raise ApiTimeoutError(endpoint.path, timeout) from exc
            raise RequestFailedError(None, str(exc) or type(exc).__name__) from exc
        except requests.RequestException as exc:
            raise RequestFailedError(None, str(exc) or type(exc).__name__) from exc
        return response

    @staticmethod
    def _parse(response: requests.Response) -> Any:
        if not 200 <= response.status_code < 300:
            raise RequestFailedError(response.status_code, response.reason or "")
        try:
            body = response.json()
        except ValueError as exc:
            raise InvalidResponseFormatError() from exc
        return unwrap_envelope(body)

    def _report_failure(self, endpoint: Endpoint, exc: DashboardDataError) -> None:
        log_event(
            logger,
            logging.ERROR,
            "api_request_failed",
            endpoint=endpoint.name,
            kind=exc.kind.value,
            error=str(exc),
        )
        if isinstance(exc, ApiTimeoutError):
            self.notifier.error("Request timed out.")
        else:
            self.notifier.error(f"Failed to fetch from server: {exc}")


def get_api_client(cfg: AppConfig, notifier: NotificationLog) -> ApiClient:
    """Factory function to get an API client instance."""
    return ApiClient(cfg, notifier)
