from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so components/styles.py and the Plotly theme stay in sync.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F6F7FB",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    "bg_muted": "#F1F3F8",      # metric tiles inside cards
    # Accents
    "accent_primary": "#33C3F0",    # this year / web sales
    "accent_secondary": "#9B87F5",  # last year
    "accent_tertiary": "#82CA9D",   # offline sales
    "navy_900": "#0B1220",
    "navy_800": "#111C33",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.64)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}


@dataclass(frozen=True)
class AppConfig:
    # Remote metrics API (components 1, 3, 4, 5)
    api_base_url: str
    api_username: str
    api_password: str
    api_timeout_seconds: float

    # Hosted relational store (components 2, 4, 6) on Databricks SQL
    databricks_host: str
    databricks_http_path: str
    databricks_catalog: str
    databricks_schema: str

    # Optional PAT (not required for mock mode). If unset, the Databricks SDK OAuth path is used.
    databricks_token: Optional[str]

    # Set by the Databricks Apps runtime; enables the SDK OAuth path
    databricks_app_name: Optional[str]

    # Single demo account accepted by the sign-in page
    demo_username: str
    demo_password: str

    # Defaults
    default_use_mock: bool
    log_level: str

    @property
    def fq_schema(self) -> str:
        # Unity Catalog fully qualified schema name
        return f"`{self.databricks_catalog}`.`{self.databricks_schema}`"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getfloat(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Blank values count as unset
    """
    load_dotenv(override=False)

    api_username = _getenv("DASHBOARD_API_USERNAME", "trial") or "trial"
    api_password = _getenv("DASHBOARD_API_PASSWORD", "assignment123") or "assignment123"

    return AppConfig(
        api_base_url=(_getenv("DASHBOARD_API_BASE_URL", "http://3.111.196.92:8020") or "").rstrip("/"),
        api_username=api_username,
        api_password=api_password,
        api_timeout_seconds=_getfloat("DASHBOARD_API_TIMEOUT_SECONDS", 15.0),
        databricks_host=_getenv("DATABRICKS_HOST") or "",
        databricks_http_path=_getenv("DATABRICKS_HTTP_PATH") or "",
        databricks_catalog=_getenv("DATABRICKS_CATALOG", "main") or "",
        databricks_schema=_getenv("DATABRICKS_SCHEMA", "metrics_dashboard") or "",
        databricks_token=_getenv("DATABRICKS_TOKEN"),
        databricks_app_name=_getenv("DATABRICKS_APP_NAME"),
        demo_username=_getenv("DASHBOARD_DEMO_USERNAME", api_username) or api_username,
        demo_password=_getenv("DASHBOARD_DEMO_PASSWORD", api_password) or api_password,
        default_use_mock=(_getenv("USE_MOCK_DATA", "true") or "true").lower() == "true",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
