from __future__ import annotations

from typing import Optional

LOGIN = "login"
DASHBOARD = "dashboard"
ROUTES = (LOGIN, DASHBOARD)


def resolve_route(requested: Optional[str], authenticated: bool) -> str:
    """
    Map a requested page to the page actually shown.

    Unknown or missing pages go to the dashboard, the dashboard sends
    anonymous users to sign-in, and signed-in users never see sign-in.
    """
    page = (requested or "").strip().strip("/").lower()
    if page not in ROUTES:
        page = DASHBOARD
    if page == DASHBOARD and not authenticated:
        return LOGIN
    if page == LOGIN and authenticated:
        return DASHBOARD
    return page
