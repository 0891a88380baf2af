"""Dashboard API."""

from web.api.dashboard.views import get_admin_overview, get_hr_overview

__all__ = [
    "get_admin_overview",
    "get_hr_overview",
]
