"""Services package - service class exports."""

from app.services.dashboard.service import DashboardService
from app.services.insights.service import DataInsightsService
from app.services.processing.pipeline import DataProcessor

__all__ = [
    "DashboardService",
    "DataInsightsService",
    "DataProcessor",
]
