"""Insights package - secondary analytics reports."""

from app.services.insights.service import DataInsightsService

__all__ = ["DataInsightsService"]
