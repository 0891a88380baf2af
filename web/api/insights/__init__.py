"""Insights API."""

from web.api.insights.views import (
    get_course_insights,
    get_dashboard_insights,
    get_exercise_insights,
    get_organization_insights,
    get_predictive_insights,
    get_skill_insights,
    get_user_insights,
)

__all__ = [
    "get_course_insights",
    "get_skill_insights",
    "get_user_insights",
    "get_exercise_insights",
    "get_organization_insights",
    "get_predictive_insights",
    "get_dashboard_insights",
]
