"""Insights API views - thin layer over services."""

from app.container import container

from .schemas import (
    CourseInsightsResponse,
    DashboardInsightsResponse,
    ExerciseInsightsResponse,
    OrganizationInsightsResponse,
    PredictiveInsightsResponse,
    SkillInsightsResponse,
    UserInsightsResponse,
)


def get_course_insights() -> CourseInsightsResponse:
    """Get active vs registered users and completion trends per course."""
    return CourseInsightsResponse(**container.dashboard.course_insights())


def get_skill_insights() -> SkillInsightsResponse:
    """Get skill acquisition timeline and skill gaps."""
    return SkillInsightsResponse(**container.dashboard.skill_insights())


def get_user_insights() -> UserInsightsResponse:
    return UserInsightsResponse(**container.dashboard.user_insights())


def get_exercise_insights() -> ExerciseInsightsResponse:
    return ExerciseInsightsResponse(**container.dashboard.exercise_insights())


def get_organization_insights() -> OrganizationInsightsResponse:
    return OrganizationInsightsResponse(**container.dashboard.organization_insights())


def get_predictive_insights() -> PredictiveInsightsResponse:
    return PredictiveInsightsResponse(**container.dashboard.predictive_insights())


def get_dashboard_insights() -> DashboardInsightsResponse:
    """Get every report family in one response."""
    return DashboardInsightsResponse(**container.dashboard.insights_dashboard())
