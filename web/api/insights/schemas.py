"""Insights API response schemas."""

from typing import Any

from pydantic import BaseModel


class CourseSummary(BaseModel):
    total_courses: int
    average_completion_rate: int
    total_enrollments: int
    total_active_users: int


class CourseInsightsResponse(BaseModel):
    """Course analytics."""

    active_vs_registered: list[dict[str, Any]]
    completion_trends: dict[str, Any]
    summary: CourseSummary


class SkillSummary(BaseModel):
    total_skills: int
    skill_levels: dict[str, int]
    average_confidence: float
    total_gaps: int


class SkillInsightsResponse(BaseModel):
    """Skill acquisition and gap analytics."""

    acquisition: dict[str, Any]
    gaps: list[dict[str, Any]]
    summary: SkillSummary


class UserSummary(BaseModel):
    total_users: int
    active_users: int
    average_engagement_score: int
    average_skill_count: int


class UserInsightsResponse(BaseModel):
    """User engagement analytics."""

    activity: list[dict[str, Any]]
    summary: UserSummary


class ExerciseSummary(BaseModel):
    total_exercises: int
    difficulty_distribution: dict[str, int]
    average_completion_rate: int
    total_participations: int


class ExerciseInsightsResponse(BaseModel):
    """Exercise performance analytics."""

    exercises: list[dict[str, Any]]
    summary: ExerciseSummary


class OrganizationSummary(BaseModel):
    total_organizations: int
    average_performance_score: int
    total_users: int
    total_courses: int
    growth_trends: dict[str, int]


class OrganizationInsightsResponse(BaseModel):
    """Cross-organization comparison."""

    organizations: list[dict[str, Any]]
    summary: OrganizationSummary


class PredictionSummary(BaseModel):
    total_predictions: int
    high_confidence_predictions: int
    skill_demand_forecast: int
    organizational_projections: int


class PredictiveInsightsResponse(BaseModel):
    """Predictions and forecasts."""

    predictions: dict[str, Any]
    summary: PredictionSummary


class DashboardInsightsResponse(BaseModel):
    """All report families together."""

    courses: list[dict[str, Any]]
    skills: dict[str, Any]
    users: list[dict[str, Any]]
    exercises: list[dict[str, Any]]
    organizations: list[dict[str, Any]]
    predictions: dict[str, Any]
    generated_at: str
