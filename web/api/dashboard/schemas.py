"""Dashboard API response schemas."""

from typing import Any

from pydantic import BaseModel


class OrganizationOverview(BaseModel):
    """Organization with its scoped collections."""

    id: str
    name: str
    status: str | None = None
    user_count: int | None = None
    courses: list[dict[str, Any]]
    users: list[dict[str, Any]]
    skill_gaps: list[dict[str, Any]]


class AdminOverviewResponse(BaseModel):
    """Cross-organizational dashboard response."""

    total_organizations: int
    total_users: int
    total_courses: int
    total_skills: int
    average_completion_rate: int
    average_skill_progress: int
    top_trends: list[dict[str, Any]]
    organizations: list[OrganizationOverview]
    cached: bool


class HrOverviewResponse(BaseModel):
    """Organization-scoped HR dashboard response."""

    organization: dict[str, Any]
    users: list[dict[str, Any]]
    courses: list[dict[str, Any]]
    skills_acquired: list[dict[str, Any]]
    performance_trends: list[dict[str, Any]]
    skill_gaps: list[dict[str, Any]]
    cached: bool
