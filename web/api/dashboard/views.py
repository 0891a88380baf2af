"""Dashboard API views - thin layer over services."""

from app.container import container
from web.api.errors import NotFoundError

from .schemas import AdminOverviewResponse, HrOverviewResponse, OrganizationOverview


def get_admin_overview(use_cache: bool = True) -> AdminOverviewResponse:
    """Get the cross-organizational overview."""
    data, cached = container.dashboard.admin_overview(use_cache=use_cache)

    organizations = [
        OrganizationOverview(
            id=o["id"],
            name=o["name"],
            status=o.get("status"),
            user_count=o.get("userCount"),
            courses=o["courses"],
            users=o["users"],
            skill_gaps=o["skill_gaps"],
        )
        for o in data["organizations"]
    ]

    return AdminOverviewResponse(
        total_organizations=data["total_organizations"],
        total_users=data["total_users"],
        total_courses=data["total_courses"],
        total_skills=data["total_skills"],
        average_completion_rate=data["average_completion_rate"],
        average_skill_progress=data["average_skill_progress"],
        top_trends=data["top_trends"],
        organizations=organizations,
        cached=cached,
    )


def get_hr_overview(org_id: str, use_cache: bool = True) -> HrOverviewResponse:
    """Get the HR dashboard for one organization."""
    data, cached = container.dashboard.hr_overview(org_id, use_cache=use_cache)
    if data is None:
        raise NotFoundError(f"Organization not found: {org_id}")

    return HrOverviewResponse(**data, cached=cached)
