"""Directory users - filter and sort strategy."""

from app.services.processing.base import (
    DateFilter,
    EntityProcessor,
    FilterModel,
    Record,
    contains,
    exact,
    on_or_after,
)
from helpers import formulas
from helpers.parsing import parse_date, parse_experience


def _profile(user: Record) -> dict:
    return user.get("profile") or {}


class UserFilters(FilterModel):
    organization_id: str | None = None
    team_id: str | None = None
    role: str | None = None
    department: str | None = None
    status: str | None = None
    skills: list[str] | None = None
    min_experience: float | None = None
    last_login_after: DateFilter = None
    search: str | None = None


class UserProcessor(EntityProcessor):
    data_type = "users"
    filters_model = UserFilters
    sort_fields = {
        "firstName": lambda u: u.get("firstName"),
        "lastName": lambda u: u.get("lastName"),
        "email": lambda u: u.get("email"),
        "role": lambda u: u.get("role"),
        "department": lambda u: u.get("department"),
        "lastLogin": lambda u: parse_date(u.get("lastLogin")),
        "experience": lambda u: parse_experience(_profile(u).get("experience")),
        "skillCount": lambda u: len(_profile(u).get("skills") or []),
    }

    def matches(self, user: Record, f: UserFilters) -> bool:
        if not (
            exact(user.get("organizationId"), f.organization_id)
            and exact(user.get("teamId"), f.team_id)
            and exact(user.get("role"), f.role)
            and exact(user.get("department"), f.department)
            and exact(user.get("status"), f.status)
            and on_or_after(user.get("lastLogin"), f.last_login_after)
        ):
            return False

        profile = _profile(user)
        if f.skills and not set(f.skills) & set(profile.get("skills") or []):
            return False
        if f.min_experience is not None and parse_experience(profile.get("experience")) < f.min_experience:
            return False

        if f.search is not None:
            full_name = f"{user.get('firstName') or ''} {user.get('lastName') or ''}"
            if not (contains(full_name, f.search) or contains(user.get("email"), f.search)):
                return False
        return True

    def stats(self, users: list[Record]) -> dict:
        return {
            "by_role": formulas.count_by(users, "role"),
            "by_department": formulas.count_by(users, "department"),
            "by_status": formulas.count_by(users, "status"),
        }
