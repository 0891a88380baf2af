"""Dashboard service."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from app.repositories.common.cache import CacheTableManager
from app.repositories.datasets import DatasetRepository
from app.services.insights.service import DataInsightsService
from app.services.processing.devlab import DIFFICULTY_LEVELS, exercise_completion_rate
from app.services.processing.learner_ai import SKILL_LEVELS
from app.services.processing.pipeline import DataProcessor
from helpers import formulas

ADMIN_TABLE = "admin_dashboard_cache"
HR_TABLE = "hr_dashboard_cache"
ACTIVE_WITHIN_DAYS = 7
TOP_TRENDS = 5


def _level_counts(records, field: str, levels) -> dict[str, int]:
    return {level: sum(1 for r in records if r.get(field) == level) for level in levels}


class DashboardService:
    """Dashboard business logic."""

    def __init__(
        self,
        datasets: DatasetRepository,
        processor: DataProcessor,
        cache: CacheTableManager,
        insights: DataInsightsService,
    ):
        self._datasets = datasets
        self._processor = processor
        self._cache = cache
        self._insights = insights

    def process(
        self,
        data_type: str,
        filters: Mapping[str, Any] | None = None,
        sort_by: str = "",
        order: str = "asc",
    ) -> dict | None:
        """Filter/sort one collection. None if the type has no collection."""
        records = self._datasets.get_collection(data_type)
        if records is None:
            return None

        data = self._processor.process_data(data_type, records, filters, sort_by, order)
        return {"data": data, "stats": self._processor.get_data_stats(data_type, data)}

    # Aggregated dashboards

    def admin_overview(self, use_cache: bool = True) -> tuple[dict, bool]:
        """Cross-organizational overview. Returns (data, served_from_cache)."""
        if use_cache:
            cached = self._cache.get_data(ADMIN_TABLE, "admin_dashboard")
            if cached is not None:
                logger.debug("Admin overview served from cache")
                return cached, True

        ds = self._datasets
        users = self._processor.process_data("users", ds.get_users(), {"status": "active"})
        courses = self._processor.process_data("courses", ds.get_courses(), {"status": "active"})
        skills = self._processor.process_data("skills", ds.get_skills(), {}, "acquiredAt", "desc")
        trends = self._processor.process_data("performanceTrends", ds.get_performance_trends(), {}, "value", "desc")
        organizations = ds.get_organizations()
        skill_gaps = ds.get_skill_gaps()

        data = {
            "total_organizations": len(organizations),
            "total_users": len(users),
            "total_courses": len(courses),
            "total_skills": len(skills),
            "average_completion_rate": formulas.round_half_up(
                formulas.mean(c.get("completionRate") or 0 for c in courses)
            ),
            "average_skill_progress": formulas.round_half_up(
                formulas.mean(s.get("confidenceScore") or 0 for s in skills) * 100
            ),
            "top_trends": trends[:TOP_TRENDS],
            "organizations": [
                {
                    **org,
                    "courses": [c for c in courses if c.get("organizationId") == org.get("id")],
                    "users": [u for u in users if u.get("organizationId") == org.get("id")],
                    "skill_gaps": [g for g in skill_gaps if g.get("organizationId") == org.get("id")],
                }
                for org in organizations
            ],
        }

        self._cache.store_data(ADMIN_TABLE, "admin_dashboard", data)
        return data, False

    def hr_overview(self, org_id: str, use_cache: bool = True) -> tuple[dict | None, bool]:
        """One organization's HR view. (None, False) for an unknown organization."""
        if use_cache:
            cached = self._cache.get_data(HR_TABLE, "hr_dashboard", {"organizationId": org_id})
            if cached is not None:
                return cached, True

        data = self._datasets.get_organization_data(org_id)
        if data is None:
            logger.warning("Organization not found: {}", org_id)
            return None, False

        self._cache.store_data(HR_TABLE, "hr_dashboard", data, {"organizationId": org_id})
        return data, False

    # Insights families

    def course_insights(self) -> dict:
        courses = self._datasets.get_courses()
        return {
            "active_vs_registered": self._insights.generate_active_vs_registered_insights(courses),
            "completion_trends": self._insights.generate_completion_trends(courses),
            "summary": {
                "total_courses": len(courses),
                "average_completion_rate": formulas.round_half_up(
                    formulas.mean(c.get("completionRate") or 0 for c in courses)
                ),
                "total_enrollments": sum(c.get("enrollmentCount") or 0 for c in courses),
                "total_active_users": sum(c.get("activeUsers") or 0 for c in courses),
            },
        }

    def skill_insights(self) -> dict:
        skills = self._datasets.get_skills()
        gaps = self._datasets.get_skill_gaps()
        return {
            "acquisition": self._insights.generate_skill_acquisition_insights(skills),
            "gaps": self._insights.generate_skill_gap_insights(gaps),
            "summary": {
                "total_skills": len(skills),
                "skill_levels": _level_counts(skills, "skillLevel", SKILL_LEVELS),
                "average_confidence": formulas.average_field(skills, "confidenceScore"),
                "total_gaps": len(gaps),
            },
        }

    def user_insights(self) -> dict:
        users = self._datasets.get_users()
        activity = self._insights.generate_user_activity_insights(users)
        return {
            "activity": activity,
            "summary": {
                "total_users": len(users),
                "active_users": sum(
                    1
                    for a in activity
                    if a["days_since_last_login"] is not None and a["days_since_last_login"] <= ACTIVE_WITHIN_DAYS
                ),
                "average_engagement_score": formulas.round_half_up(
                    formulas.mean(a["engagement_score"] for a in activity)
                ),
                "average_skill_count": formulas.round_half_up(formulas.mean(a["skill_count"] for a in activity)),
            },
        }

    def exercise_insights(self) -> dict:
        exercises = self._datasets.get_exercises()
        return {
            "exercises": self._insights.generate_exercise_insights(exercises, self._datasets.get_participations()),
            "summary": {
                "total_exercises": len(exercises),
                "difficulty_distribution": _level_counts(exercises, "difficulty", DIFFICULTY_LEVELS),
                "average_completion_rate": formulas.round_half_up(
                    formulas.mean(exercise_completion_rate(e) for e in exercises)
                ),
                "total_participations": sum(e.get("participationCount") or 0 for e in exercises),
            },
        }

    def organization_insights(self) -> dict:
        ds = self._datasets
        users = ds.get_users()
        courses = ds.get_courses()
        orgs = self._insights.generate_cross_org_insights(
            ds.get_organizations(), courses, users, ds.get_performance_trends()
        )
        return {
            "organizations": orgs,
            "summary": {
                "total_organizations": len(orgs),
                "average_performance_score": formulas.round_half_up(
                    formulas.mean(o["performance_score"] for o in orgs)
                ),
                "total_users": len(users),
                "total_courses": len(courses),
                "growth_trends": {
                    "growing": sum(1 for o in orgs if o["growth_trend"] == "Growing"),
                    "stable": sum(1 for o in orgs if o["growth_trend"] == "Stable"),
                    "declining": sum(1 for o in orgs if o["growth_trend"] == "Declining"),
                },
            },
        }

    def predictive_insights(self) -> dict:
        ds = self._datasets
        predictions = self._insights.generate_predictive_insights(
            ds.get_courses(), ds.get_skills(), ds.get_performance_trends()
        )
        courses = predictions["course_success_predictions"]
        return {
            "predictions": predictions,
            "summary": {
                "total_predictions": len(courses),
                "high_confidence_predictions": sum(1 for p in courses if p["confidence_level"] == "High"),
                "skill_demand_forecast": len(predictions["skill_demand_forecast"]),
                "organizational_projections": len(predictions["organizational_growth_projections"]),
            },
        }

    def insights_dashboard(self) -> dict:
        """Every report family in one payload."""
        ds = self._datasets
        courses = ds.get_courses()
        users = ds.get_users()
        skills = ds.get_skills()
        trends = ds.get_performance_trends()
        return {
            "courses": self._insights.generate_active_vs_registered_insights(courses),
            "skills": self._insights.generate_skill_acquisition_insights(skills),
            "users": self._insights.generate_user_activity_insights(users),
            "exercises": self._insights.generate_exercise_insights(ds.get_exercises(), ds.get_participations()),
            "organizations": self._insights.generate_cross_org_insights(
                ds.get_organizations(), courses, users, trends
            ),
            "predictions": self._insights.generate_predictive_insights(courses, skills, trends),
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }
