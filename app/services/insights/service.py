"""Insights service - secondary analytics derived from filtered collections."""

from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from loguru import logger

from app.services.processing.base import Record
from app.services.processing.devlab import exercise_completion_rate
from helpers import formulas
from helpers.parsing import days_since, parse_date, parse_experience

# Flat projections used by the forecasts
SKILL_DEMAND_GROWTH = 1.2
SKILL_DEMAND_GROWTH_RATE = 20
ORG_PROJECTED_GROWTH = 15


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _skills(user: Record) -> list[str]:
    return (user.get("profile") or {}).get("skills") or []


class DataInsightsService:
    """Stateless report builders. Inputs are never mutated; outputs are plain JSON-ready data."""

    def __init__(self, now: Callable[[], datetime] = _utcnow):
        self._now = now
        logger.debug("DataInsightsService initialized")

    # Course analytics

    def generate_active_vs_registered_insights(self, courses: Sequence[Record]) -> list[dict]:
        """Active vs registered users per course."""
        result = []
        for c in courses:
            registered = c.get("enrollmentCount") or 0
            active = c.get("activeUsers") or 0
            result.append(
                {
                    "course_id": c.get("id"),
                    "course_title": c.get("title"),
                    "organization_id": c.get("organizationId"),
                    "registered_users": registered,
                    "active_users": active,
                    "inactive_users": registered - active,
                    "activity_rate": formulas.round_half_up(formulas.safe_ratio(active, registered) * 100),
                    "engagement_level": formulas.engagement_level(active, registered),
                }
            )
        return result

    def generate_completion_trends(self, courses: Sequence[Record]) -> dict:
        """Completion figures per course with a summary."""
        trends = []
        for c in courses:
            rate = c.get("completionRate") or 0
            enrollment = c.get("enrollmentCount") or 0
            completed = formulas.completions(rate, enrollment)
            trends.append(
                {
                    "course_id": c.get("id"),
                    "course_title": c.get("title"),
                    "completion_rate": rate,
                    "enrollment_count": enrollment,
                    "completion_count": completed,
                    "non_completion_count": enrollment - completed,
                    "performance_category": formulas.performance_category(rate),
                }
            )

        return {
            "courses": trends,
            "summary": {
                "average_completion_rate": formulas.round_half_up(formulas.mean(t["completion_rate"] for t in trends)),
                "high_performers": sum(1 for t in trends if t["completion_rate"] >= 80),
                "low_performers": sum(1 for t in trends if t["completion_rate"] < 60),
                "total_enrollments": sum(t["enrollment_count"] for t in trends),
                "total_completions": sum(t["completion_count"] for t in trends),
            },
        }

    # Skill development

    def generate_skill_acquisition_insights(self, skills: Sequence[Record]) -> dict:
        """Acquisition timeline with monthly, quarterly and yearly breakdowns."""
        timeline = []
        for s in skills:
            acquired = parse_date(s.get("acquiredAt"))
            timeline.append(
                {
                    "skill_id": s.get("id"),
                    "skill_name": s.get("skillName"),
                    "skill_level": s.get("skillLevel"),
                    "user_id": s.get("userId"),
                    "acquired_at": s.get("acquiredAt"),
                    "confidence_score": s.get("confidenceScore"),
                    "month": formulas.month_label(acquired),
                    "quarter": formulas.quarter_label(acquired),
                    "year": acquired.year if acquired else None,
                }
            )

        def breakdown(period: str, with_levels: bool = False) -> list[dict]:
            rows = []
            for key, members in formulas.group_by(timeline, period).items():
                row = {
                    "period": key,
                    "skills_acquired": len(members),
                    "average_confidence": formulas.round_to(
                        formulas.mean(m["confidence_score"] or 0 for m in members)
                    ),
                }
                if with_levels:
                    row["skill_levels"] = formulas.count_by(members, "skill_level")
                rows.append(row)
            return rows

        return {
            "timeline": timeline,
            "monthly_breakdown": breakdown("month", with_levels=True),
            "quarterly_breakdown": breakdown("quarter"),
            "yearly_breakdown": breakdown("year"),
        }

    def generate_skill_gap_insights(self, skill_gaps: Sequence[Record]) -> list[dict]:
        """Impact, urgency and training effort per skill gap."""
        return [
            {
                "organization_id": g.get("organizationId"),
                "skill_name": g.get("skillName"),
                "gap_percentage": g.get("gapPercentage") or 0,
                "affected_users": g.get("affectedUsers") or 0,
                "priority": g.get("priority"),
                "recommended_courses": list(g.get("recommendedCourses") or []),
                "impact_level": formulas.impact_level(g.get("gapPercentage") or 0),
                "urgency_score": formulas.urgency_score(g.get("gapPercentage") or 0, g.get("affectedUsers") or 0),
                "estimated_training_hours": formulas.training_hours(g.get("skillName"), g.get("affectedUsers") or 0),
            }
            for g in skill_gaps
        ]

    # User engagement

    def generate_user_activity_insights(self, users: Sequence[Record]) -> list[dict]:
        """Activity level and engagement score per user."""
        now = self._now()
        result = []
        for u in users:
            skills = _skills(u)
            experience = parse_experience((u.get("profile") or {}).get("experience"))
            days = days_since(u.get("lastLogin"), now)
            result.append(
                {
                    "user_id": u.get("id"),
                    "user_name": f"{u.get('firstName') or ''} {u.get('lastName') or ''}".strip(),
                    "organization_id": u.get("organizationId"),
                    "role": u.get("role"),
                    "department": u.get("department"),
                    "last_login": u.get("lastLogin"),
                    "days_since_last_login": days,
                    "activity_level": formulas.activity_level(days),
                    "skill_count": len(skills),
                    "experience_years": experience,
                    "engagement_score": formulas.engagement_score(len(skills), experience, days),
                    "learning_velocity": formulas.learning_velocity(len(skills)),
                }
            )
        return result

    def days_since_last_login(self, user: Record) -> int | None:
        return days_since(user.get("lastLogin"), self._now())

    # Organizational comparison

    def generate_cross_org_insights(
        self,
        organizations: Sequence[Record],
        courses: Sequence[Record],
        users: Sequence[Record],
        trends: Sequence[Record],
    ) -> list[dict]:
        """Side-by-side performance figures per organization."""
        courses_by_org = formulas.group_by(courses, "organizationId")
        users_by_org = formulas.group_by(users, "organizationId")
        trends_by_org = formulas.group_by(trends, "organizationId")

        result = []
        for org in organizations:
            org_id = formulas.group_key(org.get("id"))
            org_courses = courses_by_org.get(org_id, [])
            org_users = users_by_org.get(org_id, [])
            org_trends = trends_by_org.get(org_id, [])

            avg_completion = formulas.mean(c.get("completionRate") or 0 for c in org_courses)
            avg_skills = formulas.mean(len(_skills(u)) for u in org_users)
            avg_trend = formulas.mean(t.get("value") or 0 for t in org_trends)
            total_completions = sum(
                formulas.completions(c.get("completionRate") or 0, c.get("enrollmentCount") or 0) for c in org_courses
            )

            result.append(
                {
                    "organization_id": org.get("id"),
                    "organization_name": org.get("name"),
                    "user_count": len(org_users),
                    "course_count": len(org_courses),
                    "average_completion_rate": formulas.round_half_up(avg_completion),
                    "total_enrollments": sum(c.get("enrollmentCount") or 0 for c in org_courses),
                    "active_users": sum(c.get("activeUsers") or 0 for c in org_courses),
                    "performance_score": formulas.org_performance_score(avg_completion, avg_skills, avg_trend),
                    "growth_trend": formulas.growth_trend([t.get("trend") for t in org_trends]),
                    "skill_diversity": len({s for u in org_users for s in _skills(u)}),
                    "learning_efficiency": formulas.learning_efficiency(total_completions, len(org_users)),
                }
            )
        return result

    # Exercise performance

    def generate_exercise_insights(self, exercises: Sequence[Record], participations: Sequence[Record]) -> list[dict]:
        """Exercise efficiency, ranked by participation (most popular first)."""
        recorded = formulas.count_by(participations, "exerciseId")

        rows = []
        for e in exercises:
            rate = exercise_completion_rate(e)
            average_time = e.get("averageTime") or 0
            rows.append(
                {
                    "exercise_id": e.get("id"),
                    "exercise_title": e.get("title"),
                    "difficulty": e.get("difficulty"),
                    "language": e.get("language"),
                    "organization_id": e.get("organizationId"),
                    "participation_count": e.get("participationCount") or 0,
                    "completion_count": e.get("completionCount") or 0,
                    "recorded_participations": recorded.get(formulas.group_key(e.get("id")), 0),
                    "completion_rate": formulas.round_half_up(rate),
                    "average_time": average_time,
                    "difficulty_score": formulas.difficulty_score(e.get("difficulty")),
                    "efficiency_score": formulas.efficiency_score(average_time, rate),
                    "performance_category": formulas.exercise_performance_category(rate, average_time),
                }
            )

        rows.sort(key=lambda r: r["participation_count"], reverse=True)
        for rank, row in enumerate(rows, start=1):
            row["popularity_rank"] = rank
        return rows

    # Predictions

    def generate_predictive_insights(
        self,
        courses: Sequence[Record],
        skills: Sequence[Record],
        trends: Sequence[Record],
    ) -> dict:
        """Course success predictions, skill demand and organizational projections."""
        predictions = []
        for c in courses:
            rate = c.get("completionRate") or 0
            enrollment = c.get("enrollmentCount") or 0
            active = c.get("activeUsers") or 0
            predictions.append(
                {
                    "course_id": c.get("id"),
                    "course_title": c.get("title"),
                    "current_completion_rate": rate,
                    "predicted_completion_rate": formulas.predicted_completion_rate(rate, enrollment, active),
                    "confidence_level": formulas.prediction_confidence(enrollment),
                    "risk_factors": formulas.risk_factors(rate, enrollment, active),
                    "recommendations": formulas.course_recommendations(rate, enrollment, active),
                }
            )

        return {
            "course_success_predictions": predictions,
            "skill_demand_forecast": self.generate_skill_demand_forecast(skills),
            "organizational_growth_projections": self.generate_org_growth_projections(trends),
        }

    def generate_skill_demand_forecast(self, skills: Sequence[Record]) -> list[dict]:
        return [
            {
                "skill_name": name,
                "current_demand": count,
                "predicted_demand": formulas.round_half_up(count * SKILL_DEMAND_GROWTH),
                "growth_rate": SKILL_DEMAND_GROWTH_RATE,
                "trend": "increasing",
            }
            for name, count in formulas.count_by(skills, "skillName").items()
        ]

    def generate_org_growth_projections(self, trends: Sequence[Record]) -> list[dict]:
        return [
            {
                "organization_id": org_id,
                "current_performance": formulas.round_to(formulas.mean(t.get("value") or 0 for t in members)),
                "projected_growth": ORG_PROJECTED_GROWTH,
                "confidence_level": "Medium",
            }
            for org_id, members in formulas.group_by(trends, "organizationId").items()
        ]
