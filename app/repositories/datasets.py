"""Dataset repository - read access to the microservice collections."""

import copy
from typing import Any

from loguru import logger

from app.repositories.mock_data import MOCK_DATA

Record = dict[str, Any]


class DatasetRepository:
    """Holds a private copy of every collection; getters return the stored lists."""

    def __init__(self, data: dict | None = None):
        self._data = copy.deepcopy(MOCK_DATA if data is None else data)
        logger.debug("DatasetRepository initialized ({} sources)", len(self._data))

    def _collection(self, source: str, name: str) -> list[Record]:
        return self._data.get(source, {}).get(name, [])

    # Directory

    def get_users(self) -> list[Record]:
        return self._collection("directory", "users")

    def get_organizations(self) -> list[Record]:
        return self._collection("directory", "organizations")

    def get_teams(self) -> list[Record]:
        return self._collection("directory", "teams")

    # Course builder

    def get_courses(self) -> list[Record]:
        return self._collection("course_builder", "courses")

    def get_enrollments(self) -> list[Record]:
        return self._collection("course_builder", "enrollments")

    # Assessment

    def get_tests(self) -> list[Record]:
        return self._collection("assessment", "tests")

    def get_attempts(self) -> list[Record]:
        return self._collection("assessment", "attempts")

    def get_feedback(self) -> list[Record]:
        return self._collection("assessment", "feedback")

    # Learner AI

    def get_skills(self) -> list[Record]:
        return self._collection("learner_ai", "skills_acquired")

    def get_skill_progress(self) -> list[Record]:
        return self._collection("learner_ai", "skill_progress")

    # Devlab

    def get_exercises(self) -> list[Record]:
        return self._collection("devlab", "exercises")

    def get_participations(self) -> list[Record]:
        return self._collection("devlab", "participations")

    # Learning analytics

    def get_performance_trends(self) -> list[Record]:
        return self._collection("learning_analytics", "performance_trends")

    def get_skill_gaps(self) -> list[Record]:
        return self._collection("learning_analytics", "skill_gaps")

    def get_course_effectiveness(self) -> list[Record]:
        return self._collection("learning_analytics", "course_effectiveness")

    def get_strategic_forecasts(self) -> list[Record]:
        return self._collection("learning_analytics", "strategic_forecasts")

    # Processable collections

    def collections(self) -> dict[str, list[Record]]:
        """{data type: records} for every type the processor understands."""
        return {
            "users": self.get_users(),
            "courses": self.get_courses(),
            "tests": self.get_tests(),
            "skills": self.get_skills(),
            "exercises": self.get_exercises(),
            "performanceTrends": self.get_performance_trends(),
        }

    def get_collection(self, data_type: str) -> list[Record] | None:
        return self.collections().get(data_type)

    def get_organization(self, org_id: str) -> Record | None:
        return next((o for o in self.get_organizations() if o.get("id") == org_id), None)

    def get_organization_data(self, org_id: str) -> dict | None:
        """Everything scoped to one organization, or None if it does not exist."""
        org = self.get_organization(org_id)
        if org is None:
            return None

        org_users = {u.get("id") for u in self.get_users() if u.get("organizationId") == org_id}
        return {
            "organization": org,
            "users": [u for u in self.get_users() if u.get("organizationId") == org_id],
            "courses": [c for c in self.get_courses() if c.get("organizationId") == org_id],
            "skills_acquired": [s for s in self.get_skills() if s.get("userId") in org_users],
            "performance_trends": [t for t in self.get_performance_trends() if t.get("organizationId") == org_id],
            "skill_gaps": [g for g in self.get_skill_gaps() if g.get("organizationId") == org_id],
        }
