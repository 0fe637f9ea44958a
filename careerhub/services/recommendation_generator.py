from __future__ import annotations

import asyncio
import logging
import random
from typing import Any

from careerhub.db.gateway import DataAccessError, TableGateway, eq


logger = logging.getLogger(__name__)

COURSE_CATALOG_LIMIT = 20
COURSE_PICKS = 3
CAREER_PATH_PICKS = 2

# Half-open bands: randrange(low, high).
COURSE_CONFIDENCE_BAND = (75, 95)
CAREER_PATH_CONFIDENCE_BAND = (70, 85)

CAREER_PATH_REASON = "This career path matches your skill profile and can help you achieve your career goals."


def course_reason(difficulty_level: str | None) -> str:
    return (
        "Based on your current learning path and skill level, "
        f"this {difficulty_level} course aligns with your goals."
    )


class RecommendationGenerator:
    """Builds the first batch of recommendations for a user that has none.

    The picks are catalog order only: no ranking against the user's skills,
    and the confidence score is a random integer inside a fixed band.
    Repeated calls are not de-duplicated.
    """

    def __init__(self, gateway: TableGateway, rng: random.Random | None = None) -> None:
        self.gateway = gateway
        self.rng = rng or random.Random()

    async def generate(self, user_id: str) -> list[dict[str, Any]]:
        try:
            return await self._generate(user_id)
        except DataAccessError:
            logger.exception("recommendations.generate failed user_id=%s", user_id)
            return []

    async def _generate(self, user_id: str) -> list[dict[str, Any]]:
        # User skills are fetched with the rest but do not influence the picks yet.
        _user_skills, user_courses, courses, career_paths = await asyncio.gather(
            self.gateway.select("user_skills", where=[eq("user_id", user_id)]),
            self.gateway.select("user_courses", where=[eq("user_id", user_id)]),
            self.gateway.select("courses", limit=COURSE_CATALOG_LIMIT),
            self.gateway.select("career_paths"),
        )

        enrolled = {row["course_id"] for row in user_courses}
        available = [course for course in courses if course["id"] not in enrolled]

        batch: list[dict[str, Any]] = []
        for course in available[:COURSE_PICKS]:
            batch.append(
                {
                    "user_id": user_id,
                    "recommendation_type": "course",
                    "target_id": course["id"],
                    "reason": course_reason(course.get("difficulty_level")),
                    "confidence_score": self.rng.randrange(*COURSE_CONFIDENCE_BAND),
                }
            )

        for path in career_paths[:CAREER_PATH_PICKS]:
            batch.append(
                {
                    "user_id": user_id,
                    "recommendation_type": "career_path",
                    "target_id": path["id"],
                    "reason": CAREER_PATH_REASON,
                    "confidence_score": self.rng.randrange(*CAREER_PATH_CONFIDENCE_BAND),
                }
            )

        if not batch:
            logger.info("recommendations.generate user_id=%s produced nothing", user_id)
            return []

        inserted = await self.gateway.insert("recommendations", batch)
        logger.info(
            "recommendations.generate user_id=%s courses=%d career_paths=%d",
            user_id,
            sum(1 for row in inserted if row["recommendation_type"] == "course"),
            sum(1 for row in inserted if row["recommendation_type"] == "career_path"),
        )
        return inserted
