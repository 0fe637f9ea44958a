from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Sequence

from careerhub.db.gateway import DataAccessError, TableGateway, eq
from careerhub.schemas.recommendation import (
    CareerPathTarget,
    CourseTarget,
    EnrichedRecommendation,
    JobTarget,
    MentorTarget,
    Recommendation,
)


logger = logging.getLogger(__name__)

Target = CourseTarget | CareerPathTarget | JobTarget | MentorTarget
Resolver = Callable[[TableGateway, str], Awaitable[Target | None]]


async def resolve_course(gateway: TableGateway, target_id: str) -> CourseTarget | None:
    row = await gateway.select_one("courses", where=[eq("id", target_id)])
    return CourseTarget.model_validate(row) if row else None


async def resolve_career_path(gateway: TableGateway, target_id: str) -> CareerPathTarget | None:
    row = await gateway.select_one("career_paths", where=[eq("id", target_id)])
    return CareerPathTarget.model_validate(row) if row else None


async def resolve_job(gateway: TableGateway, target_id: str) -> JobTarget | None:
    row = await gateway.select_one("job_postings", where=[eq("id", target_id)])
    return JobTarget.model_validate(row) if row else None


async def resolve_mentor(gateway: TableGateway, target_id: str) -> MentorTarget | None:
    row = await gateway.select_one("educator_profiles", where=[eq("id", target_id)])
    if not row:
        return None
    profile = await gateway.select_one("profiles", where=[eq("id", row["user_id"])])
    return MentorTarget(
        id=row["id"],
        user_id=row["user_id"],
        title=(profile or {}).get("full_name"),
        description=row.get("bio"),
        expertise_areas=list(row.get("expertise_areas") or []),
        rating=row.get("rating"),
        hourly_rate=row.get("hourly_rate"),
        teaching_experience_years=row.get("teaching_experience_years"),
        total_students=row.get("total_students"),
    )


RESOLVERS: dict[str, Resolver] = {
    "course": resolve_course,
    "career_path": resolve_career_path,
    "job": resolve_job,
    "mentor": resolve_mentor,
}


class RecommendationEnricher:
    def __init__(self, gateway: TableGateway, resolvers: Mapping[str, Resolver] | None = None) -> None:
        self.gateway = gateway
        self.resolvers = dict(resolvers or RESOLVERS)

    async def enrich(
        self, recommendations: Sequence[Recommendation | Mapping[str, Any]]
    ) -> list[EnrichedRecommendation]:
        """Attach each recommendation's current target.

        All lookups run concurrently; results are zipped back by index so the
        output keeps the input order. A missing or unreadable target becomes
        ``target=None`` and never fails the batch.
        """

        records = [
            rec if isinstance(rec, Recommendation) else Recommendation.model_validate(rec)
            for rec in recommendations
        ]
        targets = await asyncio.gather(*(self._resolve(rec) for rec in records))
        return [
            EnrichedRecommendation(**rec.model_dump(), target=target)
            for rec, target in zip(records, targets)
        ]

    async def _resolve(self, rec: Recommendation) -> Target | None:
        resolver = self.resolvers.get(rec.recommendation_type)
        if resolver is None:
            logger.warning(
                "recommendations.enrich unknown type=%s id=%s", rec.recommendation_type, rec.id
            )
            return None
        try:
            return await resolver(self.gateway, rec.target_id)
        except DataAccessError:
            logger.exception(
                "recommendations.enrich target fetch failed type=%s target_id=%s",
                rec.recommendation_type,
                rec.target_id,
            )
            return None
