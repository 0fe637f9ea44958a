# career_path_service.py
import asyncio
import logging
from datetime import date

from careerhub.db.gateway import DataAccessError, TableGateway, eq, in_
from careerhub.schemas.career_paths import (
    CareerPathsResponse,
    CareerPathWithSkills,
    RequiredSkill,
    UserCareerGoalRead,
)
from careerhub.schemas.skills import SkillRead


logger = logging.getLogger(__name__)

GOAL_HORIZON_MONTHS = 12


def goal_target_date(today: date) -> date:
    """One year out; Feb 29 rolls over to Mar 1 like a plain month overflow."""

    year = today.year + GOAL_HORIZON_MONTHS // 12
    try:
        return today.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


async def list_career_paths(gateway: TableGateway, user_id: str | None = None) -> CareerPathsResponse:
    try:
        paths, goals = await asyncio.gather(
            gateway.select("career_paths", order_by=["level"]),
            gateway.select(
                "user_career_goals",
                where=[eq("user_id", user_id), eq("status", "active")],
            )
            if user_id
            else asyncio.sleep(0, result=[]),
        )
        links_per_path = await asyncio.gather(
            *(
                gateway.select(
                    "career_path_skills",
                    where=[eq("career_path_id", path["id"])],
                    order_by=["-importance_level"],
                )
                for path in paths
            )
        )
        skill_ids = sorted({link["skill_id"] for links in links_per_path for link in links})
        skills = await gateway.select("skills", where=[in_("id", skill_ids)]) if skill_ids else []
    except DataAccessError:
        logger.exception("career_paths.load failed user_id=%s", user_id)
        return CareerPathsResponse()

    skills_by_id = {skill["id"]: SkillRead.model_validate(skill) for skill in skills}
    result: list[CareerPathWithSkills] = []
    for path, links in zip(paths, links_per_path):
        required = [
            RequiredSkill(importance_level=link["importance_level"], skill=skills_by_id.get(link["skill_id"]))
            for link in links
        ]
        result.append(CareerPathWithSkills(**path, required_skills=required))

    return CareerPathsResponse(
        paths=result,
        active_goal_path_ids=[goal["career_path_id"] for goal in goals],
    )


async def add_goal(
    gateway: TableGateway,
    user_id: str,
    career_path_id: str,
    *,
    today: date | None = None,
) -> UserCareerGoalRead:
    path = await gateway.select_one("career_paths", where=[eq("id", career_path_id)])
    if path is None:
        raise LookupError(f"Career path {career_path_id} not found")
    [row] = await gateway.insert(
        "user_career_goals",
        [
            {
                "user_id": user_id,
                "career_path_id": career_path_id,
                "target_date": goal_target_date(today or date.today()),
                "status": "active",
            }
        ],
    )
    return UserCareerGoalRead(**row)
