# skills_service.py
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from careerhub.db.gateway import DataAccessError, TableGateway, eq, in_
from careerhub.schemas.skills import SkillRead, UserSkillCreate, UserSkillRead, UserSkillsResponse


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _user_skill(row: dict[str, Any], skill: dict[str, Any] | None) -> UserSkillRead:
    return UserSkillRead(**row, skill=SkillRead.model_validate(skill) if skill else None)


async def list_catalog(
    gateway: TableGateway,
    *,
    user_id: str | None = None,
    category: str | None = None,
    search: str | None = None,
) -> list[SkillRead]:
    try:
        skills, owned = await asyncio.gather(
            gateway.select("skills", order_by=["name"]),
            gateway.select("user_skills", where=[eq("user_id", user_id)]) if user_id else asyncio.sleep(0, result=[]),
        )
    except DataAccessError:
        logger.exception("skills.catalog load failed")
        return []

    owned_ids = {row["skill_id"] for row in owned}
    term = (search or "").strip().lower()
    result: list[SkillRead] = []
    for skill in skills:
        if skill["id"] in owned_ids:
            continue
        if category and category != "all" and skill.get("category") != category:
            continue
        if term and term not in (skill.get("name") or "").lower():
            continue
        result.append(SkillRead.model_validate(skill))
    return result


async def list_user_skills(gateway: TableGateway, user_id: str) -> UserSkillsResponse:
    try:
        rows = await gateway.select("user_skills", where=[eq("user_id", user_id)])
        skill_ids = [row["skill_id"] for row in rows]
        skills = await gateway.select("skills", where=[in_("id", skill_ids)]) if skill_ids else []
    except DataAccessError:
        logger.exception("skills.user load failed user_id=%s", user_id)
        return UserSkillsResponse()

    by_id = {skill["id"]: skill for skill in skills}
    items = [_user_skill(row, by_id.get(row["skill_id"])) for row in rows]

    grouped: dict[str, list[UserSkillRead]] = {}
    for item in items:
        category = (item.skill.category if item.skill else None) or "other"
        grouped.setdefault(category, []).append(item)
    return UserSkillsResponse(skills=items, by_category=grouped)


async def add_skill(gateway: TableGateway, user_id: str, payload: UserSkillCreate) -> UserSkillRead:
    skill = await gateway.select_one("skills", where=[eq("id", payload.skill_id)])
    if skill is None:
        raise LookupError(f"Skill {payload.skill_id} not found")
    now = _utc_now()
    [row] = await gateway.insert(
        "user_skills",
        [
            {
                "user_id": user_id,
                "skill_id": payload.skill_id,
                "proficiency_level": payload.proficiency_level,
                "created_at": now,
                "updated_at": now,
            }
        ],
    )
    return _user_skill(row, skill)


async def update_skill_level(gateway: TableGateway, user_id: str, user_skill_id: str, level: int) -> UserSkillRead:
    where = [eq("id", user_skill_id), eq("user_id", user_id)]
    updated = await gateway.update(
        "user_skills",
        {"proficiency_level": level, "updated_at": _utc_now()},
        where=where,
    )
    if not updated:
        raise LookupError(f"User skill {user_skill_id} not found")
    row = await gateway.select_one("user_skills", where=where)
    if row is None:
        raise LookupError(f"User skill {user_skill_id} not found")
    skill = await gateway.select_one("skills", where=[eq("id", row["skill_id"])])
    return _user_skill(row, skill)


async def remove_skill(gateway: TableGateway, user_id: str, user_skill_id: str) -> None:
    deleted = await gateway.delete("user_skills", where=[eq("id", user_skill_id), eq("user_id", user_id)])
    if not deleted:
        raise LookupError(f"User skill {user_skill_id} not found")
