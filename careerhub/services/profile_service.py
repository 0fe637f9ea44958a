# profile_service.py
import asyncio
import logging
from datetime import datetime, timezone

from careerhub.db.gateway import DataAccessError, TableGateway, eq
from careerhub.schemas.profile import ProfileRead, ProfileResponse, ProfileStats, ProfileUpdate


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def get_profile_stats(gateway: TableGateway, user_id: str) -> ProfileStats:
    try:
        enrollments, skills, goals = await asyncio.gather(
            gateway.select("user_courses", where=[eq("user_id", user_id)]),
            gateway.select("user_skills", where=[eq("user_id", user_id)]),
            gateway.select("user_career_goals", where=[eq("user_id", user_id), eq("status", "active")]),
        )
    except DataAccessError:
        logger.exception("profile.stats load failed user_id=%s", user_id)
        return ProfileStats()

    return ProfileStats(
        total_courses=len(enrollments),
        completed_courses=sum(1 for row in enrollments if row["status"] == "completed"),
        total_skills=len(skills),
        active_goals=len(goals),
    )


async def get_profile(gateway: TableGateway, user_id: str) -> ProfileResponse:
    """Profile row plus progress counts.

    A failed profile read propagates; failed counts degrade to zeros.
    """

    row, stats = await asyncio.gather(
        gateway.select_one("profiles", where=[eq("id", user_id)]),
        get_profile_stats(gateway, user_id),
    )
    if row is None:
        raise LookupError(f"Profile {user_id} not found")
    return ProfileResponse(profile=ProfileRead.model_validate(row), stats=stats)


async def update_profile(gateway: TableGateway, user_id: str, payload: ProfileUpdate) -> ProfileResponse:
    values = payload.model_dump(exclude_unset=True)
    if values:
        values["updated_at"] = _utc_now()
        updated = await gateway.update("profiles", values, where=[eq("id", user_id)])
        if not updated:
            raise LookupError(f"Profile {user_id} not found")
        logger.info("profile.update user_id=%s fields=%s", user_id, sorted(values))
    return await get_profile(gateway, user_id)
