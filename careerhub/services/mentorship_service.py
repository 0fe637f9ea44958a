# mentorship_service.py
import asyncio
import logging

from careerhub.db.gateway import DataAccessError, TableGateway, any_of, eq, gte, in_
from careerhub.schemas.mentorship import MentorRead, MentorshipCreate, MentorshipRead
from careerhub.schemas.profile import ProfileSummary


logger = logging.getLogger(__name__)

MIN_MENTOR_RATING = 3.5
MENTOR_LIMIT = 12


def _mentor_matches(mentor: MentorRead, term: str) -> bool:
    if not term:
        return True
    if term in (mentor.full_name or "").lower() or term in (mentor.job_title or "").lower():
        return True
    return any(term in area.lower() for area in mentor.expertise_areas)


async def list_mentors(gateway: TableGateway, *, search: str | None = None) -> list[MentorRead]:
    try:
        educators = await gateway.select(
            "educator_profiles",
            where=[gte("rating", MIN_MENTOR_RATING)],
            order_by=["-rating"],
            limit=MENTOR_LIMIT,
        )
        user_ids = sorted({row["user_id"] for row in educators})
        profiles = await gateway.select("profiles", where=[in_("id", user_ids)]) if user_ids else []
    except DataAccessError:
        logger.exception("mentors.load failed")
        return []

    profiles_by_id = {p["id"]: p for p in profiles}
    term = (search or "").strip().lower()
    mentors: list[MentorRead] = []
    for row in educators:
        profile = profiles_by_id.get(row["user_id"])
        # Mentors without a profile are not listed.
        if profile is None:
            continue
        mentor = MentorRead(
            **{**row, "expertise_areas": list(row.get("expertise_areas") or [])},
            full_name=profile.get("full_name"),
            job_title=profile.get("job_title"),
        )
        if _mentor_matches(mentor, term):
            mentors.append(mentor)
    return mentors


async def list_my_mentorships(gateway: TableGateway, user_id: str) -> list[MentorshipRead]:
    try:
        rows = await gateway.select(
            "mentorships",
            where=[any_of(eq("mentor_id", user_id), eq("mentee_id", user_id)), eq("status", "active")],
        )
        people = sorted({row["mentor_id"] for row in rows} | {row["mentee_id"] for row in rows})
        profiles = await gateway.select("profiles", where=[in_("id", people)]) if people else []
    except DataAccessError:
        logger.exception("mentorships.load failed user_id=%s", user_id)
        return []

    summaries = {p["id"]: ProfileSummary.model_validate(p) for p in profiles}
    return [
        MentorshipRead(
            **row,
            mentor_profile=summaries.get(row["mentor_id"]),
            mentee_profile=summaries.get(row["mentee_id"]),
        )
        for row in rows
    ]


async def request_mentorship(gateway: TableGateway, user_id: str, payload: MentorshipCreate) -> MentorshipRead:
    # Failures propagate so the caller can surface them.
    [row] = await gateway.insert(
        "mentorships",
        [
            {
                "mentor_id": payload.mentor_id,
                "mentee_id": user_id,
                "focus_area": payload.focus_area,
                "status": "pending",
                "sessions_completed": 0,
            }
        ],
    )
    logger.info("mentorships.request mentee_id=%s mentor_id=%s", user_id, payload.mentor_id)
    return MentorshipRead(**row)
