# dashboard_service.py
import asyncio
import logging

from careerhub.db.gateway import DataAccessError, TableGateway, eq, in_
from careerhub.schemas.courses import CourseRead, UserCourseRead
from careerhub.schemas.dashboard import DashboardResponse, DashboardStats
from careerhub.schemas.skills import SkillRead, UserSkillRead


logger = logging.getLogger(__name__)

RECENT_COURSES = 3
TOP_SKILLS = 5
SUGGESTED_COURSES = 6


async def get_dashboard(gateway: TableGateway, user_id: str) -> DashboardResponse:
    try:
        enrollments, user_skills, goals, catalog = await asyncio.gather(
            gateway.select("user_courses", where=[eq("user_id", user_id)], order_by=["-created_at"]),
            gateway.select("user_skills", where=[eq("user_id", user_id)], order_by=["-proficiency_level"]),
            gateway.select("user_career_goals", where=[eq("user_id", user_id), eq("status", "active")]),
            gateway.select("courses", limit=SUGGESTED_COURSES),
        )
        recent = enrollments[:RECENT_COURSES]
        top_skills = user_skills[:TOP_SKILLS]
        course_ids = sorted({row["course_id"] for row in recent})
        skill_ids = sorted({row["skill_id"] for row in top_skills})
        courses, skills = await asyncio.gather(
            gateway.select("courses", where=[in_("id", course_ids)]) if course_ids else asyncio.sleep(0, result=[]),
            gateway.select("skills", where=[in_("id", skill_ids)]) if skill_ids else asyncio.sleep(0, result=[]),
        )
    except DataAccessError:
        logger.exception("dashboard.load failed user_id=%s", user_id)
        return DashboardResponse()

    courses_by_id = {c["id"]: CourseRead.model_validate(c) for c in courses}
    skills_by_id = {s["id"]: SkillRead.model_validate(s) for s in skills}

    stats = DashboardStats(
        courses_in_progress=sum(1 for row in enrollments if row["status"] == "in_progress"),
        courses_completed=sum(1 for row in enrollments if row["status"] == "completed"),
        skills_tracked=len(user_skills),
        career_goals=len(goals),
    )
    return DashboardResponse(
        stats=stats,
        recent_courses=[UserCourseRead(**row, course=courses_by_id.get(row["course_id"])) for row in recent],
        top_skills=[UserSkillRead(**row, skill=skills_by_id.get(row["skill_id"])) for row in top_skills],
        recommended_courses=[CourseRead.model_validate(c) for c in catalog],
    )
