# educator_service.py
import asyncio
import logging
from datetime import datetime, timezone

from careerhub.db.gateway import DataAccessError, TableGateway, eq, gte
from careerhub.schemas.courses import CourseRead
from careerhub.schemas.educator import EducatorAnalytics, EducatorDashboardResponse, LiveSessionRead


logger = logging.getLogger(__name__)

RECENT_COURSES = 5
UPCOMING_SESSIONS = 3

# Placeholders until per-student activity and completion are tracked.
ACTIVE_STUDENT_PERCENT = 70
AVG_COMPLETION_RATE = 75


async def get_dashboard(
    gateway: TableGateway, user_id: str, *, now: datetime | None = None
) -> EducatorDashboardResponse:
    now = now or datetime.now(timezone.utc)
    try:
        courses, sessions = await asyncio.gather(
            gateway.select("courses", where=[eq("educator_id", user_id)], order_by=["-created_at"]),
            gateway.select(
                "live_sessions",
                where=[eq("educator_id", user_id), gte("scheduled_start", now)],
                order_by=["scheduled_start"],
                limit=UPCOMING_SESSIONS,
            ),
        )
    except DataAccessError:
        logger.exception("educator.dashboard load failed user_id=%s", user_id)
        return EducatorDashboardResponse()

    total_students = sum(int(c.get("enrollment_count") or 0) for c in courses)
    analytics = EducatorAnalytics(
        total_courses=len(courses),
        total_students=total_students,
        active_students=total_students * ACTIVE_STUDENT_PERCENT // 100,
        avg_completion_rate=AVG_COMPLETION_RATE if courses else 0,
    )
    return EducatorDashboardResponse(
        analytics=analytics,
        courses=[CourseRead.model_validate(c) for c in courses[:RECENT_COURSES]],
        upcoming_sessions=[LiveSessionRead(**s) for s in sessions],
    )
