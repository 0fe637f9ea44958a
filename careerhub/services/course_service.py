# course_service.py
import asyncio
import logging
from datetime import datetime, timezone

from careerhub.db.gateway import DataAccessError, TableGateway, eq
from careerhub.schemas.courses import CourseRead, CourseWithEnrollment, UserCourseRead


logger = logging.getLogger(__name__)

COMPLETE = 100


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def list_courses(gateway: TableGateway, user_id: str | None = None) -> list[CourseWithEnrollment]:
    try:
        courses, enrollments = await asyncio.gather(
            gateway.select("courses", order_by=["-created_at"]),
            gateway.select("user_courses", where=[eq("user_id", user_id)]) if user_id else asyncio.sleep(0, result=[]),
        )
    except DataAccessError:
        logger.exception("courses.load failed user_id=%s", user_id)
        return []

    by_course: dict[str, dict] = {}
    for row in enrollments:
        by_course.setdefault(row["course_id"], row)

    result: list[CourseWithEnrollment] = []
    for course in courses:
        enrollment = by_course.get(course["id"])
        result.append(
            CourseWithEnrollment(
                **course,
                enrollment=UserCourseRead(**enrollment) if enrollment else None,
            )
        )
    return result


async def start_course(gateway: TableGateway, user_id: str, course_id: str) -> UserCourseRead:
    course = await gateway.select_one("courses", where=[eq("id", course_id)])
    if course is None:
        raise LookupError(f"Course {course_id} not found")
    # Enrolling twice is not prevented.
    [row] = await gateway.insert(
        "user_courses",
        [
            {
                "user_id": user_id,
                "course_id": course_id,
                "status": "in_progress",
                "progress_percentage": 0,
                "started_at": _utc_now(),
            }
        ],
    )
    return UserCourseRead(**row, course=CourseRead.model_validate(course))


async def update_progress(gateway: TableGateway, user_id: str, user_course_id: str, progress: int) -> UserCourseRead:
    values: dict = {"progress_percentage": progress}
    if progress == COMPLETE:
        values["status"] = "completed"
        values["completed_at"] = _utc_now()

    where = [eq("id", user_course_id), eq("user_id", user_id)]
    updated = await gateway.update("user_courses", values, where=where)
    if not updated:
        raise LookupError(f"Enrollment {user_course_id} not found")
    row = await gateway.select_one("user_courses", where=where)
    if row is None:
        raise LookupError(f"Enrollment {user_course_id} not found")
    return UserCourseRead(**row)
