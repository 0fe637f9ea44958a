# courses.py
from fastapi import APIRouter, Depends, HTTPException, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.courses import CourseWithEnrollment, ProgressUpdate, UserCourseRead
from careerhub.schemas.user import CurrentUser
from careerhub.services import course_service


router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseWithEnrollment])
async def list_courses(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> list[CourseWithEnrollment]:
    return await course_service.list_courses(gateway, current_user.id)


@router.post("/{course_id}/start", response_model=UserCourseRead, status_code=status.HTTP_201_CREATED)
async def start_course(
    course_id: str,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserCourseRead:
    try:
        return await course_service.start_course(gateway, current_user.id, course_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.patch("/enrollments/{user_course_id}", response_model=UserCourseRead)
async def update_course_progress(
    user_course_id: str,
    payload: ProgressUpdate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserCourseRead:
    try:
        return await course_service.update_progress(
            gateway, current_user.id, user_course_id, payload.progress_percentage
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
