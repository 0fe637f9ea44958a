# mentorship.py
from fastapi import APIRouter, Depends, Query, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.mentorship import MentorRead, MentorshipCreate, MentorshipRead
from careerhub.schemas.user import CurrentUser
from careerhub.services import mentorship_service


router = APIRouter(tags=["mentorship"])


@router.get("/mentors", response_model=list[MentorRead])
async def list_mentors(
    q: str | None = Query(default=None),
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> list[MentorRead]:
    return await mentorship_service.list_mentors(gateway, search=q)


@router.get("/mentorships", response_model=list[MentorshipRead])
async def list_my_mentorships(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> list[MentorshipRead]:
    return await mentorship_service.list_my_mentorships(gateway, current_user.id)


@router.post("/mentorships", response_model=MentorshipRead, status_code=status.HTTP_201_CREATED)
async def request_mentorship(
    payload: MentorshipCreate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> MentorshipRead:
    return await mentorship_service.request_mentorship(gateway, current_user.id, payload)
