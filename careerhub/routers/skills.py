# skills.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.skills import SkillRead, UserSkillCreate, UserSkillRead, UserSkillsResponse, UserSkillUpdate
from careerhub.schemas.user import CurrentUser
from careerhub.services import skills_service


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=list[SkillRead])
async def list_skills(
    category: str | None = Query(default=None),
    q: str | None = Query(default=None),
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> list[SkillRead]:
    return await skills_service.list_catalog(gateway, user_id=current_user.id, category=category, search=q)


@router.get("/me", response_model=UserSkillsResponse)
async def list_my_skills(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserSkillsResponse:
    return await skills_service.list_user_skills(gateway, current_user.id)


@router.post("/me", response_model=UserSkillRead, status_code=status.HTTP_201_CREATED)
async def add_my_skill(
    payload: UserSkillCreate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserSkillRead:
    try:
        return await skills_service.add_skill(gateway, current_user.id, payload)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.patch("/me/{user_skill_id}", response_model=UserSkillRead)
async def update_my_skill(
    user_skill_id: str,
    payload: UserSkillUpdate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserSkillRead:
    try:
        return await skills_service.update_skill_level(gateway, current_user.id, user_skill_id, payload.proficiency_level)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.delete("/me/{user_skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_my_skill(
    user_skill_id: str,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> Response:
    try:
        await skills_service.remove_skill(gateway, current_user.id, user_skill_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
