# career_paths.py
from fastapi import APIRouter, Depends, HTTPException, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.career_paths import CareerPathsResponse, UserCareerGoalRead
from careerhub.schemas.user import CurrentUser
from careerhub.services import career_path_service


router = APIRouter(prefix="/career-paths", tags=["career-paths"])


@router.get("", response_model=CareerPathsResponse)
async def list_career_paths(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> CareerPathsResponse:
    return await career_path_service.list_career_paths(gateway, current_user.id)


@router.post("/{career_path_id}/goal", response_model=UserCareerGoalRead, status_code=status.HTTP_201_CREATED)
async def add_career_goal(
    career_path_id: str,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserCareerGoalRead:
    try:
        return await career_path_service.add_goal(gateway, current_user.id, career_path_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
