# profile.py
from fastapi import APIRouter, Depends, HTTPException, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.profile import ProfileResponse, ProfileUpdate
from careerhub.schemas.user import CurrentUser
from careerhub.services import profile_service


router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def read_profile(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> ProfileResponse:
    try:
        return await profile_service.get_profile(gateway, current_user.id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.patch("", response_model=ProfileResponse)
async def update_profile(
    payload: ProfileUpdate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> ProfileResponse:
    try:
        return await profile_service.update_profile(gateway, current_user.id, payload)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
