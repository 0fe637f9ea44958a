# educator.py
from fastapi import APIRouter, Depends

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.educator import EducatorDashboardResponse
from careerhub.schemas.user import CurrentUser
from careerhub.services import educator_service


router = APIRouter(prefix="/educator", tags=["educator"])


@router.get("/dashboard", response_model=EducatorDashboardResponse)
async def read_educator_dashboard(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> EducatorDashboardResponse:
    return await educator_service.get_dashboard(gateway, current_user.id)
