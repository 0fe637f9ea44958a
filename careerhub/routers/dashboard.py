# dashboard.py
from fastapi import APIRouter, Depends

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.dashboard import DashboardResponse
from careerhub.schemas.user import CurrentUser
from careerhub.services import dashboard_service


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def read_dashboard(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> DashboardResponse:
    return await dashboard_service.get_dashboard(gateway, current_user.id)
