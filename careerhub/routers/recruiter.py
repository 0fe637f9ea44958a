# recruiter.py
from fastapi import APIRouter, Depends, HTTPException, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.recruiter import ApplicantRead, ApplicationStatusUpdate, RecruiterDashboardResponse
from careerhub.schemas.user import CurrentUser
from careerhub.services import recruiter_service


router = APIRouter(prefix="/recruiter", tags=["recruiter"])


@router.get("/dashboard", response_model=RecruiterDashboardResponse)
async def read_recruiter_dashboard(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> RecruiterDashboardResponse:
    return await recruiter_service.get_dashboard(gateway, current_user.id)


@router.patch("/applications/{application_id}", response_model=ApplicantRead)
async def update_application_status(
    application_id: str,
    payload: ApplicationStatusUpdate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> ApplicantRead:
    try:
        return await recruiter_service.update_application_status(
            gateway, current_user.id, application_id, payload.status
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
