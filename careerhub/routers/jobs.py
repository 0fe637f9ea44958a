# jobs.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from careerhub.db.gateway import TableGateway
from careerhub.routers.dependencies import get_current_user, get_gateway
from careerhub.schemas.jobs import JobApplicationCreate, JobApplicationRead, JobListResponse
from careerhub.schemas.user import CurrentUser
from careerhub.services import job_service


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(
    q: str | None = Query(default=None),
    job_type: str | None = Query(default=None),
    remote: bool | None = Query(default=None),
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> JobListResponse:
    return await job_service.list_jobs(gateway, current_user.id, search=q, job_type=job_type, remote=remote)


@router.get("/applications", response_model=list[JobApplicationRead])
async def list_my_applications(
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> list[JobApplicationRead]:
    return await job_service.list_applications(gateway, current_user.id)


@router.post("/{job_id}/apply", response_model=JobApplicationRead, status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    job_id: str,
    payload: JobApplicationCreate,
    gateway: TableGateway = Depends(get_gateway),
    current_user: CurrentUser = Depends(get_current_user),
) -> JobApplicationRead:
    try:
        return await job_service.apply_to_job(gateway, current_user.id, job_id, payload.cover_letter)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
