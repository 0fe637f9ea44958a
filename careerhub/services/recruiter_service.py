# recruiter_service.py
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from careerhub.db.gateway import DataAccessError, TableGateway, eq, in_
from careerhub.schemas.jobs import JobPostingRead
from careerhub.schemas.profile import ProfileSummary
from careerhub.schemas.recruiter import ApplicantRead, RecruiterDashboardResponse, RecruiterStats


logger = logging.getLogger(__name__)

RECENT_JOBS = 5
RECENT_APPLICATIONS = 10
SHORTLISTED_STATUSES = frozenset({"shortlisted", "interview"})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def _recruiter_ids(gateway: TableGateway, user_id: str) -> list[str]:
    rows = await gateway.select("recruiter_profiles", where=[eq("user_id", user_id)])
    return [row["id"] for row in rows]


async def _applicants(
    gateway: TableGateway,
    applications: list[dict[str, Any]],
    jobs_by_id: dict[str, dict[str, Any]],
) -> list[ApplicantRead]:
    user_ids = sorted({row["user_id"] for row in applications})
    profiles = await gateway.select("profiles", where=[in_("id", user_ids)]) if user_ids else []
    summaries = {p["id"]: ProfileSummary.model_validate(p) for p in profiles}
    return [
        ApplicantRead(
            **row,
            job_title=(jobs_by_id.get(row["job_id"]) or {}).get("title"),
            profile=summaries.get(row["user_id"]),
        )
        for row in applications
    ]


async def get_dashboard(gateway: TableGateway, user_id: str) -> RecruiterDashboardResponse:
    """Own postings and the applicants to them.

    Stats count every posting and application; the lists are the newest slices.
    """

    try:
        recruiter_ids = await _recruiter_ids(gateway, user_id)
        if not recruiter_ids:
            return RecruiterDashboardResponse()
        postings = await gateway.select(
            "job_postings", where=[in_("recruiter_id", recruiter_ids)], order_by=["-created_at"]
        )
        job_ids = [p["id"] for p in postings]
        applications = (
            await gateway.select("job_applications", where=[in_("job_id", job_ids)], order_by=["-created_at"])
            if job_ids
            else []
        )
        jobs_by_id = {p["id"]: p for p in postings}
        recent = await _applicants(gateway, applications[:RECENT_APPLICATIONS], jobs_by_id)
    except DataAccessError:
        logger.exception("recruiter.dashboard load failed user_id=%s", user_id)
        return RecruiterDashboardResponse()

    scores = [row["match_score"] for row in applications if row.get("match_score") is not None]
    stats = RecruiterStats(
        active_jobs=sum(1 for p in postings if p["status"] == "open"),
        total_applications=len(applications),
        shortlisted=sum(1 for row in applications if row["status"] in SHORTLISTED_STATUSES),
        avg_match_score=round(sum(scores) / len(scores), 1) if scores else 0.0,
    )
    return RecruiterDashboardResponse(
        stats=stats,
        jobs=[JobPostingRead(**p) for p in postings[:RECENT_JOBS]],
        applications=recent,
    )


async def update_application_status(
    gateway: TableGateway, user_id: str, application_id: str, status: str
) -> ApplicantRead:
    """Move an application to ``status``; only the posting's recruiter may do so."""

    application = await gateway.select_one("job_applications", where=[eq("id", application_id)])
    if application is None:
        raise LookupError(f"Application {application_id} not found")

    job, recruiter_ids = await asyncio.gather(
        gateway.select_one("job_postings", where=[eq("id", application["job_id"])]),
        _recruiter_ids(gateway, user_id),
    )
    if job is None or job.get("recruiter_id") not in recruiter_ids:
        raise LookupError(f"Application {application_id} not found")

    await gateway.update(
        "job_applications",
        {"status": status, "updated_at": _utc_now()},
        where=[eq("id", application_id)],
    )
    logger.info("recruiter.application status=%s id=%s user_id=%s", status, application_id, user_id)

    row = await gateway.select_one("job_applications", where=[eq("id", application_id)])
    if row is None:
        raise LookupError(f"Application {application_id} not found")
    [applicant] = await _applicants(gateway, [row], {job["id"]: job})
    return applicant
