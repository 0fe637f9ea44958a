# job_service.py
import asyncio
import logging
import random

from careerhub.db.gateway import DataAccessError, TableGateway, eq, in_
from careerhub.schemas.jobs import JobApplicationRead, JobListResponse, JobPostingRead


logger = logging.getLogger(__name__)

# Placeholder score; nothing is compared against the applicant yet.
MATCH_SCORE_BAND = (70, 100)


def _matches(job: JobPostingRead, term: str, job_type: str | None, remote: bool | None) -> bool:
    if term:
        haystacks = (job.title, job.description or "", job.company_name or "")
        if not any(term in value.lower() for value in haystacks):
            return False
    if job_type and job_type != "all" and job.job_type != job_type:
        return False
    if remote is not None and job.remote_allowed != remote:
        return False
    return True


async def list_jobs(
    gateway: TableGateway,
    user_id: str | None = None,
    *,
    search: str | None = None,
    job_type: str | None = None,
    remote: bool | None = None,
) -> JobListResponse:
    try:
        postings, applications = await asyncio.gather(
            gateway.select("job_postings", where=[eq("status", "open")], order_by=["-created_at"]),
            gateway.select("job_applications", where=[eq("user_id", user_id)]) if user_id else asyncio.sleep(0, result=[]),
        )
        recruiter_ids = sorted({p["recruiter_id"] for p in postings if p.get("recruiter_id")})
        recruiters = (
            await gateway.select("recruiter_profiles", where=[in_("id", recruiter_ids)]) if recruiter_ids else []
        )
    except DataAccessError:
        logger.exception("jobs.load failed user_id=%s", user_id)
        return JobListResponse()

    recruiters_by_id = {r["id"]: r for r in recruiters}
    term = (search or "").strip().lower()
    jobs: list[JobPostingRead] = []
    for posting in postings:
        recruiter = recruiters_by_id.get(posting.get("recruiter_id"))
        # Postings without a recruiter profile are not listed.
        if recruiter is None:
            continue
        job = JobPostingRead(**posting, company_name=recruiter["company_name"], industry=recruiter.get("industry"))
        if _matches(job, term, job_type, remote):
            jobs.append(job)

    return JobListResponse(jobs=jobs, applied_job_ids=[a["job_id"] for a in applications])


async def list_applications(gateway: TableGateway, user_id: str) -> list[JobApplicationRead]:
    try:
        rows = await gateway.select("job_applications", where=[eq("user_id", user_id)], order_by=["-created_at"])
    except DataAccessError:
        logger.exception("jobs.applications load failed user_id=%s", user_id)
        return []
    return [JobApplicationRead(**row) for row in rows]


async def apply_to_job(
    gateway: TableGateway,
    user_id: str,
    job_id: str,
    cover_letter: str | None = None,
    *,
    rng: random.Random | None = None,
) -> JobApplicationRead:
    """Submit an application and bump the posting's counter.

    Data-access failures propagate so the caller can surface them.
    """

    job = await gateway.select_one("job_postings", where=[eq("id", job_id)])
    if job is None:
        raise LookupError(f"Job {job_id} not found")

    rng = rng or random.Random()
    [row] = await gateway.insert(
        "job_applications",
        [
            {
                "job_id": job_id,
                "user_id": user_id,
                "cover_letter": cover_letter or "",
                "status": "pending",
                "match_score": rng.randrange(*MATCH_SCORE_BAND),
            }
        ],
    )
    await gateway.update(
        "job_postings",
        {"applications_count": int(job.get("applications_count") or 0) + 1},
        where=[eq("id", job_id)],
    )
    logger.info("jobs.apply user_id=%s job_id=%s", user_id, job_id)
    return JobApplicationRead(**row)
