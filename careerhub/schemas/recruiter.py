# recruiter.py
from typing import Literal

from pydantic import BaseModel, Field

from careerhub.schemas.jobs import JobApplicationRead, JobPostingRead
from careerhub.schemas.profile import ProfileSummary


ApplicationStatus = Literal["pending", "shortlisted", "interview", "rejected"]


class ApplicantRead(JobApplicationRead):
    job_title: str | None = None
    profile: ProfileSummary | None = None


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class RecruiterStats(BaseModel):
    active_jobs: int = 0
    total_applications: int = 0
    shortlisted: int = 0
    avg_match_score: float = 0.0


class RecruiterDashboardResponse(BaseModel):
    stats: RecruiterStats = Field(default_factory=RecruiterStats)
    jobs: list[JobPostingRead] = Field(default_factory=list)
    applications: list[ApplicantRead] = Field(default_factory=list)
