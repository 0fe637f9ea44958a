# jobs.py
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class JobPostingRead(BaseModel):
    id: str
    recruiter_id: str | None = None
    title: str
    description: str | None = None
    location: str | None = None
    job_type: str | None = None
    experience_level: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    remote_allowed: bool = False
    status: str
    applications_count: int = 0
    views_count: int = 0
    application_deadline: date | None = None
    created_at: datetime | None = None
    company_name: str | None = None
    industry: str | None = None

    model_config = ConfigDict(from_attributes=True)


class JobApplicationCreate(BaseModel):
    cover_letter: str | None = None


class JobApplicationRead(BaseModel):
    id: str
    job_id: str
    user_id: str
    cover_letter: str | None = None
    status: str
    match_score: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class JobListResponse(BaseModel):
    jobs: list[JobPostingRead] = Field(default_factory=list)
    applied_job_ids: list[str] = Field(default_factory=list)
