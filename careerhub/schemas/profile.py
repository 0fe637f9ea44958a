# profile.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileSummary(BaseModel):
    full_name: str | None = None
    job_title: str | None = None


class ProfileRead(BaseModel):
    id: str
    full_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    job_title: str | None = None
    years_experience: int | None = None
    career_goals: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    full_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    job_title: str | None = None
    years_experience: int | None = Field(default=None, ge=0)
    career_goals: str | None = None

    @field_validator("full_name")
    @classmethod
    def _validate_full_name(cls, v: str | None) -> str | None:
        # The name may be left out of an update but never cleared.
        value = (v or "").strip()
        if not value:
            raise ValueError("full_name must not be blank")
        return value


class ProfileStats(BaseModel):
    total_courses: int = 0
    completed_courses: int = 0
    total_skills: int = 0
    active_goals: int = 0


class ProfileResponse(BaseModel):
    profile: ProfileRead
    stats: ProfileStats = Field(default_factory=ProfileStats)
