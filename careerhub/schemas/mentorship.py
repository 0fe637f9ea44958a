# mentorship.py
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from careerhub.schemas.profile import ProfileSummary


class MentorRead(BaseModel):
    id: str
    user_id: str
    expertise_areas: list[str] = Field(default_factory=list)
    teaching_experience_years: int | None = None
    hourly_rate: float | None = None
    rating: float
    total_students: int = 0
    bio: str | None = None
    full_name: str | None = None
    job_title: str | None = None


class MentorshipCreate(BaseModel):
    # Mentor's user id (educator_profiles.user_id).
    mentor_id: str = Field(min_length=1)
    focus_area: str

    @field_validator("focus_area")
    @classmethod
    def _validate_focus_area(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("focus_area must not be blank")
        return value


class MentorshipRead(BaseModel):
    id: str
    mentor_id: str
    mentee_id: str
    focus_area: str
    status: str
    sessions_completed: int = 0
    next_session_date: date | None = None
    created_at: datetime | None = None
    mentor_profile: ProfileSummary | None = None
    mentee_profile: ProfileSummary | None = None
