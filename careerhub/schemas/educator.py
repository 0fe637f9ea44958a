# educator.py
from datetime import datetime

from pydantic import BaseModel, Field

from careerhub.schemas.courses import CourseRead


class LiveSessionRead(BaseModel):
    id: str
    educator_id: str
    title: str
    description: str | None = None
    scheduled_start: datetime
    scheduled_end: datetime | None = None
    max_participants: int = 0
    current_participants: int = 0
    status: str


class EducatorAnalytics(BaseModel):
    total_courses: int = 0
    total_students: int = 0
    active_students: int = 0
    avg_completion_rate: int = 0


class EducatorDashboardResponse(BaseModel):
    analytics: EducatorAnalytics = Field(default_factory=EducatorAnalytics)
    courses: list[CourseRead] = Field(default_factory=list)
    upcoming_sessions: list[LiveSessionRead] = Field(default_factory=list)
