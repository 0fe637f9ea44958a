# courses.py
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


CourseStatus = Literal["not_started", "in_progress", "completed"]


class CourseRead(BaseModel):
    id: str
    title: str
    description: str | None = None
    difficulty_level: str | None = None
    duration_hours: int | None = None
    thumbnail_url: str | None = None
    provider: str | None = None
    category: str | None = None
    educator_id: str | None = None
    enrollment_count: int = 0
    rating: float | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class UserCourseRead(BaseModel):
    id: str
    user_id: str
    course_id: str
    status: CourseStatus
    progress_percentage: int = 0
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    course: CourseRead | None = None


class CourseWithEnrollment(CourseRead):
    enrollment: UserCourseRead | None = None


class ProgressUpdate(BaseModel):
    progress_percentage: int = Field(ge=0, le=100)
