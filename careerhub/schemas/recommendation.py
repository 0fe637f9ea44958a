from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field


RecommendationType = Literal["course", "career_path", "job", "mentor"]
RECOMMENDATION_TYPES: tuple[str, ...] = get_args(RecommendationType)


class Recommendation(BaseModel):
    id: str
    user_id: str
    # Stored rows are not constrained to RECOMMENDATION_TYPES; unknown types enrich to no target.
    recommendation_type: str
    target_id: str
    reason: str | None = None
    confidence_score: int = 0
    is_viewed: bool = False
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CourseTarget(BaseModel):
    kind: Literal["course"] = "course"
    id: str
    title: str
    description: str | None = None
    difficulty_level: str | None = None
    duration_hours: int | None = None
    provider: str | None = None
    category: str | None = None
    thumbnail_url: str | None = None


class CareerPathTarget(BaseModel):
    kind: Literal["career_path"] = "career_path"
    id: str
    title: str
    description: str | None = None
    level: str | None = None
    estimated_duration_months: int | None = None
    average_salary_range: str | None = None


class JobTarget(BaseModel):
    kind: Literal["job"] = "job"
    id: str
    title: str
    description: str | None = None
    location: str | None = None
    job_type: str | None = None
    experience_level: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    remote_allowed: bool = False
    status: str | None = None


class MentorTarget(BaseModel):
    kind: Literal["mentor"] = "mentor"
    id: str
    user_id: str
    # Mentor profiles carry no title of their own; it is taken from the linked profile.
    title: str | None = None
    description: str | None = None
    expertise_areas: list[str] = Field(default_factory=list)
    rating: float | None = None
    hourly_rate: float | None = None
    teaching_experience_years: int | None = None
    total_students: int | None = None


RecommendationTarget = Annotated[
    Union[CourseTarget, CareerPathTarget, JobTarget, MentorTarget],
    Field(discriminator="kind"),
]


class EnrichedRecommendation(Recommendation):
    target: Optional[RecommendationTarget] = None


class RecommendationBoardResponse(BaseModel):
    status: str
    filter: str = "all"
    total: int
    items: list[EnrichedRecommendation] = Field(default_factory=list)


class GenerateRecommendationsResponse(BaseModel):
    generated: list[Recommendation] = Field(default_factory=list)
