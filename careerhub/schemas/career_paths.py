# career_paths.py
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from careerhub.schemas.skills import SkillRead


class CareerPathRead(BaseModel):
    id: str
    title: str
    description: str | None = None
    level: str | None = None
    estimated_duration_months: int | None = None
    average_salary_range: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RequiredSkill(BaseModel):
    importance_level: int
    skill: SkillRead | None = None


class CareerPathWithSkills(CareerPathRead):
    required_skills: list[RequiredSkill] = Field(default_factory=list)


class UserCareerGoalRead(BaseModel):
    id: str
    user_id: str
    career_path_id: str
    target_date: date | None = None
    status: str
    created_at: datetime | None = None


class CareerPathsResponse(BaseModel):
    paths: list[CareerPathWithSkills] = Field(default_factory=list)
    active_goal_path_ids: list[str] = Field(default_factory=list)
