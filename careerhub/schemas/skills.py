# skills.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SkillRead(BaseModel):
    id: str
    name: str
    category: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserSkillRead(BaseModel):
    id: str
    user_id: str
    skill_id: str
    proficiency_level: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    skill: SkillRead | None = None


class UserSkillCreate(BaseModel):
    skill_id: str = Field(min_length=1)
    proficiency_level: int = Field(default=1, ge=1, le=5)


class UserSkillUpdate(BaseModel):
    proficiency_level: int = Field(ge=1, le=5)


class UserSkillsResponse(BaseModel):
    skills: list[UserSkillRead] = Field(default_factory=list)
    # category -> user skills; skills without a catalog entry land in "other"
    by_category: dict[str, list[UserSkillRead]] = Field(default_factory=dict)
