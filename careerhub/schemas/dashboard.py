# dashboard.py
from pydantic import BaseModel, Field

from careerhub.schemas.courses import CourseRead, UserCourseRead
from careerhub.schemas.skills import UserSkillRead


class DashboardStats(BaseModel):
    courses_in_progress: int = 0
    courses_completed: int = 0
    skills_tracked: int = 0
    career_goals: int = 0


class DashboardResponse(BaseModel):
    stats: DashboardStats = Field(default_factory=DashboardStats)
    recent_courses: list[UserCourseRead] = Field(default_factory=list)
    top_skills: list[UserSkillRead] = Field(default_factory=list)
    recommended_courses: list[CourseRead] = Field(default_factory=list)
