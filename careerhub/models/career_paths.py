# career_paths.py
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class CareerPath(Base):
    __tablename__ = "career_paths"

    id = Column(String(36), primary_key=True, default=new_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    level = Column(String(32), nullable=True)
    estimated_duration_months = Column(Integer, nullable=True)
    average_salary_range = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class CareerPathSkill(Base):
    __tablename__ = "career_path_skills"

    id = Column(String(36), primary_key=True, default=new_uuid)
    career_path_id = Column(
        String(36), ForeignKey("career_paths.id", ondelete="CASCADE"), nullable=False, index=True
    )
    skill_id = Column(String(36), ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)
    importance_level = Column(Integer, nullable=False, default=1)


class UserCareerGoal(Base):
    __tablename__ = "user_career_goals"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    career_path_id = Column(
        String(36), ForeignKey("career_paths.id", ondelete="CASCADE"), nullable=False, index=True
    )
    target_date = Column(Date, nullable=True)
    # active | achieved | paused
    status = Column(String(32), nullable=False, default="active", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
