# mentorship.py
from sqlalchemy import JSON, Column, Date, DateTime, Float, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class EducatorProfile(Base):
    __tablename__ = "educator_profiles"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    # Stored as list[str]
    expertise_areas = Column(JSON, nullable=False, default=list)
    teaching_experience_years = Column(Integer, nullable=True)
    hourly_rate = Column(Float, nullable=True)
    rating = Column(Float, nullable=False, default=0.0, index=True)
    total_students = Column(Integer, nullable=False, default=0)
    bio = Column(Text, nullable=True)


class Mentorship(Base):
    __tablename__ = "mentorships"

    id = Column(String(36), primary_key=True, default=new_uuid)
    mentor_id = Column(String(36), nullable=False, index=True)
    mentee_id = Column(String(36), nullable=False, index=True)
    focus_area = Column(String(255), nullable=False)
    # pending | active | completed
    status = Column(String(32), nullable=False, default="pending", index=True)
    sessions_completed = Column(Integer, nullable=False, default=0)
    next_session_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
