# courses.py
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True, default=new_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    difficulty_level = Column(String(32), nullable=True)
    duration_hours = Column(Integer, nullable=True)
    thumbnail_url = Column(String(512), nullable=True)
    provider = Column(String(255), nullable=True)
    category = Column(String(64), nullable=True)
    # Profile id of the educator who publishes the course; catalog courses have none.
    educator_id = Column(String(36), nullable=True, index=True)
    enrollment_count = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)


class UserCourse(Base):
    __tablename__ = "user_courses"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    # not_started | in_progress | completed
    status = Column(String(32), nullable=False, default="not_started")
    progress_percentage = Column(Integer, nullable=False, default=0)
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
