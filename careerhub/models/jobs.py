# jobs.py
from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class RecruiterProfile(Base):
    __tablename__ = "recruiter_profiles"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=True, index=True)
    company_name = Column(String(255), nullable=False)
    industry = Column(String(255), nullable=True)


class JobPosting(Base):
    __tablename__ = "job_postings"

    id = Column(String(36), primary_key=True, default=new_uuid)
    recruiter_id = Column(String(36), ForeignKey("recruiter_profiles.id"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    job_type = Column(String(32), nullable=True)
    experience_level = Column(String(32), nullable=True)
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)
    remote_allowed = Column(Boolean, nullable=False, default=False)
    # open | closed
    status = Column(String(32), nullable=False, default="open", index=True)
    applications_count = Column(Integer, nullable=False, default=0)
    views_count = Column(Integer, nullable=False, default=0)
    application_deadline = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(String(36), primary_key=True, default=new_uuid)
    job_id = Column(String(36), ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    cover_letter = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="pending")
    match_score = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
