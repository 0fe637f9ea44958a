# profile.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the identity provider's user id (token subject).
    id = Column(String(36), primary_key=True, default=new_uuid)
    full_name = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String(512), nullable=True)
    job_title = Column(String(255), nullable=True)
    years_experience = Column(Integer, nullable=True)
    career_goals = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
