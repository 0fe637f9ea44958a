from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class Recommendation(Base):
    __tablename__ = "recommendations"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)

    # course | career_path | job | mentor
    recommendation_type = Column(String(32), nullable=False, index=True)
    # Weak reference into the table selected by recommendation_type.
    target_id = Column(String(36), nullable=False)

    reason = Column(Text, nullable=True)
    confidence_score = Column(Integer, nullable=False, default=0)
    is_viewed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
