# live_sessions.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from careerhub.database import Base, new_uuid


class LiveSession(Base):
    __tablename__ = "live_sessions"

    id = Column(String(36), primary_key=True, default=new_uuid)
    # Profile id of the hosting educator.
    educator_id = Column(String(36), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    scheduled_start = Column(DateTime(timezone=True), nullable=False, index=True)
    scheduled_end = Column(DateTime(timezone=True), nullable=True)
    max_participants = Column(Integer, nullable=False, default=0)
    current_participants = Column(Integer, nullable=False, default=0)
    # scheduled | live | completed
    status = Column(String(32), nullable=False, default="scheduled")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
