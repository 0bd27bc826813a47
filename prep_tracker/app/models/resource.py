"""
Resource - a study resource (article, video, course...) the user is working through
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text

from prep_tracker.app.db.base import Base, new_id


class Resource(Base):
    __tablename__ = "resources"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(500), nullable=False)
    url = Column(String(2048), nullable=True)
    category = Column(String(50), nullable=False, default="DSA")
    resource_type = Column(String(50), nullable=False, default="article")
    notes = Column(Text, nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False)
    # Stamped when is_completed flips to true; feeds weekly activity
    completed_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
