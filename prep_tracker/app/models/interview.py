"""
Interview - a scheduled or past interview, optionally linked to an application.
Deleting the application leaves the interview in place with application_id NULL.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from prep_tracker.app.db.base import Base, new_id


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    application_id = Column(
        String(36), ForeignKey("applications.id", ondelete="SET NULL"), nullable=True, index=True
    )

    company = Column(String(255), nullable=False)
    role = Column(String(255), nullable=False)
    interview_date = Column(DateTime, nullable=False, index=True)  # naive UTC
    interview_type = Column(String(50), nullable=False, default="Technical")
    outcome = Column(String(20), nullable=True)  # Pending, Passed, Failed, On Hold
    notes = Column(Text, nullable=True)
    feedback = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
