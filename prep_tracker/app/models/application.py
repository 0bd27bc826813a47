"""
Application - a job application and where it stands
"""
from datetime import date, datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Text

from prep_tracker.app.db.base import Base, new_id


class Application(Base):
    __tablename__ = "applications"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    company = Column(String(255), nullable=False)
    role = Column(String(255), nullable=False)
    status = Column(String(50), nullable=False, default="Applied")
    applied_date = Column(Date, nullable=False, default=date.today)
    job_url = Column(String(2048), nullable=True)
    salary_range = Column(String(100), nullable=True)
    location = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
