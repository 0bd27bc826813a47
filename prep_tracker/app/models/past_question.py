"""
PastQuestion - public question bank. Not owned by any user, read-only over the API.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from prep_tracker.app.db.base import Base, new_id


class PastQuestion(Base):
    __tablename__ = "past_questions"

    id = Column(String(36), primary_key=True, default=new_id)

    company = Column(String(255), nullable=False)
    role = Column(String(255), nullable=True)
    question_text = Column(Text, nullable=False)
    answer = Column(Text, nullable=True)
    category = Column(String(50), nullable=False, default="Technical")
    difficulty = Column(String(20), nullable=False, default="Medium")
    year = Column(Integer, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
