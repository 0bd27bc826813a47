"""
PracticeTest - result of a timed practice test. No updated_at column.
"""
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String

from prep_tracker.app.db.base import Base, new_id


class PracticeTest(Base):
    __tablename__ = "practice_tests"
    __table_args__ = (CheckConstraint("correct_answers <= total_questions", name="ck_practice_tests_score"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(500), nullable=False)
    category = Column(String(50), nullable=False, default="DSA")
    total_questions = Column(Integer, nullable=False, default=0)
    correct_answers = Column(Integer, nullable=False, default=0)
    time_taken_seconds = Column(Integer, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def score_percent(self) -> float | None:
        if not self.total_questions:
            return None
        return round(self.correct_answers / self.total_questions * 100, 1)
