"""
User - identity record; every owned row points back here via user_id
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, String

from prep_tracker.app.db.base import Base, new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255), default="")
    is_active = Column(Boolean, default=True, nullable=False)
    email_confirmed_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def is_email_confirmed(self) -> bool:
        return self.email_confirmed_at is not None
