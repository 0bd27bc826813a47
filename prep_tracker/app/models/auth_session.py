"""
AuthSession - one row per issued access token. Sign-out deletes the row, which
invalidates the token even before it expires.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String

from prep_tracker.app.db.base import Base, new_id


class AuthSession(Base):
    __tablename__ = "auth_sessions"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
