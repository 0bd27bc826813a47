"""
Authentication service business logic: sign-up, sign-in, email verification
and the auth-session lifecycle (open on sign-in, close on sign-out).
"""
from datetime import datetime, timedelta

from jose import JWTError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from prep_tracker.app.core.config import settings
from prep_tracker.app.core.errors import AuthError, ValidationError
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.core.security import (
    EMAIL_VERIFY_PURPOSE,
    create_access_token,
    create_email_verification_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from prep_tracker.app.models.auth_session import AuthSession
from prep_tracker.app.models.profile import Profile
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.user import UserSignIn, UserSignUp

logger = get_logger("services.auth")

INVALID_CREDENTIALS = "Invalid email or password"
EMAIL_NOT_CONFIRMED = "Please verify your email before signing in"
ALREADY_REGISTERED = "This email is already registered. Try signing in instead."


class AuthService:
    """Service for authentication operations"""

    @staticmethod
    def register_user(db: Session, user_data: UserSignUp) -> tuple[User, str | None]:
        """
        Create the user and their profile. Returns (user, access_token); the token is
        None while the email still needs verifying.
        """
        email = user_data.email.lower()
        if db.query(User).filter(User.email == email).first():
            raise ValidationError(ALREADY_REGISTERED)

        new_user = User(
            email=email,
            full_name=user_data.full_name,
            hashed_password=get_password_hash(user_data.password),
        )
        if not settings.require_email_verification:
            new_user.email_confirmed_at = datetime.utcnow()
        db.add(new_user)
        try:
            db.flush()
            db.add(Profile(user_id=new_user.id, full_name=user_data.full_name))
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ValidationError(ALREADY_REGISTERED)
        db.refresh(new_user)

        if settings.require_email_verification:
            token = create_email_verification_token(new_user.id, new_user.email)
            # No mail transport is configured; the token is logged for the operator
            logger.info("Email verification token for user_id=%s: %s", new_user.id, token)
            return new_user, None
        return new_user, AuthService.open_session(db, new_user)

    @staticmethod
    def login_user(db: Session, login_data: UserSignIn) -> tuple[User, str]:
        """Authenticate user and return (user, access_token)"""
        user = db.query(User).filter(User.email == login_data.email.lower()).first()
        if not user or not verify_password(login_data.password, user.hashed_password):
            raise AuthError(INVALID_CREDENTIALS)
        if not user.is_active:
            raise AuthError("User account is inactive")
        if settings.require_email_verification and not user.is_email_confirmed:
            raise AuthError(EMAIL_NOT_CONFIRMED)
        return user, AuthService.open_session(db, user)

    @staticmethod
    def verify_email(db: Session, token: str) -> User:
        try:
            payload = decode_token(token)
        except JWTError:
            raise AuthError("Invalid or expired verification token")
        if payload.get("purpose") != EMAIL_VERIFY_PURPOSE:
            raise AuthError("Invalid or expired verification token")
        user = db.query(User).filter(User.id == payload.get("sub")).first()
        if not user:
            raise AuthError("Invalid or expired verification token")
        if not user.is_email_confirmed:
            user.email_confirmed_at = datetime.utcnow()
            db.commit()
            db.refresh(user)
        return user

    @staticmethod
    def open_session(db: Session, user: User) -> str:
        """Persist a new auth session and return the access token bound to it. Prunes the user's dead sessions."""
        AuthService.prune_sessions(db, user.id)
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
        session = AuthSession(user_id=user.id, expires_at=datetime.utcnow() + expires_delta)
        db.add(session)
        db.commit()
        db.refresh(session)
        return create_access_token(
            data={"sub": user.id, "sid": session.id, "email": user.email},
            expires_delta=expires_delta,
        )

    @staticmethod
    def resolve_session(db: Session, payload: dict) -> User | None:
        """User for a decoded token, or None if its session was closed or has expired."""
        user_id = payload.get("sub")
        session_id = payload.get("sid")
        if not user_id or not session_id:
            return None
        session = (
            db.query(AuthSession)
            .filter(AuthSession.id == session_id, AuthSession.user_id == user_id)
            .first()
        )
        if not session or session.expires_at < datetime.utcnow():
            return None
        user = db.query(User).filter(User.id == user_id).first()
        if not user or not user.is_active:
            return None
        return user

    @staticmethod
    def prune_sessions(db: Session, user_id: str) -> int:
        """Delete sessions that are past the refresh window. Does not commit."""
        cutoff = datetime.utcnow() - timedelta(minutes=settings.refresh_window_minutes)
        return (
            db.query(AuthSession)
            .filter(AuthSession.user_id == user_id, AuthSession.expires_at < cutoff)
            .delete(synchronize_session=False)
        )

    @staticmethod
    def close_session(db: Session, session_id: str) -> None:
        db.query(AuthSession).filter(AuthSession.id == session_id).delete(synchronize_session=False)
        db.commit()

    @staticmethod
    def refresh(db: Session, token: str) -> tuple[User, str]:
        """Exchange a (possibly expired) token for a new one while its session is open and inside the refresh window."""
        try:
            payload = decode_token(token, verify_exp=False)
        except JWTError:
            raise AuthError("Invalid token")
        session_id = payload.get("sid")
        session = db.query(AuthSession).filter(AuthSession.id == session_id).first() if session_id else None
        if not session or session.user_id != payload.get("sub"):
            raise AuthError("Session has been closed")
        if session.expires_at + timedelta(minutes=settings.refresh_window_minutes) < datetime.utcnow():
            AuthService.close_session(db, session.id)
            raise AuthError("Session expired, please sign in again")
        user = db.query(User).filter(User.id == session.user_id).first()
        if not user or not user.is_active:
            raise AuthError("User not found")
        AuthService.close_session(db, session.id)
        return user, AuthService.open_session(db, user)
