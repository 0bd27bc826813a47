"""
Password hashing and JWT helpers
"""
from datetime import datetime, timedelta

from jose import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from prep_tracker.app.core.config import settings

EMAIL_VERIFY_PURPOSE = "verify_email"


def get_password_hash(password: str) -> str:
    return generate_password_hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return check_password_hash(hashed_password, plain_password)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Encode a signed JWT. `data` must carry `sub`; `sid` ties it to an auth session."""
    to_encode = data.copy()
    expire = datetime.utcnow() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_email_verification_token(user_id: str, email: str) -> str:
    return create_access_token(
        data={"sub": user_id, "email": email, "purpose": EMAIL_VERIFY_PURPOSE},
        expires_delta=timedelta(hours=24),
    )


def decode_token(token: str, verify_exp: bool = True) -> dict:
    """Decode a JWT. Raises jose.JWTError when invalid."""
    return jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.algorithm],
        options={"verify_exp": verify_exp},
    )
