"""
Authentication endpoints - sign-up, sign-in, email verification, session bootstrap,
token refresh and sign-out
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import (
    get_db,
    get_optional_user,
    get_token_payload,
    security,
)
from prep_tracker.app.core.errors import AuthError
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.user import (
    EmailVerification,
    SessionResponse,
    SignUpResponse,
    TokenResponse,
    UserSignIn,
    UserSignUp,
    user_to_response,
)
from prep_tracker.app.services.auth_service import AuthService

logger = get_logger("api.auth")
router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/signup", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
def signup(user_data: UserSignUp, db: Session = Depends(get_db)):
    """
    Create an account and its profile.

    - **full_name**: at least 2 characters
    - **email**: must be unique
    - **password**: at least 6 characters

    When email verification is enabled no token is returned; the user signs in
    after verifying.
    """
    logger.info("Sign-up attempt for email=%s", user_data.email)
    user, access_token = AuthService.register_user(db, user_data)
    logger.info("User registered user_id=%s email=%s", user.id, user.email)
    if access_token:
        message = "Account created!"
    else:
        message = "Account created! Please check your email to verify your account."
    return SignUpResponse(
        user=user_to_response(user),
        message=message,
        access_token=access_token,
    )


@router.post("/signin", response_model=TokenResponse)
def signin(login_data: UserSignIn, db: Session = Depends(get_db)):
    """
    Sign in and get an access token

    - **email**: User's email address
    - **password**: User's password
    """
    logger.info("Sign-in attempt for email=%s", login_data.email)
    try:
        user, access_token = AuthService.login_user(db, login_data)
    except AuthError as e:
        logger.warning("Sign-in failed email=%s reason=%s", login_data.email, e.message)
        raise
    logger.info("User signed in user_id=%s", user.id)
    return TokenResponse(
        access_token=access_token,
        user=user_to_response(user),
        message="Welcome back!",
    )


@router.post("/verify-email", response_model=SessionResponse)
def verify_email(payload: EmailVerification, db: Session = Depends(get_db)):
    """Confirm an email address with the token issued at sign-up."""
    user = AuthService.verify_email(db, payload.token)
    logger.info("Email verified user_id=%s", user.id)
    return SessionResponse(user=user_to_response(user))


@router.get("/session", response_model=SessionResponse)
def get_session(current_user: User | None = Depends(get_optional_user)):
    """
    Session bootstrap. Returns the signed-in user, or user=null when there is no
    valid session. Never 401s, so clients can tell "loading" from "signed out".
    """
    if current_user is None:
        return SessionResponse(user=None)
    return SessionResponse(user=user_to_response(current_user))


@router.post("/refresh", response_model=TokenResponse)
def refresh_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
):
    """
    Refresh access token. Accepts the current token (even if expired) as long as
    its session has not been signed out, and rotates it.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user, access_token = AuthService.refresh(db, credentials.credentials)
    return TokenResponse(access_token=access_token, user=user_to_response(user))


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
def signout(payload: dict = Depends(get_token_payload), db: Session = Depends(get_db)):
    """Close the session behind the presented token. The token stops working immediately."""
    session_id = payload.get("sid")
    if session_id:
        AuthService.close_session(db, session_id)
    logger.info("User signed out user_id=%s", payload.get("sub"))
