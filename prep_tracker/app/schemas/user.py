"""
User / auth Pydantic schemas for request/response validation
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserSignUp(BaseModel):
    """Schema for sign-up"""
    full_name: str = Field(min_length=2)
    email: EmailStr
    password: str = Field(min_length=6)


class UserSignIn(BaseModel):
    """Schema for sign-in"""
    email: EmailStr
    password: str


class EmailVerification(BaseModel):
    token: str


class UserResponse(BaseModel):
    """Schema for user response"""
    id: str
    email: str
    full_name: str = ""
    email_confirmed: bool = False

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """Schema for token response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
    message: Optional[str] = None


class SignUpResponse(BaseModel):
    user: UserResponse
    message: str
    # Only set when email verification is disabled; otherwise the user must verify first
    access_token: Optional[str] = None
    token_type: str = "bearer"


class SessionResponse(BaseModel):
    """Session bootstrap: user is null when there is no valid session"""
    user: Optional[UserResponse] = None


def user_to_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email or "",
        full_name=user.full_name or "",
        email_confirmed=user.is_email_confirmed,
    )
