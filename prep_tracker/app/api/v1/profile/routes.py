"""
Profile API - the signed-in user's display name and avatar
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.models.profile import Profile
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import ProfileOut, ProfileUpdate

logger = get_logger("api.profile")
router = APIRouter(prefix="/profile", tags=["profile"])


def _get_or_create(db: Session, user: User) -> Profile:
    profile = db.query(Profile).filter(Profile.user_id == user.id).first()
    if profile is None:
        profile = Profile(user_id=user.id, full_name=user.full_name)
        db.add(profile)
        db.commit()
        db.refresh(profile)
    return profile


@router.get("", response_model=ProfileOut)
def get_profile(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return _get_or_create(db, current_user)


@router.patch("", response_model=ProfileOut)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Only the provided fields change. A new display name is mirrored onto the user."""
    profile = _get_or_create(db, current_user)
    data = payload.model_dump(exclude_unset=True)
    for key, value in data.items():
        setattr(profile, key, value)
    if data.get("full_name"):
        current_user.full_name = data["full_name"]
    db.commit()
    db.refresh(profile)
    logger.info("Profile updated user_id=%s fields=%s", current_user.id, sorted(data))
    return profile
