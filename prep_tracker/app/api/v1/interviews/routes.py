"""
Interviews API - scheduled and past interviews, split on the current time
"""
from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import InterviewCreate, InterviewOut, InterviewUpdate
from prep_tracker.app.services.crud import owned_client
from prep_tracker.app.utils import cache

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("")
def list_interviews(
    when: Literal["upcoming", "past", "all"] = "all",
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """
    Interviews ordered by date ascending. An interview is upcoming when its date is
    strictly after now; past interviews are returned most recent first.
    """
    rows = owned_client(db, current_user.id, "interviews").list(current_user.id)
    now = datetime.utcnow()
    upcoming = [r for r in rows if r.interview_date > now]
    past = [r for r in reversed(rows) if r.interview_date <= now]

    if when == "upcoming":
        items = upcoming
    elif when == "past":
        items = past
    else:
        items = rows
    result = {"items": [InterviewOut.model_validate(r) for r in items], "total": len(rows)}
    if when == "all":
        result["upcoming"] = len(upcoming)
        result["past"] = len(past)
    return result


@router.post("", response_model=InterviewOut, status_code=status.HTTP_201_CREATED)
async def create_interview(
    payload: InterviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "interviews").insert(current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.patch("/{interview_id}", response_model=InterviewOut)
async def update_interview(
    interview_id: str,
    payload: InterviewUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "interviews").update(interview_id, current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interview(
    interview_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    owned_client(db, current_user.id, "interviews").delete(interview_id, current_user.id)
    await cache.invalidate_user(current_user.id)
