"""
Schedule API - calendar view of interviews for one month
"""
from datetime import date, datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.core.errors import ValidationError
from prep_tracker.app.models.interview import Interview
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import InterviewOut
from prep_tracker.app.services.crud import owned_client

router = APIRouter(prefix="/schedule", tags=["schedule"])


def _month_bounds(month: str | None) -> tuple[datetime, datetime]:
    """[first day of month, first day of next month) for 'YYYY-MM'; defaults to the current month."""
    if month:
        try:
            start = datetime.strptime(month, "%Y-%m")
        except ValueError:
            raise ValidationError("month must be formatted YYYY-MM")
    else:
        today = date.today()
        start = datetime(today.year, today.month, 1)
    if start.month == 12:
        end = datetime(start.year + 1, 1, 1)
    else:
        end = datetime(start.year, start.month + 1, 1)
    return start, end


@router.get("")
def get_schedule(
    month: str | None = None,
    day: date | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """
    Interviews in the requested month (ascending), the distinct dates that have
    at least one interview, and the interviews of the selected day.
    """
    start, end = _month_bounds(month)
    rows = owned_client(db, current_user.id, "interviews").list(
        current_user.id,
        where=[Interview.interview_date >= start, Interview.interview_date < end],
    )
    dates = sorted({r.interview_date.date() for r in rows})
    selected = [r for r in rows if day is not None and r.interview_date.date() == day]
    return {
        "month": start.strftime("%Y-%m"),
        "items": [InterviewOut.model_validate(r) for r in rows],
        "total": len(rows),
        "dates": [d.isoformat() for d in dates],
        "day": day.isoformat() if day else None,
        "day_items": [InterviewOut.model_validate(r) for r in selected],
    }
