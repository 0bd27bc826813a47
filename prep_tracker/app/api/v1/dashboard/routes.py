"""
Dashboard API - headline counts, applications by status and this week's activity
"""
from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from prep_tracker.app.core.config import settings
from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.models.user import User
from prep_tracker.app.services import analytics
from prep_tracker.app.services.crud import owned_client
from prep_tracker.app.utils import cache

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _build_dashboard_summary(db: Session, user_id: str) -> dict:
    """Load every owned table once and aggregate in memory."""
    def rows(entity: str) -> list:
        return owned_client(db, user_id, entity).list(user_id)

    return analytics.dashboard_summary(
        resources=rows("resources"),
        applications=rows("applications"),
        interviews=rows("interviews"),
        contacts=rows("contacts"),
        roadmap_items=rows("roadmap_items"),
        practice_tests=rows("practice_tests"),
        now=datetime.utcnow(),
    )


@router.get("/summary")
async def get_dashboard_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """
    Totals for resources, applications, upcoming interviews and contacts, roadmap
    progress percentage, applications grouped by status and completions per weekday.
    Cached per user (ttl from config) until the user's next write.
    """
    cache_key = cache.dashboard_key(current_user.id)
    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    result = _build_dashboard_summary(db, current_user.id)
    await cache.set(cache_key, result, ttl=settings.dashboard_summary_cache_ttl)
    return result
