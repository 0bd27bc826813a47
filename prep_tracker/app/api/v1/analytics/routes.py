"""
Analytics API - monthly applications, resource completion by category,
interview outcomes and four weeks of progress
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

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary")
async def get_analytics_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """
    Chart data for the analytics page. `resources_by_category` and
    `interview_outcomes` have the same shape the AI suggestions endpoint accepts.
    """
    user_id = current_user.id
    cache_key = cache.analytics_key(user_id)
    cached = await cache.get(cache_key)
    if cached is not None:
        return cached

    def rows(entity: str) -> list:
        return owned_client(db, user_id, entity).list(user_id)

    result = analytics.analytics_summary(
        applications=rows("applications"),
        resources=rows("resources"),
        interviews=rows("interviews"),
        roadmap_items=rows("roadmap_items"),
        practice_tests=rows("practice_tests"),
        today=datetime.utcnow().date(),
    )
    await cache.set(cache_key, result, ttl=settings.analytics_summary_cache_ttl)
    return result
