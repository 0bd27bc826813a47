"""
Learning roadmap API - weekly goals ordered by week then priority
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import RoadmapItemCreate, RoadmapItemOut, RoadmapItemUpdate
from prep_tracker.app.services import filters
from prep_tracker.app.services.analytics import round_percent
from prep_tracker.app.services.crud import owned_client
from prep_tracker.app.utils import cache

router = APIRouter(prefix="/roadmap", tags=["roadmap"])


@router.get("")
def list_roadmap(
    status_filter: str | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    rows = owned_client(db, current_user.id, "roadmap_items").list(current_user.id)
    completed = sum(1 for r in rows if r.status == "completed")
    items = filters.apply(rows, exact={"status": status_filter})
    return {
        "items": [RoadmapItemOut.model_validate(r) for r in items],
        "total": len(rows),
        "completed": completed,
        "progress": round_percent(completed, len(rows)),
    }


@router.post("", response_model=RoadmapItemOut, status_code=status.HTTP_201_CREATED)
async def create_roadmap_item(
    payload: RoadmapItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "roadmap_items").insert(current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.patch("/{item_id}", response_model=RoadmapItemOut)
async def update_roadmap_item(
    item_id: str,
    payload: RoadmapItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Partial update; moving status to `completed` stamps completed_at."""
    row = owned_client(db, current_user.id, "roadmap_items").update(item_id, current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_roadmap_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    owned_client(db, current_user.id, "roadmap_items").delete(item_id, current_user.id)
    await cache.invalidate_user(current_user.id)
