"""
Study resources API - list with category filter and search, add, edit, toggle completion, delete
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import ResourceCreate, ResourceOut, ResourceUpdate
from prep_tracker.app.services import filters
from prep_tracker.app.services.crud import owned_client
from prep_tracker.app.utils import cache

logger = get_logger("api.resources")
router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("")
def list_resources(
    category: str | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """All of the user's resources, newest first. `category` is exact-match, `search` matches title/notes."""
    rows = owned_client(db, current_user.id, "resources").list(current_user.id)
    items = filters.apply(
        rows, search=search, search_fields=("title", "notes"), exact={"category": category}
    )
    return {
        "items": [ResourceOut.model_validate(r) for r in items],
        "total": len(rows),
        "completed": sum(1 for r in rows if r.is_completed),
    }


@router.post("", response_model=ResourceOut, status_code=status.HTTP_201_CREATED)
async def create_resource(
    payload: ResourceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "resources").insert(current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.patch("/{resource_id}", response_model=ResourceOut)
async def update_resource(
    resource_id: str,
    payload: ResourceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "resources").update(resource_id, current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.post("/{resource_id}/toggle", response_model=ResourceOut)
async def toggle_resource(
    resource_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Flip is_completed."""
    client = owned_client(db, current_user.id, "resources")
    current = client.get(resource_id, current_user.id)
    row = client.update(resource_id, current_user.id, {"is_completed": not current.is_completed})
    await cache.invalidate_user(current_user.id)
    return row


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    owned_client(db, current_user.id, "resources").delete(resource_id, current_user.id)
    await cache.invalidate_user(current_user.id)
