"""
Job applications API
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import ApplicationCreate, ApplicationOut, ApplicationUpdate
from prep_tracker.app.services import filters
from prep_tracker.app.services.crud import owned_client
from prep_tracker.app.utils import cache

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("")
def list_applications(
    status_filter: str | None = Query(None, alias="status"),
    search: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Most recently applied first. `search` matches company and role."""
    rows = owned_client(db, current_user.id, "applications").list(current_user.id)
    items = filters.apply(
        rows, search=search, search_fields=("company", "role"), exact={"status": status_filter}
    )
    return {"items": [ApplicationOut.model_validate(r) for r in items], "total": len(rows)}


@router.post("", response_model=ApplicationOut, status_code=status.HTTP_201_CREATED)
async def create_application(
    payload: ApplicationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "applications").insert(current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.patch("/{application_id}", response_model=ApplicationOut)
async def update_application(
    application_id: str,
    payload: ApplicationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "applications").update(
        application_id, current_user.id, payload
    )
    await cache.invalidate_user(current_user.id)
    return row


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Interviews linked to this application are kept with application_id cleared."""
    owned_client(db, current_user.id, "applications").delete(application_id, current_user.id)
    await cache.invalidate_user(current_user.id)
