"""
Networking contacts API
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import ContactCreate, ContactOut, ContactUpdate
from prep_tracker.app.services import filters
from prep_tracker.app.services.crud import owned_client
from prep_tracker.app.utils import cache

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("")
def list_contacts(
    search: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    rows = owned_client(db, current_user.id, "contacts").list(current_user.id)
    items = filters.apply(rows, search=search, search_fields=("name", "company", "role"))
    return {"items": [ContactOut.model_validate(r) for r in items], "total": len(rows)}


@router.post("", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
async def create_contact(
    payload: ContactCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "contacts").insert(current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.patch("/{contact_id}", response_model=ContactOut)
async def update_contact(
    contact_id: str,
    payload: ContactUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "contacts").update(contact_id, current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    owned_client(db, current_user.id, "contacts").delete(contact_id, current_user.id)
    await cache.invalidate_user(current_user.id)
