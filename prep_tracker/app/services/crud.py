"""
CRUD client - owner-scoped list/insert/update/delete for every entity table.

Each table is described by an EntityConfig: the ORM model, the pydantic
schemas that type its fields (required/optional/defaults), its default
ordering, and an optional write hook. OwnedCrudClient applies the row-level
rule user_id == caller for every operation; a row that exists but belongs to
someone else is reported exactly like a row that does not exist.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import case
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from prep_tracker.app.core.errors import AuthError, NotFoundOrForbidden, ValidationError
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.models import (
    Application,
    Contact,
    Interview,
    PastQuestion,
    PracticeTest,
    Resource,
    RoadmapItem,
)
from prep_tracker.app.schemas import entities as s

logger = get_logger("services.crud")

# (column name, descending)
OrderSpec = Sequence[tuple[str, bool]]
WriteHook = Callable[[Session, Any, dict, bool], None]

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}


@dataclass(frozen=True)
class EntityConfig:
    name: str
    label: str
    model: type
    create_schema: Optional[type[BaseModel]]
    update_schema: Optional[type[BaseModel]]
    default_order: Callable[[], list]
    deletable: bool = True
    # Called before the row is written with (db, row, changes, is_insert); row still holds old values
    on_write: Optional[WriteHook] = None


# --- write hooks ---
def _stamp_resource_completion(db: Session, row: Resource, changes: dict, is_insert: bool) -> None:
    if "is_completed" not in changes:
        return
    if changes["is_completed"]:
        if is_insert or not row.is_completed:
            row.completed_at = datetime.utcnow()
    else:
        row.completed_at = None


def _stamp_roadmap_completion(db: Session, row: RoadmapItem, changes: dict, is_insert: bool) -> None:
    if "status" not in changes:
        return
    if changes["status"] == "completed":
        if is_insert or row.status != "completed":
            row.completed_at = datetime.utcnow()
    else:
        row.completed_at = None


def _check_interview_application(db: Session, row: Interview, changes: dict, is_insert: bool) -> None:
    application_id = changes.get("application_id")
    if not application_id:
        return
    owner_id = row.user_id
    exists = (
        db.query(Application.id)
        .filter(Application.id == application_id, Application.user_id == owner_id)
        .first()
    )
    if not exists:
        raise ValidationError("application_id does not match any of your applications")


def _check_practice_score(db: Session, row: PracticeTest, changes: dict, is_insert: bool) -> None:
    total = changes.get("total_questions", row.total_questions) or 0
    correct = changes.get("correct_answers", row.correct_answers) or 0
    if correct > total:
        raise ValidationError("correct_answers cannot exceed total_questions")


# --- registry ---
ENTITIES: dict[str, EntityConfig] = {
    "resources": EntityConfig(
        name="resources",
        label="Resource",
        model=Resource,
        create_schema=s.ResourceCreate,
        update_schema=s.ResourceUpdate,
        default_order=lambda: [Resource.created_at.desc()],
        on_write=_stamp_resource_completion,
    ),
    "roadmap_items": EntityConfig(
        name="roadmap_items",
        label="Roadmap item",
        model=RoadmapItem,
        create_schema=s.RoadmapItemCreate,
        update_schema=s.RoadmapItemUpdate,
        default_order=lambda: [
            RoadmapItem.week_number.is_(None),
            RoadmapItem.week_number.asc(),
            case(PRIORITY_RANK, value=RoadmapItem.priority, else_=0).desc(),
        ],
        on_write=_stamp_roadmap_completion,
    ),
    "applications": EntityConfig(
        name="applications",
        label="Application",
        model=Application,
        create_schema=s.ApplicationCreate,
        update_schema=s.ApplicationUpdate,
        default_order=lambda: [Application.applied_date.desc(), Application.created_at.desc()],
    ),
    "interviews": EntityConfig(
        name="interviews",
        label="Interview",
        model=Interview,
        create_schema=s.InterviewCreate,
        update_schema=s.InterviewUpdate,
        default_order=lambda: [Interview.interview_date.asc()],
        on_write=_check_interview_application,
    ),
    "contacts": EntityConfig(
        name="contacts",
        label="Contact",
        model=Contact,
        create_schema=s.ContactCreate,
        update_schema=s.ContactUpdate,
        default_order=lambda: [Contact.company.asc(), Contact.name.asc()],
    ),
    "practice_tests": EntityConfig(
        name="practice_tests",
        label="Practice test",
        model=PracticeTest,
        create_schema=s.PracticeTestCreate,
        update_schema=s.PracticeTestUpdate,
        default_order=lambda: [PracticeTest.created_at.desc()],
        deletable=False,
        on_write=_check_practice_score,
    ),
    "past_questions": EntityConfig(
        name="past_questions",
        label="Question",
        model=PastQuestion,
        create_schema=None,
        update_schema=None,
        default_order=lambda: [PastQuestion.company.asc()],
        deletable=False,
    ),
}


def _first_error(exc: SchemaValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    err = errors[0]
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def _validate(schema: type[BaseModel], fields: BaseModel | Mapping[str, Any], partial: bool) -> dict:
    """Coerce caller input through the entity schema. Returns only the fields to write."""
    if isinstance(fields, schema):
        return fields.model_dump(exclude_unset=partial)
    raw = fields.model_dump(exclude_unset=True) if isinstance(fields, BaseModel) else dict(fields)
    try:
        model = schema.model_validate(raw)
    except SchemaValidationError as e:
        raise ValidationError(_first_error(e))
    return model.model_dump(exclude_unset=partial)


class _BaseClient:
    def __init__(self, db: Session, config: EntityConfig):
        self.db = db
        self.config = config
        self.model = config.model

    def _column(self, name: str):
        if name not in self.model.__table__.columns:
            raise ValidationError(f"Unknown field for {self.config.name}: {name}")
        return getattr(self.model, name)

    def _ordering(self, order_by: OrderSpec | None) -> list:
        if not order_by:
            return self.config.default_order()
        clauses = []
        for name, descending in order_by:
            col = self._column(name)
            clauses.append(col.desc() if descending else col.asc())
        return clauses

    def _select(self, query, order_by: OrderSpec | None, filters: Mapping[str, Any] | None, where: Iterable | None):
        for name, value in (filters or {}).items():
            query = query.filter(self._column(name) == value)
        for criterion in where or ():
            query = query.filter(criterion)
        return query.order_by(*self._ordering(order_by)).all()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Integrity error on %s: %s", self.config.name, e.orig)
            raise ValidationError(f"{self.config.label} violates a data constraint")
        except SQLAlchemyError:
            self.db.rollback()
            raise


class PublicCrudClient(_BaseClient):
    """Read-only access to tables that are not owned by a user (the question bank)."""

    def list(
        self,
        order_by: OrderSpec | None = None,
        filters: Mapping[str, Any] | None = None,
        where: Iterable | None = None,
    ) -> list:
        return self._select(self.db.query(self.model), order_by, filters, where)


class OwnedCrudClient(_BaseClient):
    """Owner-scoped CRUD for one entity, bound to the authenticated caller."""

    def __init__(self, db: Session, caller_id: str, config: EntityConfig):
        super().__init__(db, config)
        self.caller_id = caller_id

    def _check_owner(self, owner_id: str) -> None:
        if not owner_id or owner_id != self.caller_id:
            raise AuthError("Cannot act on rows owned by another user")

    def _owned(self, id: str, owner_id: str):
        return self.db.query(self.model).filter(self.model.id == id, self.model.user_id == owner_id)

    def list(
        self,
        owner_id: str,
        order_by: OrderSpec | None = None,
        filters: Mapping[str, Any] | None = None,
        where: Iterable | None = None,
    ) -> list:
        """All rows owned by owner_id. An empty list is a normal result."""
        self._check_owner(owner_id)
        query = self.db.query(self.model).filter(self.model.user_id == owner_id)
        return self._select(query, order_by, filters, where)

    def get(self, id: str, owner_id: str):
        self._check_owner(owner_id)
        row = self._owned(id, owner_id).first()
        if row is None:
            raise NotFoundOrForbidden(self.config.label)
        return row

    def insert(self, owner_id: str, fields: BaseModel | Mapping[str, Any]):
        """Insert a row. user_id is always the caller, never taken from fields."""
        self._check_owner(owner_id)
        if self.config.create_schema is None:
            raise ValidationError(f"{self.config.label} cannot be created")
        data = _validate(self.config.create_schema, fields, partial=False)
        data.pop("user_id", None)
        row = self.model(**data)
        row.user_id = self.caller_id
        if self.config.on_write:
            self.config.on_write(self.db, row, data, True)
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        logger.info("Inserted %s id=%s user_id=%s", self.config.name, row.id, self.caller_id)
        return row

    def update(self, id: str, owner_id: str, partial_fields: BaseModel | Mapping[str, Any]):
        """Apply only the provided fields. updated_at is refreshed."""
        if self.config.update_schema is None:
            raise ValidationError(f"{self.config.label} cannot be updated")
        data = _validate(self.config.update_schema, partial_fields, partial=True)
        data.pop("user_id", None)
        row = self.get(id, owner_id)
        columns = self.model.__table__.columns
        for key, value in data.items():
            if value is None and not columns[key].nullable:
                raise ValidationError(f"{key} cannot be null")
        if self.config.on_write:
            self.config.on_write(self.db, row, data, False)
        for key, value in data.items():
            setattr(row, key, value)
        if "updated_at" in columns:
            row.updated_at = datetime.utcnow()
        self._commit()
        self.db.refresh(row)
        logger.info("Updated %s id=%s user_id=%s fields=%s", self.config.name, id, owner_id, sorted(data))
        return row

    def delete(self, id: str, owner_id: str) -> None:
        """
        Delete an owned row. A missing (or foreign) id raises NotFoundOrForbidden and
        leaves the store untouched, so repeating a delete is a harmless no-op.
        """
        self._check_owner(owner_id)
        if not self.config.deletable:
            raise ValidationError(f"{self.config.label} cannot be deleted")
        deleted = self._owned(id, owner_id).delete(synchronize_session=False)
        self._commit()
        if not deleted:
            raise NotFoundOrForbidden(self.config.label)
        # ON DELETE rules (interviews.application_id -> NULL) ran in the store
        self.db.expire_all()
        logger.info("Deleted %s id=%s user_id=%s", self.config.name, id, owner_id)


def owned_client(db: Session, caller_id: str, entity: str) -> OwnedCrudClient:
    return OwnedCrudClient(db, caller_id, ENTITIES[entity])


def public_client(db: Session, entity: str) -> PublicCrudClient:
    return PublicCrudClient(db, ENTITIES[entity])
