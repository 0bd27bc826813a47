"""
Practice API - the public past-question bank and the user's practice test results
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from prep_tracker.app.core.dependencies import get_current_user, get_db
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.entities import (
    PastQuestionOut,
    PracticeTestCreate,
    PracticeTestOut,
    PracticeTestUpdate,
)
from prep_tracker.app.services import filters
from prep_tracker.app.services.crud import owned_client, public_client
from prep_tracker.app.utils import cache

logger = get_logger("api.practice")
router = APIRouter(prefix="/practice", tags=["practice"])


@router.get("/questions")
def list_questions(
    search: str | None = None,
    category: str | None = None,
    difficulty: str | None = None,
    db: Session = Depends(get_db),
) -> dict:
    """
    Past interview questions, readable without signing in.

    - **search**: matches company or question text
    - **category** / **difficulty**: exact, case-insensitive; "all" disables the filter
    """
    rows = public_client(db, "past_questions").list()
    items = filters.apply(
        rows,
        search=search,
        search_fields=("company", "question_text"),
        exact={"category": category, "difficulty": difficulty},
        case_insensitive=("category", "difficulty"),
    )
    return {"items": [PastQuestionOut.model_validate(r) for r in items], "total": len(rows)}


@router.get("/tests")
def list_tests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    rows = owned_client(db, current_user.id, "practice_tests").list(current_user.id)
    return {"items": [PracticeTestOut.model_validate(r) for r in rows], "total": len(rows)}


@router.post("/tests", response_model=PracticeTestOut, status_code=status.HTTP_201_CREATED)
async def record_test(
    payload: PracticeTestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    row = owned_client(db, current_user.id, "practice_tests").insert(current_user.id, payload)
    logger.info(
        "Practice test recorded user_id=%s score=%s/%s",
        current_user.id, row.correct_answers, row.total_questions,
    )
    await cache.invalidate_user(current_user.id)
    return row


@router.patch("/tests/{test_id}", response_model=PracticeTestOut)
async def update_test(
    test_id: str,
    payload: PracticeTestUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Scores are re-checked against the merged row: correct_answers may not exceed total_questions."""
    row = owned_client(db, current_user.id, "practice_tests").update(test_id, current_user.id, payload)
    await cache.invalidate_user(current_user.id)
    return row
