"""
AI suggestions relay - forwards a summary of the user's stats to the completion backend
"""
from fastapi import APIRouter, Depends, Response

from prep_tracker.app.core.dependencies import get_current_user
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.models.user import User
from prep_tracker.app.schemas.ai import ErrorResponse, SuggestionRequest, SuggestionResponse
from prep_tracker.app.services.ai_suggestions import generate_suggestions

logger = get_logger("api.ai_suggestions")
router = APIRouter(prefix="/ai-suggestions", tags=["ai"])


@router.options("")
def preflight() -> Response:
    return Response(status_code=200)


@router.post(
    "",
    response_model=SuggestionResponse,
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def create_suggestions(
    payload: SuggestionRequest,
    current_user: User = Depends(get_current_user),
):
    """
    Body: `{resourcesByCategory: [{category, total, completed}], interviewOutcomes:
    [{outcome, count}], applicationCount}`. Every field is optional.
    """
    logger.info(
        "AI suggestions requested user_id=%s categories=%d outcomes=%d applications=%d",
        current_user.id,
        len(payload.resources_by_category),
        len(payload.interview_outcomes),
        payload.application_count,
    )
    return SuggestionResponse(suggestions=generate_suggestions(payload))
