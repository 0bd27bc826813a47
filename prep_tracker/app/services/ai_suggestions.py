"""AI preparation suggestions: summarize the user's stats and relay them to a chat-completions backend."""
from openai import APIError, OpenAI

from prep_tracker.app.core.config import settings
from prep_tracker.app.core.errors import ConfigurationError, UpstreamError
from prep_tracker.app.core.logging_config import get_logger
from prep_tracker.app.schemas.ai import SuggestionRequest

logger = get_logger("services.ai_suggestions")

SYSTEM_PROMPT = """You are an expert career coach and interview preparation advisor. Analyze the user's interview preparation data and provide 3-5 specific, actionable suggestions to improve their chances of success. Focus on:
1. Identifying weak areas based on resource completion rates
2. Interview performance patterns
3. Application strategy
4. Recommended topics to study
Be concise, encouraging, and specific. Use bullet points."""

USER_PROMPT_SUFFIX = "Please provide personalized suggestions for my interview preparation based on this data."

FALLBACK_SUGGESTIONS = "Unable to generate suggestions at this time."


def build_context(payload: SuggestionRequest) -> str:
    """Fixed-structure summary of the user's data. Empty sections are left out."""
    context = "Based on the user's interview preparation data:\n\n"

    if payload.resources_by_category:
        context += "**Study Resources:**\n"
        for r in payload.resources_by_category:
            percentage = int(r.completed / r.total * 100 + 0.5) if r.total > 0 else 0
            context += f"- {r.category}: {r.completed}/{r.total} completed ({percentage}%)\n"
        context += "\n"

    if payload.interview_outcomes:
        context += "**Interview Outcomes:**\n"
        for o in payload.interview_outcomes:
            context += f"- {o.outcome}: {o.count} interviews\n"
        context += "\n"

    if payload.application_count:
        context += f"**Total Applications:** {payload.application_count}\n\n"

    return context


def generate_suggestions(payload: SuggestionRequest) -> str:
    """
    Ask the completion backend for suggestions and return its text verbatim.

    Raises ConfigurationError when no API key is configured and UpstreamError
    when the backend call fails. Neither is retried.
    """
    if not settings.ai_api_key:
        logger.error("AI suggestions requested but AI_API_KEY is not configured")
        raise ConfigurationError("AI_API_KEY not configured")

    client = OpenAI(
        api_key=settings.ai_api_key,
        base_url=settings.ai_base_url,
        timeout=settings.ai_request_timeout,
        max_retries=0,
    )
    context = build_context(payload)
    try:
        resp = client.chat.completions.create(
            model=settings.ai_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": context + USER_PROMPT_SUFFIX},
            ],
            max_tokens=settings.ai_max_tokens,
            temperature=settings.ai_temperature,
        )
    except APIError as e:
        logger.warning("AI backend error: %s", e)
        raise UpstreamError("Failed to get AI response")

    content = resp.choices[0].message.content if resp.choices else None
    if not content or not content.strip():
        return FALLBACK_SUGGESTIONS
    return content
