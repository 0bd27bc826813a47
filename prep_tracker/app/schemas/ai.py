"""
AI suggestion relay payloads. Every field is optional: missing or null input
is treated as empty rather than rejected.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryProgress(BaseModel):
    category: Optional[str] = "Other"
    total: Optional[int] = 0
    completed: Optional[int] = 0

    @field_validator("category", mode="before")
    @classmethod
    def _none_as_other(cls, v):
        return "Other" if v is None else v

    @field_validator("total", "completed", mode="before")
    @classmethod
    def _none_as_zero(cls, v):
        return v or 0


class OutcomeCount(BaseModel):
    outcome: Optional[str] = "Pending"
    count: Optional[int] = 0

    @field_validator("outcome", mode="before")
    @classmethod
    def _none_as_pending(cls, v):
        return "Pending" if v is None else v

    @field_validator("count", mode="before")
    @classmethod
    def _none_as_zero(cls, v):
        return v or 0


class SuggestionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    resources_by_category: List[CategoryProgress] = Field(default_factory=list, alias="resourcesByCategory")
    interview_outcomes: List[OutcomeCount] = Field(default_factory=list, alias="interviewOutcomes")
    application_count: int = Field(default=0, alias="applicationCount")

    @field_validator("resources_by_category", "interview_outcomes", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return v or []

    @field_validator("application_count", mode="before")
    @classmethod
    def _none_as_zero(cls, v):
        return v or 0


class SuggestionResponse(BaseModel):
    suggestions: str


class ErrorResponse(BaseModel):
    error: str