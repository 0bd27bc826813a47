"""
Per-entity Pydantic schemas.

Each owned table has a Create schema (required fields, optional fields and
their defaults), an Update schema (every field optional, only sent fields are
applied) and an Out schema for responses. user_id is never accepted from the
request body; unknown keys are ignored.
"""
from datetime import date, datetime, timezone
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator, model_validator

ResourceCategory = Literal[
    "DSA", "System Design", "CS Fundamentals", "Behavioral", "Language Specific", "Other"
]
ResourceType = Literal["article", "video", "course", "book", "documentation"]
RoadmapStatus = Literal["pending", "in_progress", "completed"]
RoadmapPriority = Literal["low", "medium", "high"]
ApplicationStatus = Literal["Applied", "Shortlisted", "Interview", "Rejected", "Selected", "Withdrawn"]
InterviewType = Literal["Phone Screen", "Technical", "System Design", "Behavioral", "HR", "Final Round", "Other"]
InterviewOutcome = Literal["Pending", "Passed", "Failed", "On Hold"]

RESOURCE_CATEGORIES: tuple[str, ...] = ResourceCategory.__args__
APPLICATION_STATUSES: tuple[str, ...] = ApplicationStatus.__args__
INTERVIEW_OUTCOMES: tuple[str, ...] = InterviewOutcome.__args__
QUESTION_DIFFICULTIES = ("Easy", "Medium", "Hard")


def _to_naive_utc(value: datetime | None) -> datetime | None:
    """Interview times are stored as naive UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


UtcDateTime = Annotated[datetime, AfterValidator(_to_naive_utc)]


class _Input(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class _Output(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime


# --- Resources ---
class ResourceCreate(_Input):
    title: str = Field(min_length=1)
    url: Optional[str] = None
    category: ResourceCategory = "DSA"
    resource_type: ResourceType = "article"
    notes: Optional[str] = None
    is_completed: bool = False


class ResourceUpdate(_Input):
    title: Optional[str] = Field(default=None, min_length=1)
    url: Optional[str] = None
    category: Optional[ResourceCategory] = None
    resource_type: Optional[ResourceType] = None
    notes: Optional[str] = None
    is_completed: Optional[bool] = None


class ResourceOut(_Output):
    title: str
    url: Optional[str] = None
    category: str
    resource_type: str
    notes: Optional[str] = None
    is_completed: bool
    completed_at: Optional[datetime] = None
    updated_at: datetime


# --- Roadmap ---
class RoadmapItemCreate(_Input):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    target_date: Optional[date] = None
    status: RoadmapStatus = "pending"
    priority: RoadmapPriority = "medium"
    week_number: Optional[int] = Field(default=None, ge=1)


class RoadmapItemUpdate(_Input):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    target_date: Optional[date] = None
    status: Optional[RoadmapStatus] = None
    priority: Optional[RoadmapPriority] = None
    week_number: Optional[int] = Field(default=None, ge=1)


class RoadmapItemOut(_Output):
    title: str
    description: Optional[str] = None
    target_date: Optional[date] = None
    status: str
    priority: str
    week_number: Optional[int] = None
    completed_at: Optional[datetime] = None
    updated_at: datetime


# --- Applications ---
class ApplicationCreate(_Input):
    company: str = Field(min_length=1)
    role: str = Field(min_length=1)
    status: ApplicationStatus = "Applied"
    applied_date: date = Field(default_factory=date.today)
    job_url: Optional[str] = None
    salary_range: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class ApplicationUpdate(_Input):
    company: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = Field(default=None, min_length=1)
    status: Optional[ApplicationStatus] = None
    applied_date: Optional[date] = None
    job_url: Optional[str] = None
    salary_range: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class ApplicationOut(_Output):
    company: str
    role: str
    status: str
    applied_date: date
    job_url: Optional[str] = None
    salary_range: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    updated_at: datetime


# --- Interviews ---
class InterviewCreate(_Input):
    company: str = Field(min_length=1)
    role: str = Field(min_length=1)
    interview_date: UtcDateTime
    interview_type: InterviewType = "Technical"
    outcome: Optional[InterviewOutcome] = None
    notes: Optional[str] = None
    feedback: Optional[str] = None
    application_id: Optional[str] = None


class InterviewUpdate(_Input):
    company: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = Field(default=None, min_length=1)
    interview_date: Optional[UtcDateTime] = None
    interview_type: Optional[InterviewType] = None
    outcome: Optional[InterviewOutcome] = None
    notes: Optional[str] = None
    feedback: Optional[str] = None
    application_id: Optional[str] = None


class InterviewOut(_Output):
    company: str
    role: str
    interview_date: datetime
    interview_type: str
    outcome: Optional[str] = None
    notes: Optional[str] = None
    feedback: Optional[str] = None
    application_id: Optional[str] = None
    updated_at: datetime


# --- Contacts ---
class ContactCreate(_Input):
    name: str = Field(min_length=1)
    company: str = Field(min_length=1)
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin_url: Optional[str] = None
    notes: Optional[str] = None


class ContactUpdate(_Input):
    name: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin_url: Optional[str] = None
    notes: Optional[str] = None


class ContactOut(_Output):
    name: str
    company: str
    role: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin_url: Optional[str] = None
    notes: Optional[str] = None
    updated_at: datetime


# --- Practice tests ---
class PracticeTestCreate(_Input):
    title: str = Field(min_length=1)
    category: str = "DSA"
    total_questions: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    time_taken_seconds: Optional[int] = Field(default=None, ge=0)
    completed_at: Optional[UtcDateTime] = None

    @model_validator(mode="after")
    def _check_score(self):
        if self.correct_answers > self.total_questions:
            raise ValueError("correct_answers cannot exceed total_questions")
        return self


class PracticeTestUpdate(_Input):
    title: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    total_questions: Optional[int] = Field(default=None, ge=0)
    correct_answers: Optional[int] = Field(default=None, ge=0)
    time_taken_seconds: Optional[int] = Field(default=None, ge=0)
    completed_at: Optional[UtcDateTime] = None


class PracticeTestOut(_Output):
    title: str
    category: str
    total_questions: int
    correct_answers: int
    time_taken_seconds: Optional[int] = None
    completed_at: Optional[datetime] = None
    score_percent: Optional[float] = None


# --- Past questions (read-only) ---
class PastQuestionCreate(BaseModel):
    """Seed-file row for the public question bank."""
    company: str = Field(min_length=1)
    role: Optional[str] = None
    question_text: str = Field(min_length=1)
    answer: Optional[str] = None
    category: str = "Technical"
    difficulty: str = "Medium"
    year: Optional[int] = None

    @field_validator("difficulty")
    @classmethod
    def _canonical_difficulty(cls, v: str) -> str:
        for level in QUESTION_DIFFICULTIES:
            if v.strip().lower() == level.lower():
                return level
        raise ValueError(f"difficulty must be one of {', '.join(QUESTION_DIFFICULTIES)}")


class PastQuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    company: str
    role: Optional[str] = None
    question_text: str
    answer: Optional[str] = None
    category: str
    difficulty: str
    year: Optional[int] = None


# --- Profile ---
class ProfileUpdate(_Input):
    full_name: Optional[str] = Field(default=None, min_length=2)
    avatar_url: Optional[str] = None


class ProfileOut(_Output):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    updated_at: datetime
