from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    none = "none"
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"

    @property
    def rank(self) -> int:
        """Ordinal position, none=0 .. critical=4."""
        return list(Severity).index(self)


class Category(str, Enum):
    self_harm = "self-harm"
    suicide = "suicide"
    violence = "violence"
    abuse = "abuse"
    severe_distress = "severe-distress"
    substance = "substance"
    eating_disorder = "eating-disorder"


class SubmissionTag(str, Enum):
    exams = "exams"
    deadlines = "deadlines"
    social = "social"
    family = "family"
    future = "future"
    burnout = "burnout"
    isolation = "isolation"
    grades = "grades"
    sleep = "sleep"
    other = "other"


class CrisisKeyword(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str = Field(..., min_length=1, description="Phrase matched case-insensitively.")
    severity: Severity
    message: str = Field(..., description="Response shown when this phrase matches.")
    category: Category

    @field_validator("keyword")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("keyword must contain non-whitespace characters")
        return value


class CrisisAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Severity = Severity.none
    matched_keywords: Tuple[CrisisKeyword, ...] = ()
    response_message: str = ""
    show_resources: bool = False
    assessed_at: datetime


class CrisisResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    contact: str
    description: str
    available_24x7: bool
    website: Optional[str] = None


class TextRequest(BaseModel):
    text: str = Field(..., description="Free-form text to scan; may be empty.")


class KeywordCheckResponse(BaseModel):
    contains_keywords: bool


class SeverityResponse(BaseModel):
    severity: Severity


class SubmissionCreateRequest(BaseModel):
    content: str = Field(..., min_length=1, description="Anonymous message body.")
    mood: int = Field(..., ge=1, le=5, description="1 = very stressed, 5 = doing well.")
    tags: List[SubmissionTag] = Field(default_factory=list)


class Submission(BaseModel):
    id: str
    content: str
    mood: int
    tags: List[SubmissionTag]
    created_at: datetime
    crisis_assessment: Optional[CrisisAssessment] = None


class SubmissionResponse(BaseModel):
    submission: Submission
    resources: List[CrisisResource]


class DeleteResponse(BaseModel):
    deleted: int


class TagCount(BaseModel):
    tag: SubmissionTag
    count: int


class StatsResponse(BaseModel):
    total_submissions: int
    average_mood: Optional[float]
    common_tags: List[TagCount]
    severity_counts: Dict[Severity, int]
