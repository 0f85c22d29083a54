from datetime import datetime
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, ConfigDict, StrictInt, field_validator

from ..scoring.catalog import get_question
from ..scoring.schemas import ScoreResult


class CompanyContext(BaseModel):
    industry: Optional[str] = Field(default=None, max_length=200)
    company_size: Optional[str] = Field(default=None, max_length=100)
    tool_stack: Optional[str] = Field(default=None, max_length=1000)
    role: Optional[str] = Field(default=None, max_length=200)
    notes: Optional[str] = Field(default=None, max_length=4000)


class AssessmentSubmission(BaseModel):
    """Validated questionnaire submission (one 1-5 selection per known question)."""

    responses: Dict[str, StrictInt] = Field(min_length=1)
    company_context: Optional[CompanyContext] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)

    @field_validator("responses")
    @classmethod
    def _check_responses(cls, value: Dict[str, int]) -> Dict[str, int]:
        for key, answer in value.items():
            question = get_question(key)
            if question is None:
                raise ValueError(f"Unknown question key: {key}")
            if not question.scale_min <= answer <= question.scale_max:
                raise ValueError(
                    f"Answer for {key} must be between {question.scale_min} and {question.scale_max}"
                )
        return value


class SubmissionResult(BaseModel):
    assessment_id: str
    scores: ScoreResult


class DimensionBreakdownItem(BaseModel):
    dimension: str
    label: str
    score: float
    stage: str


class GroupBreakdown(BaseModel):
    group: str
    label: str
    dimensions: List[DimensionBreakdownItem]


class RankedDimension(BaseModel):
    dimension: str
    score: float


class AssessmentReport(BaseModel):
    """Read model for the results page: stored scores verbatim, never recomputed."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: Optional[str] = None
    created_at: Optional[datetime] = None
    catalog_version: Optional[str] = None
    overall_score: float = 0.0
    overall_stage: Optional[str] = None
    aaimm_score: float = 0.0
    aaimm_stage: Optional[str] = None
    navigator_score: float = 0.0
    navigator_stage: Optional[str] = None
    dimension_scores: Dict[str, float] = {}
    company_context: Optional[CompanyContext] = None
    groups: List[GroupBreakdown] = []
    bottlenecks: List[RankedDimension] = []
    strengths: List[RankedDimension] = []
    answers: Dict[str, Any] = {}
