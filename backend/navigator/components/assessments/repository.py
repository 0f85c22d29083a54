"""Assessment DB helpers, serialization, and query utilities."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from ...models.assessment import Assessment, AssessmentAnswer
from ...platform.errors import AssessmentNotFoundError
from ..scoring.schemas import ScoreResult


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------

def json_safe(value: Any) -> Any:
    """Return ``value`` unchanged when JSON can store it, else its string form."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, dict):
        return {str(k): json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [json_safe(v) for v in value]
    return str(value)


def answer_rows(assessment_id: str, responses: Mapping[str, Any]) -> List[AssessmentAnswer]:
    """One row per submitted entry, known to the catalog or not."""
    return [
        AssessmentAnswer(
            assessment_id=assessment_id,
            question_key=str(question_key),
            answer_text=str(value),
            answer_json={"value": json_safe(value)},
        )
        for question_key, value in responses.items()
    ]


def apply_scores(assessment: Assessment, scores: ScoreResult) -> None:
    assessment.catalog_version = scores.catalog_version
    assessment.aaimm_score = scores.aaimm_score
    assessment.navigator_score = scores.navigator_score
    assessment.overall_score = scores.overall_score
    assessment.aaimm_stage = scores.aaimm_stage.value
    assessment.navigator_stage = scores.navigator_stage.value
    assessment.overall_stage = scores.overall_stage.value
    assessment.dimension_scores = dict(scores.dimension_scores)


def stored_answers(assessment: Assessment) -> Dict[str, Any]:
    """Raw answers as submitted, keyed by question key."""
    answers: Dict[str, Any] = {}
    for row in assessment.answers or []:
        payload = row.answer_json if isinstance(row.answer_json, dict) else {}
        answers[row.question_key] = payload.get("value", row.answer_text)
    return answers


# ---------------------------------------------------------------------------
# Query helpers
# ---------------------------------------------------------------------------

def get_owned_assessment(assessment_id: str, user_id: str, db: Session) -> Assessment:
    """Get an assessment owned by ``user_id``, raising if missing or owned by someone else."""
    assessment = db.query(Assessment).filter(
        Assessment.id == assessment_id,
        Assessment.user_id == user_id,
    ).first()
    if not assessment:
        raise AssessmentNotFoundError(assessment_id)
    return assessment


def list_user_assessments(user_id: str, db: Session, limit: Optional[int] = None) -> List[Assessment]:
    query = (
        db.query(Assessment)
        .filter(Assessment.user_id == user_id)
        .order_by(Assessment.created_at.desc(), Assessment.id.desc())
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()
