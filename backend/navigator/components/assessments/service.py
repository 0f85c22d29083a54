"""Assessment submission and read-back.

Scores are computed once, at submission time, and stored next to the raw
answers. Reads always return the stored scores; they are never recomputed
when the catalog changes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models.assessment import Assessment
from ...platform.config import settings
from ...platform.errors import PersistenceError
from ...platform.log_context import bound_assessment_id
from ..scoring.analytics import bottleneck_dimensions, group_breakdown, strength_dimensions
from ..scoring.service import calculate_scores
from .repository import (
    answer_rows,
    apply_scores,
    get_owned_assessment,
    list_user_assessments,
    stored_answers,
)
from .schemas import AssessmentReport, AssessmentSubmission, CompanyContext, SubmissionResult

logger = logging.getLogger(__name__)


def _context_payload(company_context: CompanyContext | Mapping[str, Any] | None) -> Optional[dict]:
    if company_context is None:
        return None
    if isinstance(company_context, CompanyContext):
        return company_context.model_dump(exclude_none=True)
    return CompanyContext.model_validate(dict(company_context)).model_dump(exclude_none=True)


def save_assessment(
    db: Session,
    user_id: str,
    responses: Mapping[str, Any],
    company_context: CompanyContext | Mapping[str, Any] | None = None,
    title: Optional[str] = None,
) -> SubmissionResult:
    """Store a submission with its raw answers and computed scores in one transaction."""
    responses = dict(responses) if isinstance(responses, Mapping) else {}
    context = _context_payload(company_context)

    assessment = Assessment(
        user_id=user_id,
        title=title or settings.ASSESSMENT_TITLE,
        company_context=context,
    )
    try:
        db.add(assessment)
        db.flush()
        with bound_assessment_id(assessment.id):
            db.add_all(answer_rows(assessment.id, responses))
            scores = calculate_scores(responses)
            apply_scores(assessment, scores)
            db.commit()
            logger.info(
                "Assessment saved user=%s answers=%d overall=%.2f stage=%s",
                user_id,
                len(responses),
                scores.overall_score,
                scores.overall_stage.value,
            )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to save assessment for user=%s", user_id)
        raise PersistenceError(f"Failed to save assessment: {exc}") from exc

    return SubmissionResult(assessment_id=assessment.id, scores=scores)


def submit_assessment(db: Session, user_id: str, submission: AssessmentSubmission) -> SubmissionResult:
    """Persist a validated submission."""
    return save_assessment(
        db,
        user_id,
        submission.responses,
        company_context=submission.company_context,
        title=submission.title,
    )


def get_assessment(db: Session, assessment_id: str, user_id: str) -> Assessment:
    return get_owned_assessment(assessment_id, user_id, db)


def list_assessments(db: Session, user_id: str, limit: Optional[int] = None) -> List[Assessment]:
    return list_user_assessments(user_id, db, limit=limit)


def build_report(assessment: Assessment) -> AssessmentReport:
    """Read model for display: stored scores plus group breakdown, bottlenecks and strengths."""
    dimension_scores = {
        str(key): float(value)
        for key, value in (assessment.dimension_scores or {}).items()
        if isinstance(value, (int, float)) and not isinstance(value, bool)
    }
    return AssessmentReport(
        id=assessment.id,
        title=assessment.title,
        created_at=assessment.created_at,
        catalog_version=assessment.catalog_version,
        overall_score=assessment.overall_score or 0.0,
        overall_stage=assessment.overall_stage,
        aaimm_score=assessment.aaimm_score or 0.0,
        aaimm_stage=assessment.aaimm_stage,
        navigator_score=assessment.navigator_score or 0.0,
        navigator_stage=assessment.navigator_stage,
        dimension_scores=dimension_scores,
        company_context=assessment.company_context,
        groups=group_breakdown(dimension_scores),
        bottlenecks=[{"dimension": d, "score": s} for d, s in bottleneck_dimensions(dimension_scores)],
        strengths=[{"dimension": d, "score": s} for d, s in strength_dimensions(dimension_scores)],
        answers=stored_answers(assessment),
    )


def get_assessment_report(db: Session, assessment_id: str, user_id: str) -> AssessmentReport:
    return build_report(get_assessment(db, assessment_id, user_id))
