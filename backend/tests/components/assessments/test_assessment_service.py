"""Tests for assessment submission, persistence, and report read-back."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from navigator.components.assessments.schemas import AssessmentSubmission, CompanyContext
from navigator.components.assessments.service import (
    build_report,
    get_assessment,
    get_assessment_report,
    list_assessments,
    save_assessment,
    submit_assessment,
)
from navigator.components.scoring.catalog import CATALOG_VERSION
from navigator.models.assessment import Assessment, AssessmentAnswer
from navigator.platform.errors import AssessmentNotFoundError, PersistenceError
from tests.conftest import group_responses, unique_user_id, uniform_responses


class TestSaveAssessment:
    def test_scores_are_stored_with_the_assessment(self, db):
        user_id = unique_user_id()
        result = save_assessment(db, user_id, uniform_responses(4))

        stored = db.query(Assessment).filter(Assessment.id == result.assessment_id).one()
        assert stored.user_id == user_id
        assert stored.title == "AI Navigator Assessment"
        assert stored.catalog_version == CATALOG_VERSION
        assert stored.overall_score == 4.0
        assert stored.aaimm_score == 4.0
        assert stored.navigator_score == 4.0
        assert stored.overall_stage == "Scaling"
        assert stored.aaimm_stage == "Scaling"
        assert stored.navigator_stage == "Scaling"
        assert stored.dimension_scores["governance"] == 4.0

    def test_returns_computed_scores(self, db):
        result = save_assessment(db, unique_user_id(), group_responses(5, 1))
        assert result.scores.overall_score == 3.0
        assert result.scores.overall_stage == "Operational"

    def test_one_answer_row_per_submitted_entry(self, db):
        responses = {**uniform_responses(3), "unknown_key": 5}
        result = save_assessment(db, unique_user_id(), responses)

        rows = db.query(AssessmentAnswer).filter(AssessmentAnswer.assessment_id == result.assessment_id).all()
        assert len(rows) == 25
        by_key = {r.question_key: r for r in rows}
        assert by_key["data_01"].answer_text == "3"
        assert by_key["data_01"].answer_json == {"value": 3}
        assert by_key["unknown_key"].answer_json == {"value": 5}

    def test_unknown_keys_do_not_change_scores(self, db):
        plain = save_assessment(db, unique_user_id(), uniform_responses(2))
        noisy = save_assessment(db, unique_user_id(), {**uniform_responses(2), "extra": 5})
        assert plain.scores == noisy.scores

    def test_malformed_values_are_stored_as_text(self, db):
        result = save_assessment(db, unique_user_id(), {"data_01": float("nan"), "data_02": "four"})
        rows = {
            r.question_key: r
            for r in db.query(AssessmentAnswer).filter(AssessmentAnswer.assessment_id == result.assessment_id)
        }
        assert rows["data_01"].answer_json == {"value": "nan"}
        assert rows["data_02"].answer_text == "four"
        assert result.scores.overall_score == 0.0

    def test_empty_submission_is_stored_with_zero_scores(self, db):
        result = save_assessment(db, unique_user_id(), {})
        stored = db.query(Assessment).filter(Assessment.id == result.assessment_id).one()
        assert stored.overall_score == 0.0
        assert stored.overall_stage == "Emerging"
        assert stored.answers == []

    def test_company_context_is_stored(self, db):
        result = save_assessment(
            db,
            unique_user_id(),
            uniform_responses(3),
            company_context={"industry": "Banking", "company_size": "1000+"},
            title="Q3 readiness",
        )
        stored = db.query(Assessment).filter(Assessment.id == result.assessment_id).one()
        assert stored.title == "Q3 readiness"
        assert stored.company_context == {"industry": "Banking", "company_size": "1000+"}

    def test_database_error_rolls_back_and_raises(self, db):
        with patch.object(db, "commit", side_effect=SQLAlchemyError("disk full")), \
                patch.object(db, "rollback", wraps=db.rollback) as rollback:
            with pytest.raises(PersistenceError):
                save_assessment(db, unique_user_id(), uniform_responses(3))
        rollback.assert_called_once()
        assert db.query(Assessment).count() == 0


class TestSubmission:
    def test_submit_validated_submission(self, db):
        submission = AssessmentSubmission(
            responses=uniform_responses(4),
            company_context=CompanyContext(industry="Retail", role="CIO"),
        )
        result = submit_assessment(db, unique_user_id(), submission)
        stored = db.query(Assessment).filter(Assessment.id == result.assessment_id).one()
        assert stored.company_context == {"industry": "Retail", "role": "CIO"}
        assert result.scores.overall_score == 4.0

    def test_rejects_unknown_question(self):
        with pytest.raises(ValidationError):
            AssessmentSubmission(responses={"reasoning_09": 3})

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_rejects_out_of_scale_answers(self, value):
        with pytest.raises(ValidationError):
            AssessmentSubmission(responses={"reasoning_01": value})

    @pytest.mark.parametrize("value", ["3", 3.5, True, None])
    def test_rejects_non_integer_answers(self, value):
        with pytest.raises(ValidationError):
            AssessmentSubmission(responses={"reasoning_01": value})

    def test_rejects_empty_responses(self):
        with pytest.raises(ValidationError):
            AssessmentSubmission(responses={})


class TestReadBack:
    def test_get_assessment_scoped_to_owner(self, db):
        owner = unique_user_id()
        result = save_assessment(db, owner, uniform_responses(3))
        assert get_assessment(db, result.assessment_id, owner).id == result.assessment_id
        with pytest.raises(AssessmentNotFoundError):
            get_assessment(db, result.assessment_id, unique_user_id())

    def test_missing_assessment(self, db):
        with pytest.raises(AssessmentNotFoundError) as exc:
            get_assessment(db, "does-not-exist", unique_user_id())
        assert exc.value.assessment_id == "does-not-exist"

    def test_list_newest_first(self, db):
        user_id = unique_user_id()
        first = save_assessment(db, user_id, uniform_responses(2))
        second = save_assessment(db, user_id, uniform_responses(4))
        save_assessment(db, unique_user_id(), uniform_responses(5))

        ids = [a.id for a in list_assessments(db, user_id)]
        assert ids == [second.assessment_id, first.assessment_id]
        assert len(list_assessments(db, user_id, limit=1)) == 1

    def test_report_contents(self, db):
        user_id = unique_user_id()
        responses = {**group_responses(4, 2), "data_01": 1, "data_02": 1, "data_03": 1}
        result = save_assessment(db, user_id, responses, company_context={"industry": "Insurance"})

        report = get_assessment_report(db, result.assessment_id, user_id)
        assert report.id == result.assessment_id
        assert report.overall_score == result.scores.overall_score
        assert report.overall_stage == result.scores.overall_stage.value
        assert report.company_context.industry == "Insurance"
        assert report.bottlenecks[0].dimension == "data"
        assert report.bottlenecks[0].score == 1.0
        assert [s.dimension for s in report.strengths] == ["action", "collaboration"]
        assert [g.label for g in report.groups] == ["AAIMM", "Navigator"]
        assert report.answers["data_01"] == 1

    def test_report_uses_stored_scores_verbatim(self, db):
        user_id = unique_user_id()
        result = save_assessment(db, user_id, uniform_responses(4))
        stored = get_assessment(db, result.assessment_id, user_id)
        # Scores computed under an older catalog must not be recomputed on read.
        stored.overall_score = 3.21
        stored.overall_stage = "Operational"
        stored.catalog_version = "2024.4"
        db.commit()

        report = build_report(get_assessment(db, result.assessment_id, user_id))
        assert report.overall_score == 3.21
        assert report.overall_stage == "Operational"
        assert report.catalog_version == "2024.4"
