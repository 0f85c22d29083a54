import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, Float, Integer, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..platform.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String, nullable=False, index=True)
    title = Column(String)
    catalog_version = Column(String)
    aaimm_score = Column(Float)
    navigator_score = Column(Float)
    overall_score = Column(Float)
    aaimm_stage = Column(String)
    navigator_stage = Column(String)
    overall_stage = Column(String)
    dimension_scores = Column(JSON)
    company_context = Column(JSON)
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    answers = relationship(
        "AssessmentAnswer",
        back_populates="assessment",
        cascade="all, delete-orphan",
        order_by="AssessmentAnswer.id",
    )


class AssessmentAnswer(Base):
    __tablename__ = "assessment_answers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    assessment_id = Column(String(36), ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False, index=True)
    question_key = Column(String, nullable=False)
    answer_text = Column(Text)
    answer_json = Column(JSON)

    assessment = relationship("Assessment", back_populates="answers")
