"""Pydantic models describing the scoring result payload."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict

from .catalog import CATALOG_VERSION
from .rules import Stage


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension_scores: Dict[str, float]
    aaimm_score: float
    navigator_score: float
    overall_score: float
    aaimm_stage: Stage
    navigator_stage: Stage
    overall_stage: Stage
    catalog_version: str = CATALOG_VERSION

    @property
    def group_score_a(self) -> float:
        return self.aaimm_score

    @property
    def group_score_b(self) -> float:
        return self.navigator_score
