"""Readiness scoring facade.

This module keeps the stable public API while the aggregation rules live in
`scoring_core.py`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .catalog import CATALOG_VERSION
from .schemas import ScoreResult
from .scoring_core import classify_stage, compute_scores

logger = logging.getLogger(__name__)

__all__ = ["calculate_scores", "classify_stage"]


def calculate_scores(responses: Any) -> ScoreResult:
    """Turn raw questionnaire responses into dimension, group and overall scores.

    ``responses`` maps question keys to 1-5 values. Unknown keys are ignored;
    values that are not finite numbers are treated as unanswered. A dimension
    with no valid answers scores 0 and still counts in its group average.
    Never raises: anything that is not a mapping scores as an empty response set.
    """
    if not isinstance(responses, Mapping):
        responses = {}

    raw = compute_scores(responses)
    result = ScoreResult(
        dimension_scores={d.value: float(score) for d, score in raw["dimension_scores"].items()},
        aaimm_score=float(raw["aaimm_score"]),
        navigator_score=float(raw["navigator_score"]),
        overall_score=float(raw["overall_score"]),
        aaimm_stage=raw["aaimm_stage"],
        navigator_stage=raw["navigator_stage"],
        overall_stage=raw["overall_stage"],
        catalog_version=CATALOG_VERSION,
    )
    logger.debug(
        "Scores calculated overall=%.2f (%s) aaimm=%.2f navigator=%.2f",
        result.overall_score,
        result.overall_stage.value,
        result.aaimm_score,
        result.navigator_score,
    )
    return result
