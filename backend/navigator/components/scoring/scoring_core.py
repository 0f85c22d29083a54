"""Deterministic readiness scoring: response filtering, averaging, rounding, stage bands.

GUARDRAIL: No I/O, no clock, no randomness, no AI. Scores must always be
reproducible from the stored raw answers.
"""

from __future__ import annotations

import math
import numbers
from decimal import Context, Decimal, ROUND_HALF_EVEN, localcontext
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .catalog import ALL_DIMENSIONS, ASSESSMENT_QUESTIONS, GROUP_DIMENSIONS, Dimension, WeightGroup
from .rules import (
    SCORE_DECIMAL_PLACES,
    SCORE_QUANTUM,
    SCORE_ROUNDING,
    STAGE_THRESHOLDS,
    TOP_STAGE,
    Stage,
)

# Wide precision and no traps: arithmetic on absurd inputs yields NaN/Infinity
# instead of raising.
SCORING_CONTEXT = Context(prec=60, rounding=ROUND_HALF_EVEN, traps=[])

ZERO = Decimal("0")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_decimal(value: Any) -> Optional[Decimal]:
    """Return ``value`` as a Decimal when it is a finite real number, else None.

    Booleans, strings and containers are not numbers here even when they
    look like one.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / Decimal(value.denominator)
    try:
        as_float = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(as_float):
        return None
    # Shortest repr, so 0.1 stays 0.1 rather than its binary expansion.
    return Decimal(repr(as_float))


def _average(values: Iterable[Decimal]) -> Decimal:
    items = list(values)
    if not items:
        return ZERO
    return sum(items, ZERO) / len(items)


def _round2(value: Decimal) -> Decimal:
    if not value.is_finite():
        return value
    # quantize keeps every integer digit, so the precision has to grow with the value.
    context = SCORING_CONTEXT.copy()
    context.prec = max(SCORING_CONTEXT.prec, value.adjusted() + SCORE_DECIMAL_PLACES + 2)
    return value.quantize(SCORE_QUANTUM, rounding=SCORE_ROUNDING, context=context)


def _collect_dimension_values(responses: Mapping[str, Any]) -> Dict[Dimension, List[Decimal]]:
    values: Dict[Dimension, List[Decimal]] = {dimension: [] for dimension in ALL_DIMENSIONS}
    for question in ASSESSMENT_QUESTIONS:
        try:
            raw = responses.get(question.key)
        except Exception:
            raw = None
        parsed = _to_decimal(raw)
        if parsed is None:
            continue
        values[question.dimension].append(parsed)
    return values


def _score_dimensions(responses: Mapping[str, Any]) -> Dict[Dimension, Decimal]:
    collected = _collect_dimension_values(responses)
    return {dimension: _round2(_average(collected[dimension])) for dimension in ALL_DIMENSIONS}


def _score_group(dimension_scores: Mapping[Dimension, Decimal], group: WeightGroup) -> Decimal:
    return _round2(_average(dimension_scores[d] for d in GROUP_DIMENSIONS[group]))


def _stage_for(score: Decimal) -> Stage:
    if score.is_nan():
        return Stage.EMERGING
    for upper_bound, stage in STAGE_THRESHOLDS:
        if score <= upper_bound:
            return stage
    return TOP_STAGE


def classify_stage(score: Any) -> Stage:
    """Map a score on the 0-5 scale to its maturity stage.

    Upper bounds are inclusive: 1.9 is Emerging, 4.5 is Scaling, anything
    above 4.5 is Optimized. Non-numeric input classifies as Emerging.
    """
    with localcontext(SCORING_CONTEXT):
        if isinstance(score, Decimal):
            parsed = score
        elif isinstance(score, float) and math.isinf(score):
            parsed = Decimal(score)
        else:
            parsed = _to_decimal(score)
        if parsed is None:
            return Stage.EMERGING
        return _stage_for(parsed)


def compute_scores(responses: Mapping[str, Any]) -> Dict[str, Any]:
    """Run the full aggregation and return Decimal scores keyed by output field."""
    with localcontext(SCORING_CONTEXT):
        dimension_scores = _score_dimensions(responses)
        aaimm_score = _score_group(dimension_scores, WeightGroup.AAIMM)
        navigator_score = _score_group(dimension_scores, WeightGroup.NAVIGATOR)
        # Two-term mean: both groups weigh the same regardless of dimension count.
        overall_score = _round2(_average([aaimm_score, navigator_score]))

        return {
            "dimension_scores": dimension_scores,
            "aaimm_score": aaimm_score,
            "navigator_score": navigator_score,
            "overall_score": overall_score,
            "aaimm_stage": _stage_for(aaimm_score),
            "navigator_stage": _stage_for(navigator_score),
            "overall_stage": _stage_for(overall_score),
        }
