"""
Score analytics derived from stored dimension scores.

All functions here read already-computed scores; they never recompute them
from raw answers and never call any external API.
"""

from typing import Any, Dict, List, Mapping, Tuple

from .catalog import ALL_DIMENSIONS, GROUP_DIMENSIONS, WeightGroup
from .metadata import DIMENSION_LABELS, GROUP_LABELS
from .scoring_core import classify_stage


def _as_score(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def rank_dimensions(dimension_scores: Mapping[str, Any]) -> List[Tuple[str, float]]:
    """Dimensions ordered lowest score first; ties keep catalog order.

    Dimensions missing from ``dimension_scores`` rank as 0.
    """
    order = {d.value: index for index, d in enumerate(ALL_DIMENSIONS)}
    scored = [(d.value, _as_score(dimension_scores.get(d.value, 0.0))) for d in ALL_DIMENSIONS]
    return sorted(scored, key=lambda item: (item[1], order[item[0]]))


def bottleneck_dimensions(dimension_scores: Mapping[str, Any], n: int = 3) -> List[Tuple[str, float]]:
    return rank_dimensions(dimension_scores)[: max(0, n)]


def strength_dimensions(dimension_scores: Mapping[str, Any], n: int = 2) -> List[Tuple[str, float]]:
    """Highest-scoring dimensions, highest first."""
    if n <= 0:
        return []
    return list(reversed(rank_dimensions(dimension_scores)[-n:]))


def group_breakdown(dimension_scores: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Per-group view of dimension scores with display labels and stage per dimension."""
    breakdown = []
    for group in WeightGroup:
        dims = []
        for dimension in GROUP_DIMENSIONS[group]:
            score = _as_score(dimension_scores.get(dimension.value, 0.0))
            dims.append({
                "dimension": dimension.value,
                "label": DIMENSION_LABELS[dimension],
                "score": score,
                "stage": classify_stage(score).value,
            })
        breakdown.append({
            "group": group.value,
            "label": GROUP_LABELS[group],
            "dimensions": dims,
        })
    return breakdown
