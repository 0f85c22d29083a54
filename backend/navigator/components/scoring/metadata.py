"""Single source of truth for dimension/group/stage labels and explanations."""

from __future__ import annotations

from typing import Dict, Any

from .catalog import CATALOG_VERSION, DIMENSION_GROUP, GROUP_DIMENSIONS, Dimension, WeightGroup
from .rules import SCORE_DECIMAL_PLACES, SCORE_MAX, SCORE_MIN, STAGE_THRESHOLDS, TOP_STAGE, Stage

GROUP_LABELS: Dict[WeightGroup, str] = {
    WeightGroup.AAIMM: "AAIMM",
    WeightGroup.NAVIGATOR: "Navigator",
}

GROUP_DESCRIPTIONS: Dict[WeightGroup, str] = {
    WeightGroup.AAIMM: "How the organization reasons about, collaborates on, and acts on AI outputs.",
    WeightGroup.NAVIGATOR: "The data, platform, governance, change, and resourcing foundations for AI at scale.",
}

DIMENSION_LABELS: Dict[Dimension, str] = {
    Dimension.REASONING: "Reasoning",
    Dimension.COLLABORATION: "Collaboration",
    Dimension.ACTION: "Action",
    Dimension.DATA: "Data",
    Dimension.INFRASTRUCTURE: "Infrastructure",
    Dimension.GOVERNANCE: "Governance",
    Dimension.CHANGE: "Change",
    Dimension.RESOURCES: "Resources",
}

DIMENSION_DESCRIPTIONS: Dict[Dimension, str] = {
    Dimension.REASONING: "Framing AI work as decision problems and challenging model output before acting on it.",
    Dimension.COLLABORATION: "Shared ownership of AI priorities across business, data, legal, and operations.",
    Dimension.ACTION: "Converting AI insight into owned, tracked operational change.",
    Dimension.DATA: "Trusted, governed, traceable data products for AI use cases.",
    Dimension.INFRASTRUCTURE: "Secure, standardized platforms for building and running models in production.",
    Dimension.GOVERNANCE: "Accountability, risk controls, and compliance reporting for AI.",
    Dimension.CHANGE: "Managing the behavioral and process change that sustained adoption requires.",
    Dimension.RESOURCES: "Funding, talent, and partner capacity aligned to the AI portfolio.",
}

STAGE_DESCRIPTIONS: Dict[Stage, str] = {
    Stage.EMERGING: "Ad hoc experimentation with little shared structure.",
    Stage.DEVELOPING: "Early capabilities in place but inconsistent across the enterprise.",
    Stage.OPERATIONAL: "Repeatable practices supporting AI in production.",
    Stage.SCALING: "Enterprise-wide capabilities expanding AI impact deliberately.",
    Stage.OPTIMIZED: "AI embedded in how the organization decides and operates.",
}


def stage_bands() -> list[Dict[str, Any]]:
    """Stage bands as (lower exclusive, upper inclusive) pairs; open ends are None."""
    bands = []
    lower = None
    for upper, stage in STAGE_THRESHOLDS:
        bands.append({
            "stage": stage.value,
            "lower_exclusive": float(lower) if lower is not None else None,
            "upper_inclusive": float(upper),
            "description": STAGE_DESCRIPTIONS[stage],
        })
        lower = upper
    bands.append({
        "stage": TOP_STAGE.value,
        "lower_exclusive": float(lower),
        "upper_inclusive": None,
        "description": STAGE_DESCRIPTIONS[TOP_STAGE],
    })
    return bands


def scoring_metadata_payload() -> Dict[str, Any]:
    return {
        "catalog_version": CATALOG_VERSION,
        "dimensions": {
            dimension.value: {
                "label": DIMENSION_LABELS[dimension],
                "group": DIMENSION_GROUP[dimension].value,
                "description": DIMENSION_DESCRIPTIONS[dimension],
            }
            for dimension in Dimension
        },
        "groups": {
            group.value: {
                "label": GROUP_LABELS[group],
                "description": GROUP_DESCRIPTIONS[group],
                "dimensions": [d.value for d in GROUP_DIMENSIONS[group]],
            }
            for group in WeightGroup
        },
        "stages": stage_bands(),
        "policies": {
            "score_range": [SCORE_MIN, SCORE_MAX],
            "decimal_places": SCORE_DECIMAL_PLACES,
            "rounding": "half_up",
            "rounded_at_each_layer": True,
            "overall_formula": "mean(aaimm_score, navigator_score)",
            "unanswered_dimension_score": 0.0,
        },
    }
