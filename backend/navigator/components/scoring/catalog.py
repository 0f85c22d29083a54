"""Static question catalog: the single source of truth for question -> dimension -> group.

Changing this module changes scoring for every future submission, so bump
``CATALOG_VERSION`` whenever a question is added, removed or re-mapped.
Stored assessments keep the version they were scored under.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

CATALOG_VERSION = "2025.1"


class WeightGroup(str, enum.Enum):
    AAIMM = "aaimm"
    NAVIGATOR = "navigator"


class Dimension(str, enum.Enum):
    REASONING = "reasoning"
    COLLABORATION = "collaboration"
    ACTION = "action"
    DATA = "data"
    INFRASTRUCTURE = "infrastructure"
    GOVERNANCE = "governance"
    CHANGE = "change"
    RESOURCES = "resources"


# Fixed partition; never derived from the question list.
GROUP_DIMENSIONS: Mapping[WeightGroup, Tuple[Dimension, ...]] = MappingProxyType({
    WeightGroup.AAIMM: (
        Dimension.REASONING,
        Dimension.COLLABORATION,
        Dimension.ACTION,
    ),
    WeightGroup.NAVIGATOR: (
        Dimension.DATA,
        Dimension.INFRASTRUCTURE,
        Dimension.GOVERNANCE,
        Dimension.CHANGE,
        Dimension.RESOURCES,
    ),
})

DIMENSION_GROUP: Mapping[Dimension, WeightGroup] = MappingProxyType({
    dimension: group
    for group, dimensions in GROUP_DIMENSIONS.items()
    for dimension in dimensions
})

ALL_DIMENSIONS: Tuple[Dimension, ...] = tuple(Dimension)


@dataclass(frozen=True)
class Question:
    key: str
    dimension: Dimension
    prompt: str
    scale_min: int = 1
    scale_max: int = 5

    @property
    def weight_group(self) -> WeightGroup:
        return DIMENSION_GROUP[self.dimension]


ASSESSMENT_QUESTIONS: Tuple[Question, ...] = (
    Question(
        "reasoning_01",
        Dimension.REASONING,
        "How consistently do business units frame AI initiatives as explicit decision problems "
        "with measurable business outcomes and defined confidence thresholds?",
    ),
    Question(
        "reasoning_02",
        Dimension.REASONING,
        "To what extent are model recommendations challenged through structured hypothesis "
        "testing before they are accepted in executive workflows?",
    ),
    Question(
        "reasoning_03",
        Dimension.REASONING,
        "How mature is your organization in documenting decision rationale when AI outputs "
        "materially influence financial, operational, or risk decisions?",
    ),
    Question(
        "collaboration_01",
        Dimension.COLLABORATION,
        "How effectively do product, data science, legal, and operations leaders co-own AI "
        "priorities through formal governance forums and shared KPIs?",
    ),
    Question(
        "collaboration_02",
        Dimension.COLLABORATION,
        "To what degree are frontline domain experts embedded into model design and validation "
        "rather than consulted only after deployment decisions?",
    ),
    Question(
        "collaboration_03",
        Dimension.COLLABORATION,
        "How consistently are disagreements on AI tradeoffs resolved through transparent "
        "escalation paths with executive sponsorship?",
    ),
    Question(
        "action_01",
        Dimension.ACTION,
        "How reliably does your organization convert AI insights into operational actions with "
        "clear owners, deadlines, and benefit tracking?",
    ),
    Question(
        "action_02",
        Dimension.ACTION,
        "To what extent are AI-enabled process changes codified into standard operating "
        "procedures and audited for adoption at scale?",
    ),
    Question(
        "action_03",
        Dimension.ACTION,
        "How quickly can leadership move from pilot evidence to enterprise rollout without "
        "losing control of quality, compliance, or value realization?",
    ),
    Question(
        "data_01",
        Dimension.DATA,
        "How mature is your enterprise data foundation in providing trusted, governed, and "
        "reusable data products for AI use cases across business lines?",
    ),
    Question(
        "data_02",
        Dimension.DATA,
        "To what extent are data quality issues proactively detected, prioritized by business "
        "impact, and resolved within defined service levels?",
    ),
    Question(
        "data_03",
        Dimension.DATA,
        "How consistently can teams trace critical AI features to authoritative sources, "
        "transformations, and stewardship accountability?",
    ),
    Question(
        "infrastructure_01",
        Dimension.INFRASTRUCTURE,
        "How well does your platform support secure, scalable model development and deployment "
        "across cloud, on-prem, and regulated environments?",
    ),
    Question(
        "infrastructure_02",
        Dimension.INFRASTRUCTURE,
        "To what degree are MLOps and LLMOps capabilities standardized to reduce cycle time "
        "while maintaining reproducibility and control?",
    ),
    Question(
        "infrastructure_03",
        Dimension.INFRASTRUCTURE,
        "How effectively do cost, latency, and reliability metrics inform architectural "
        "decisions for production AI services?",
    ),
    Question(
        "governance_01",
        Dimension.GOVERNANCE,
        "How comprehensive is your AI governance framework in defining accountability, control "
        "points, and risk thresholds for high-impact use cases?",
    ),
    Question(
        "governance_02",
        Dimension.GOVERNANCE,
        "To what extent are model risk, bias, privacy, and security assessments integrated into "
        "delivery gates rather than handled as exceptions?",
    ),
    Question(
        "governance_03",
        Dimension.GOVERNANCE,
        "How consistently does executive leadership receive decision-ready reporting on AI "
        "compliance posture and residual risk exposure?",
    ),
    Question(
        "change_01",
        Dimension.CHANGE,
        "How effectively does the organization manage behavioral and process change required "
        "for sustained adoption of AI-enabled ways of working?",
    ),
    Question(
        "change_02",
        Dimension.CHANGE,
        "To what degree are communications, training, and leadership reinforcement tailored to "
        "different stakeholder groups during AI transformations?",
    ),
    Question(
        "change_03",
        Dimension.CHANGE,
        "How consistently are adoption barriers identified early and resolved through "
        "structured intervention plans with accountable owners?",
    ),
    Question(
        "resources_01",
        Dimension.RESOURCES,
        "How well are funding, talent, and partner capacity aligned to the AI portfolio based "
        "on strategic value and execution risk?",
    ),
    Question(
        "resources_02",
        Dimension.RESOURCES,
        "To what extent does your workforce strategy build critical AI capabilities through "
        "targeted hiring, upskilling, and role redesign?",
    ),
    Question(
        "resources_03",
        Dimension.RESOURCES,
        "How effectively are scarce technical resources prioritized toward initiatives with the "
        "strongest enterprise impact and readiness?",
    ),
)

_QUESTIONS_BY_KEY: Dict[str, Question] = {q.key: q for q in ASSESSMENT_QUESTIONS}


def get_question(key: str) -> Optional[Question]:
    return _QUESTIONS_BY_KEY.get(key)


def questions_for_dimension(dimension: Dimension | str) -> Tuple[Question, ...]:
    dim = Dimension(dimension)
    return tuple(q for q in ASSESSMENT_QUESTIONS if q.dimension is dim)


def dimensions_for_group(group: WeightGroup | str) -> Tuple[Dimension, ...]:
    return GROUP_DIMENSIONS[WeightGroup(group)]


def group_for_dimension(dimension: Dimension | str) -> WeightGroup:
    return DIMENSION_GROUP[Dimension(dimension)]


def question_keys() -> Tuple[str, ...]:
    return tuple(_QUESTIONS_BY_KEY)
