"""Scoring constants: maturity stage bands and rounding policy."""

import enum
from decimal import Decimal, ROUND_HALF_UP


class Stage(str, enum.Enum):
    EMERGING = "Emerging"
    DEVELOPING = "Developing"
    OPERATIONAL = "Operational"
    SCALING = "Scaling"
    OPTIMIZED = "Optimized"


# (inclusive upper bound, stage). Band widths 1.0/1.0/1.0/0.6/0.5 are business-defined.
STAGE_THRESHOLDS = (
    (Decimal("1.9"), Stage.EMERGING),
    (Decimal("2.9"), Stage.DEVELOPING),
    (Decimal("3.9"), Stage.OPERATIONAL),
    (Decimal("4.5"), Stage.SCALING),
)
TOP_STAGE = Stage.OPTIMIZED

# Every aggregation layer (dimension, group, overall) is rounded to this many places.
SCORE_DECIMAL_PLACES = 2
SCORE_QUANTUM = Decimal(10) ** -SCORE_DECIMAL_PLACES
SCORE_ROUNDING = ROUND_HALF_UP

SCORE_MIN = 0.0
SCORE_MAX = 5.0
