from .assessment import Assessment, AssessmentAnswer

__all__ = [
    "Assessment",
    "AssessmentAnswer",
]
