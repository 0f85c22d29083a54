"""
Domain exceptions for the assessment backend.

The scoring engine never raises; these cover the collaborators around it
(persistence, rate limiting).
"""

from __future__ import annotations


class NavigatorError(Exception):
    """Base exception for the assessment backend."""

    pass


class AssessmentNotFoundError(NavigatorError):
    """Assessment does not exist or is not owned by the requesting user."""

    def __init__(self, assessment_id: str):
        self.assessment_id = assessment_id
        super().__init__(f"Assessment with ID {assessment_id} not found")


class PersistenceError(NavigatorError):
    """Database write or read failure."""

    def __init__(self, message: str = "Failed to persist assessment"):
        self.message = message
        super().__init__(message)


class RateLimitExceededError(NavigatorError):
    """Too many requests for a rate-limit key within the current window."""

    def __init__(self, key: str, reset_at: float | None = None):
        self.key = key
        self.reset_at = reset_at
        super().__init__(f"Rate limit exceeded for {key}")
