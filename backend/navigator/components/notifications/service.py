"""Synchronous notification helpers."""

import logging

from ...platform.config import settings
from ...platform.errors import RateLimitExceededError
from ...platform.rate_limit import check_rate_limit
from .email_client import EmailService

logger = logging.getLogger(__name__)


def send_assessment_report_sync(
    to_email: str,
    assessment_id: str,
    overall_score: float,
    overall_stage: str,
    recipient_name: str | None = None,
    company_name: str | None = None,
) -> dict | None:
    """Email the report link for a scored assessment.

    Returns None when email delivery is not configured. Raises
    RateLimitExceededError when the recipient already received too many
    report emails in the current window.
    """
    if not (settings.RESEND_API_KEY or "").strip():
        logger.info("RESEND_API_KEY not set; skipping report email for assessment_id=%s", assessment_id)
        return None

    key = f"report_email:{(to_email or '').strip().lower()}"
    limit = check_rate_limit(
        key,
        settings.REPORT_EMAIL_RATE_LIMIT,
        settings.REPORT_EMAIL_RATE_WINDOW_SECONDS,
    )
    if not limit.allowed:
        logger.warning("Rate limit exceeded key=%s", key)
        raise RateLimitExceededError(key, reset_at=limit.reset_at)

    email_svc = EmailService(api_key=settings.RESEND_API_KEY, from_email=settings.EMAIL_FROM)
    return email_svc.send_assessment_report(
        to_email=to_email,
        assessment_id=assessment_id,
        overall_score=overall_score,
        overall_stage=overall_stage,
        report_url=settings.report_url(assessment_id),
        recipient_name=recipient_name,
        company_name=company_name,
    )
