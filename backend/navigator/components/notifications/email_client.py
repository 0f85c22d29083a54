"""
Resend email service for assessment report notifications.

Delivers the "report is ready" email once an assessment has been scored.
"""

import logging

import resend

from ...platform.brand import BRAND_REPORT_SUBJECT, brand_email_from
from .templates import assessment_report_html

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending transactional emails through Resend."""

    def __init__(self, api_key: str, from_email: str = brand_email_from()):
        resend.api_key = api_key
        self.from_email = from_email
        logger.info("EmailService initialised (from=%s)", self.from_email)

    def send_assessment_report(
        self,
        to_email: str,
        assessment_id: str,
        overall_score: float,
        overall_stage: str,
        report_url: str,
        recipient_name: str | None = None,
        company_name: str | None = None,
    ) -> dict:
        try:
            greeting_name = (recipient_name or "").strip() or "there"
            company = (company_name or "").strip() or None
            logger.info("Sending assessment report email to %s (assessment_id=%s)", to_email, assessment_id)

            html_body = assessment_report_html(
                greeting_name=greeting_name,
                assessment_id=assessment_id,
                overall_score=overall_score,
                overall_stage=overall_stage,
                report_url=report_url,
                company_name=company,
            )

            email = resend.Emails.send({
                "from": self.from_email,
                "to": [to_email],
                "subject": BRAND_REPORT_SUBJECT,
                "html": html_body,
            })

            email_id = email.get("id", "") if isinstance(email, dict) else str(email)
            logger.info("Assessment report sent successfully (email_id=%s, to=%s)", email_id, to_email)
            return {"success": True, "email_id": email_id}
        except Exception as e:
            logger.error("Failed to send assessment report to %s: %s", to_email, str(e))
            return {"success": False, "email_id": ""}
