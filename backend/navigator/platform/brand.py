"""Centralized brand configuration for user-facing copy."""

BRAND_NAME = "AI Navigator"
BRAND_DOMAIN = "resend.dev"
BRAND_PRODUCT_NAME = "Enterprise AI Readiness Assessment"
BRAND_REPORT_SUBJECT = f"Your {BRAND_NAME} Report is Ready"

def brand_email_from() -> str:
    return f"{BRAND_NAME} <onboarding@{BRAND_DOMAIN}>"
