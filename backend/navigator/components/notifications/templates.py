"""HTML email templates for AI Navigator notifications."""

from html import escape

from ...platform.brand import BRAND_NAME, BRAND_PRODUCT_NAME


def assessment_report_html(
    greeting_name: str,
    assessment_id: str,
    overall_score: float,
    overall_stage: str,
    report_url: str,
    company_name: str | None = None,
) -> str:
    company_line = (
        f'<p style="margin:0 0 8px;color:#4b5563;font-size:15px;"><strong>Company:</strong> {escape(company_name)}</p>'
        if company_name
        else ""
    )
    safe_url = escape(report_url, quote=True)
    return f"""\
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin:0;padding:0;background-color:#f4f4f7;font-family:Arial,Helvetica,sans-serif;line-height:1.5;color:#111827;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background-color:#f4f4f7;padding:40px 20px;">
    <tr>
      <td align="center">
        <table width="600" cellpadding="0" cellspacing="0" style="background-color:#ffffff;border-radius:8px;overflow:hidden;">
          <tr>
            <td style="background-color:#111827;padding:28px 40px;text-align:center;">
              <h1 style="margin:0;color:#ffffff;font-size:24px;font-weight:700;">{BRAND_NAME}</h1>
              <p style="margin:4px 0 0;color:#d1d5db;font-size:14px;">{BRAND_PRODUCT_NAME}</p>
            </td>
          </tr>
          <tr>
            <td style="padding:40px;">
              <h2 style="margin:0 0 16px;font-size:22px;">Your {BRAND_NAME} Report is Ready</h2>
              <p style="margin:0 0 16px;color:#4b5563;font-size:15px;">Hi {escape(greeting_name)},</p>
              <p style="margin:0 0 16px;color:#4b5563;font-size:15px;">
                Your assessment has been completed and your report is now available.
              </p>
              <p style="margin:0 0 8px;color:#4b5563;font-size:15px;"><strong>Assessment ID:</strong> {escape(assessment_id)}</p>
              {company_line}
              <p style="margin:0 0 8px;color:#4b5563;font-size:15px;"><strong>Overall Score:</strong> {overall_score:.2f}</p>
              <p style="margin:0 0 24px;color:#4b5563;font-size:15px;"><strong>Overall Stage:</strong> {escape(overall_stage)}</p>
              <p style="margin:24px 0;">
                <a href="{safe_url}"
                   style="display:inline-block;background:#111827;color:#ffffff;text-decoration:none;padding:10px 16px;border-radius:6px;">
                  View Report
                </a>
              </p>
              <p style="margin:0 0 8px;color:#9ca3af;font-size:13px;">If the button does not work, use this link:</p>
              <p style="margin:0;font-size:13px;word-break:break-all;"><a href="{safe_url}">{safe_url}</a></p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""
