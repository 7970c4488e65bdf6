"""
Notification Service - Email service using SendGrid
"""
import html
import logging
from datetime import date
from typing import Optional
import sendgrid
from sendgrid.helpers.mail import Mail, Email, To, Cc, Content
from app.core.config import settings

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """Raised when an email could not be handed to SendGrid."""


# Singleton pattern for NotificationService
_notification_service_instance = None

def get_notification_service():
    global _notification_service_instance
    if _notification_service_instance is None:
        _notification_service_instance = NotificationService()
    return _notification_service_instance


class NotificationService:
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or settings.SENDGRID_API_KEY
        self.from_email = Email(settings.MAIL_FROM_EMAIL, settings.MAIL_FROM_NAME)

    def send_email(self, to_email: str, subject: str, html_content: str, cc_email: Optional[str] = None) -> int:
        if not self.api_key:
            raise NotificationError("SENDGRID_API_KEY is not configured")
        mail = Mail(from_email=self.from_email, to_emails=To(to_email), subject=subject,
                    html_content=Content("text/html", html_content))
        if cc_email and cc_email.lower() != to_email.lower():
            mail.add_cc(Cc(cc_email))
        try:
            sg = sendgrid.SendGridAPIClient(api_key=self.api_key)
            response = sg.send(mail)
        except Exception as e:
            raise NotificationError(f"SendGrid request failed: {e}") from e
        if response.status_code >= 400:
            raise NotificationError(f"SendGrid rejected the email with status {response.status_code}")
        return response.status_code

    def send_interview_invitation(self, to_email: str, candidate_name: str, job_title: str,
                                  interview_type: str, interview_date: date, interview_time: str,
                                  meet_link: str, company: Optional[str] = None,
                                  cc_email: Optional[str] = None) -> int:
        subject = f"Interview Invitation: {interview_type} for {job_title}"
        join_link = (
            f'<a href="{html.escape(meet_link)}">{html.escape(meet_link)}</a>'
            if meet_link else "Link could not be generated. Please contact HR."
        )
        html_content = f"""
            <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
                <p>Dear {html.escape(candidate_name)},</p>
                <p>Your interview for the position of <b>{html.escape(job_title)}</b> has been scheduled.</p>
                <div style="background-color: #f8f9fa; padding: 15px; border-radius: 5px; margin: 20px 0;">
                    <p><b>Type:</b> {html.escape(interview_type)}</p>
                    <p><b>Date:</b> {interview_date.strftime("%B %d, %Y")}</p>
                    <p><b>Time:</b> {html.escape(interview_time)} ({html.escape(settings.ORGANIZATION_TIMEZONE)})</p>
                    <p><b>Platform:</b> Google Meet</p>
                    <p><b>Join Link:</b> {join_link}</p>
                </div>
                <p>Please ensure you are ready a few minutes before the scheduled time.</p>
                <p>Best regards,<br>The {html.escape(company or 'HR Team')} at Jobotics</p>
            </div>
        """
        status_code = self.send_email(to_email, subject, html_content, cc_email=cc_email)
        logger.info(f"Interview invitation sent to {to_email} for {job_title}")
        return status_code
