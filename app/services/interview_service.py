"""
Interview Scheduler.

Scheduling runs in two phases. The required phase validates the request,
resolves the slot, persists the interview and moves the application to
``interviewed``. The calendar event and the notification email are best
effort: their failures are logged and reported in the result, never raised.
"""
import asyncio
import logging
import time
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError, ValidationError
from app.core.timeutils import as_utc, interview_slot, parse_calendar_date, parse_clock_time
from app.core.validators import InputValidator
from app.models.application import ApplicationStatus
from app.models.interview import Interview, InterviewStatus
from app.models.user import User
from app.repositories.application_repo import ApplicationRepository
from app.repositories.interview_repo import InterviewRepository
from app.schemas.interview_schema import InterviewCreate, InterviewResponse, ScheduleInterviewResponse
from app.services.calendar_service import GoogleCalendarService, get_calendar_service
from app.services.logging import log_major_event
from app.services.notification_service import NotificationService, get_notification_service

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("applicant_id", "job_id", "interview_date", "interview_time", "interview_type")


class InterviewService:
    def __init__(self, calendar_service: Optional[GoogleCalendarService] = None,
                 notification_service: Optional[NotificationService] = None):
        self._calendar_service = calendar_service
        self._notification_service = notification_service

    @property
    def calendar_service(self) -> GoogleCalendarService:
        return self._calendar_service or get_calendar_service()

    @property
    def notification_service(self) -> NotificationService:
        return self._notification_service or get_notification_service()

    async def schedule_interview(self, hr_user: User, data: InterviewCreate, db: AsyncSession) -> ScheduleInterviewResponse:
        missing = InputValidator.missing_fields(data, REQUIRED_FIELDS)
        if missing:
            raise ValidationError("Missing required interview fields.", fields=missing)

        interview_date = parse_calendar_date(data.interview_date)
        if interview_date is None:
            raise ValidationError("Invalid interview date format.", fields=["interview_date"])
        clock = parse_clock_time(data.interview_time)
        if clock is None:
            raise ValidationError(
                "Invalid interview time format. Use HH:MMAM or HH:MMPM.", fields=["interview_time"])
        start, end = interview_slot(interview_date, *clock)

        application = await ApplicationRepository.get_with_details(db, data.applicant_id)
        if not application or not application.job or application.job_id != data.job_id:
            raise NotFoundError("Applicant or Job not found for scheduling.")
        job = application.job
        hr_user_id, hr_email, company = hr_user.user_id, hr_user.email, hr_user.company
        interview_time = data.interview_time.strip()

        meet_link = ""
        calendar_event_created = False
        try:
            meet_link = await asyncio.to_thread(
                self.calendar_service.create_meeting,
                summary=f"{data.interview_type} Interview: {application.full_name} - {job.job_title}",
                description=(
                    f"Applicant: {application.full_name}\nJob: {job.job_title}\n"
                    f"Notes: {data.notes or 'N/A'}"
                ),
                start=start,
                end=end,
                attendees=[application.contact_email, hr_email],
                request_id=f"{application.application_id}-{job.job_id}-{int(time.time() * 1000)}",
            )
            calendar_event_created = True
        except Exception as e:
            logger.error(f"Error creating Google Meet event for applicant {application.application_id}: {e}")

        interview = await InterviewRepository.create_interview(db, {
            "application_id": application.application_id,
            "job_id": job.job_id,
            "interview_date": interview_date,
            "interview_time": interview_time,
            "scheduled_at": as_utc(start),
            "ends_at": as_utc(end),
            "interview_type": data.interview_type.strip(),
            "status": InterviewStatus.SCHEDULED.value,
            "meet_link": meet_link or None,
            "notes": data.notes,
            "scheduled_by": hr_user_id,
        })

        email_sent = False
        try:
            await asyncio.to_thread(
                self.notification_service.send_interview_invitation,
                to_email=application.contact_email,
                candidate_name=application.full_name,
                job_title=job.job_title,
                interview_type=interview.interview_type,
                interview_date=interview_date,
                interview_time=interview_time,
                meet_link=meet_link,
                company=company,
                cc_email=hr_email,
            )
            email_sent = True
        except Exception as e:
            logger.error(f"Error sending interview email for applicant {application.application_id}: {e}")

        await ApplicationRepository.update_status(
            db, application.application_id, ApplicationStatus.INTERVIEWED.value)

        logger.info(f"Interview {interview.interview_id} scheduled for applicant {application.application_id} by HR {hr_user_id}")
        await log_major_event(
            db, action="interview_scheduled", status="success", actor_id=hr_user_id,
            details=(
                f"Interview on {interview_date.isoformat()} at {interview_time}; "
                f"calendar={'ok' if calendar_event_created else 'failed'}, email={'ok' if email_sent else 'failed'}."
            ),
            entity_type="interview", entity_id=interview.interview_id
        )

        if email_sent:
            message = "Interview scheduled and email sent successfully!"
        else:
            message = "Interview scheduled, but the notification email could not be sent."
        return ScheduleInterviewResponse(
            message=message,
            interview=InterviewResponse.model_validate(interview),
            meet_link=meet_link,
            calendar_event_created=calendar_event_created,
            email_sent=email_sent,
        )

    async def list_interviews(self, hr_user: User, db: AsyncSession) -> List[Interview]:
        interviews = await InterviewRepository.get_interviews_for_hr(db, hr_user.user_id)
        logger.info(f"Fetched {len(interviews)} interviews for HR user {hr_user.user_id}")
        return interviews


interview_service = InterviewService()

def get_interview_service() -> InterviewService:
    return interview_service
