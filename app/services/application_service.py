"""
Application Workflow.

Candidates apply to open jobs; HR users review applicants and move them
through the status pipeline. Only membership in the status set is checked,
never the transition itself.
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import ConflictError, DeadlinePassedError, NotFoundError, ValidationError
from app.core.timeutils import as_utc, utcnow
from app.core.validators import InputValidator
from app.models.application import Application, ApplicationStatus
from app.models.user import User
from app.repositories.application_repo import ApplicationRepository
from app.repositories.job_repo import JobRepository
from app.schemas.application_schema import ApplicationCreate
from app.services.logging import log_major_event

logger = logging.getLogger(__name__)


def is_deadline_open(deadline: Optional[datetime], now: datetime) -> bool:
    """Applications are accepted up to and including the deadline instant."""
    return deadline is None or as_utc(now) <= as_utc(deadline)


class ApplicationService:
    def _validate_submission(self, data: ApplicationCreate) -> None:
        missing = InputValidator.missing_fields(
            data, ("job_id", "full_name", "contact_email", "resume_url"))
        if missing:
            raise ValidationError(
                "Missing required application fields (Job ID, Full Name, Contact Email, Resume URL).",
                fields=missing)
        if not InputValidator.is_valid_email(data.contact_email):
            raise ValidationError("Invalid email format for contact email.", fields=["contact_email"])

    async def submit_application(self, user: User, data: ApplicationCreate, db: AsyncSession,
                                 now: Optional[datetime] = None) -> Application:
        self._validate_submission(data)

        job = await JobRepository(db).get_job_by_id(data.job_id)
        if not job:
            raise NotFoundError("Job not Found!")
        if not is_deadline_open(job.deadline, now or utcnow()):
            raise DeadlinePassedError()

        # Rollback expires loaded instances, keep plain ids
        user_id, job_id = user.user_id, job.job_id
        app_data = {
            "user_id": user_id,
            "job_id": job_id,
            "full_name": data.full_name.strip(),
            "contact_email": data.contact_email.strip(),
            "phone_number": (data.phone_number or "").strip() or None,
            "cover_letter": data.cover_letter or None,
            "resume_url": data.resume_url.strip(),
            "status": ApplicationStatus.APPLIED.value,
        }
        # The (user_id, job_id) unique constraint decides concurrent duplicates
        try:
            application = await ApplicationRepository.create_application(db, app_data)
        except IntegrityError:
            await db.rollback()
            logger.warning(f"User {user_id} already applied to job {job_id}")
            raise ConflictError("You have already applied for this job.")

        logger.info(f"Application {application.application_id} submitted by user {user_id} for job {job_id}")
        await log_major_event(
            db, action="application_submitted", status="success", actor_id=user_id,
            details=f"Application submitted for job {job_id}.",
            entity_type="application", entity_id=application.application_id
        )
        return application

    async def list_applications_for_candidate(self, user: User, db: AsyncSession) -> List[Application]:
        applications = await ApplicationRepository.get_applications_for_user(db, user.user_id)
        logger.info(f"Fetched {len(applications)} applications for user {user.user_id}")
        return applications

    async def list_applicants_for_hr(self, hr_user: User, db: AsyncSession) -> List[Application]:
        applicants = await ApplicationRepository.get_applications_for_job_owner(db, hr_user.user_id)
        logger.info(f"Fetched {len(applicants)} applicants for HR user {hr_user.user_id}")
        return applicants

    async def get_applicant_detail(self, hr_user: User, application_id: int, db: AsyncSession) -> Application:
        application = await ApplicationRepository.get_with_details(db, application_id)
        if not application:
            logger.warning(f"Applicant with ID {application_id} not found")
            raise NotFoundError("Applicant not found")
        return application

    async def update_application_status(self, hr_user: User, application_id: int,
                                        new_status: Optional[str], db: AsyncSession) -> Application:
        # Any HR user may triage any application; see DESIGN.md
        if not new_status or new_status not in ApplicationStatus.values():
            raise ValidationError("Invalid or missing status for update.", fields=["status"])

        application = await ApplicationRepository.update_status(db, application_id, new_status)
        if not application:
            raise NotFoundError("Applicant not found.")

        logger.info(f"Applicant {application_id} status updated to {new_status} by HR user {hr_user.user_id}")
        await log_major_event(
            db, action="application_status_updated", status="success", actor_id=hr_user.user_id,
            details=f"Status set to {new_status}.", entity_type="application", entity_id=application_id
        )
        return application


application_service = ApplicationService()

def get_application_service() -> ApplicationService:
    return application_service
