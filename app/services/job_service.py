"""
Job Listing Manager.

HR users create and maintain job postings; every mutation is scoped to the
posting's owner and a posting owned by someone else is reported exactly as
a missing one.
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import NotFoundError, ValidationError
from app.core.timeutils import parse_deadline, utcnow
from app.models.job import Job, JobStatus
from app.models.user import User
from app.repositories.job_repo import JobRepository
from app.schemas.job_schema import JobFields, JobUpdate, CandidateJobResponse, JobSummary
from app.services.logging import log_major_event

logger = logging.getLogger(__name__)

JOB_NOT_FOUND = "Job not found"


class JobService:
    def validate_job_fields(self, fields: JobFields, now: Optional[datetime] = None) -> dict:
        """Check job form fields and return column values, reporting every bad field at once."""
        now = now or utcnow()
        invalid = []

        title = (fields.job_title or "").strip()
        if not title:
            invalid.append("job_title")
        job_mode = (fields.job_mode or "").strip()
        if not job_mode:
            invalid.append("job_mode")
        description = (fields.job_description or "").strip()
        if not description:
            invalid.append("job_description")
        if fields.num_openings is None or fields.num_openings <= 0:
            invalid.append("num_openings")
        if fields.min_salary is None or fields.min_salary < 0:
            invalid.append("min_salary")
        if fields.max_salary is None or fields.max_salary < 0:
            invalid.append("max_salary")

        deadline = parse_deadline(fields.deadline)
        if deadline is None or deadline < now:
            invalid.append("deadline")

        if invalid:
            raise ValidationError(
                f"Invalid or missing job fields: {', '.join(invalid)}", fields=invalid)

        return {
            "job_title": title,
            "num_openings": fields.num_openings,
            "min_salary": fields.min_salary,
            "max_salary": fields.max_salary,
            "job_mode": job_mode,
            "job_description": description,
            "deadline": deadline,
        }

    async def create_job(self, hr_user: User, fields: JobFields, db: AsyncSession,
                         now: Optional[datetime] = None) -> Job:
        values = self.validate_job_fields(fields, now)
        values["status"] = JobStatus.ACTIVE.value
        job = await JobRepository(db).create_job(values, posted_by=hr_user.user_id)
        await log_major_event(
            db, action="job_created", status="success", actor_id=hr_user.user_id,
            details=f"Job '{job.job_title}' posted.", entity_type="job", entity_id=job.job_id
        )
        return job

    async def list_jobs(self, hr_user: User, db: AsyncSession) -> List[Job]:
        jobs = await JobRepository(db).get_jobs_by_owner(hr_user.user_id)
        logger.info(f"Fetched {len(jobs)} job openings for HR user {hr_user.user_id}")
        return jobs

    async def list_open_jobs_for_candidate(self, user: User, db: AsyncSession,
                                           now: Optional[datetime] = None) -> List[CandidateJobResponse]:
        rows = await JobRepository(db).get_open_jobs_with_user_application(user.user_id, now or utcnow())
        jobs = []
        for job, application_id, application_status in rows:
            summary = JobSummary.model_validate(job).model_dump()
            jobs.append(CandidateJobResponse(
                **summary,
                num_openings=job.num_openings,
                job_description=job.job_description,
                created_at=job.created_at,
                has_applied=application_id is not None,
                user_application_status=application_status,
            ))
        return jobs

    async def get_job(self, job_id: int, db: AsyncSession) -> Job:
        job = await JobRepository(db).get_job_by_id(job_id)
        if not job:
            raise NotFoundError(JOB_NOT_FOUND)
        return job

    async def update_job(self, hr_user: User, job_id: int, fields: JobUpdate, db: AsyncSession,
                         now: Optional[datetime] = None) -> Job:
        values = self.validate_job_fields(fields, now)
        job_status = fields.status or JobStatus.ACTIVE.value
        if job_status not in [s.value for s in JobStatus]:
            raise ValidationError(f"Invalid job status: {job_status}", fields=["status"])
        values["status"] = job_status

        job = await JobRepository(db).update_owned_job(job_id, hr_user.user_id, values)
        if not job:
            logger.warning(f"HR user {hr_user.user_id} updated no job with ID {job_id}")
            raise NotFoundError("Job not found or unauthorized to update")
        await log_major_event(
            db, action="job_updated", status="success", actor_id=hr_user.user_id,
            details=f"Job '{job.job_title}' updated.", entity_type="job", entity_id=job_id
        )
        return job

    async def delete_job(self, hr_user: User, job_id: int, db: AsyncSession) -> Job:
        job = await JobRepository(db).delete_owned_job(job_id, hr_user.user_id)
        if not job:
            raise NotFoundError("Job not found or unauthorized to delete")
        await log_major_event(
            db, action="job_deleted", status="success", actor_id=hr_user.user_id,
            details=f"Job '{job.job_title}' deleted.", entity_type="job", entity_id=job_id
        )
        return job


job_service = JobService()

def get_job_service() -> JobService:
    return job_service
