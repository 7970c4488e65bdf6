"""
Job Repository - Data Access Layer
Handles all database operations for job postings
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import update, and_, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from app.models.job import Job, JobStatus
from app.models.application import Application
import logging

logger = logging.getLogger(__name__)


class JobRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_job(self, data: Dict[str, Any], posted_by: int) -> Job:
        job = Job(**data, posted_by=posted_by)
        self.db.add(job)
        await self.db.commit()
        await self.db.refresh(job)
        logger.info(f"Created job {job.job_id} for HR user {posted_by}")
        return job

    async def get_job_by_id(self, job_id: int, posted_by: Optional[int] = None) -> Optional[Job]:
        """Get job by ID with optional ownership check"""
        query = (
            select(Job)
            .options(selectinload(Job.poster))
            .where(Job.job_id == job_id)
            .execution_options(populate_existing=True)
        )
        if posted_by is not None:
            query = query.where(Job.posted_by == posted_by)
        result = await self.db.execute(query)
        return result.scalars().first()

    async def get_jobs_by_owner(self, posted_by: int) -> List[Job]:
        result = await self.db.execute(
            select(Job)
            .where(Job.posted_by == posted_by)
            .order_by(Job.created_at.desc(), Job.job_id.desc())
        )
        return result.scalars().all()

    async def get_open_jobs_with_user_application(self, user_id: int, now: datetime) -> List[Tuple[Job, Optional[int], Optional[str]]]:
        """
        Active jobs whose deadline has not passed, each paired with the
        caller's application id and status (None when not applied).
        """
        query = (
            select(Job, Application.application_id, Application.status)
            .outerjoin(
                Application,
                and_(Application.job_id == Job.job_id, Application.user_id == user_id)
            )
            .where(Job.status == JobStatus.ACTIVE.value, Job.deadline >= now)
            .order_by(Job.created_at.desc(), Job.job_id.desc())
        )
        result = await self.db.execute(query)
        return result.all()

    async def update_owned_job(self, job_id: int, posted_by: int, values: Dict[str, Any]) -> Optional[Job]:
        """Update a job scoped to its owner. Returns None when no row matched."""
        try:
            result = await self.db.execute(
                update(Job)
                .where(Job.job_id == job_id, Job.posted_by == posted_by)
                .values(**values)
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error updating job {job_id}: {str(e)}")
            raise
        if result.rowcount == 0:
            return None
        return await self.get_job_by_id(job_id)

    async def delete_owned_job(self, job_id: int, posted_by: int) -> Optional[Job]:
        job = await self.get_job_by_id(job_id, posted_by=posted_by)
        if not job:
            return None
        # Applications and interviews go with the job
        await self.db.delete(job)
        await self.db.commit()
        return job

    async def count_applicants_by_job(self, job_ids: List[int]) -> Dict[int, int]:
        if not job_ids:
            return {}
        result = await self.db.execute(
            select(Application.job_id, func.count(Application.application_id))
            .where(Application.job_id.in_(job_ids))
            .group_by(Application.job_id)
        )
        return {job_id: count for job_id, count in result.all()}
