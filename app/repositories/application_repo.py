from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from typing import Optional, List, Dict
from app.models.application import Application
from app.models.job import Job


class ApplicationRepository:
    @staticmethod
    async def create_application(db: AsyncSession, data: dict) -> Application:
        """Insert an application. Raises IntegrityError on a duplicate (user, job)."""
        application = Application(**data)
        db.add(application)
        await db.commit()
        await db.refresh(application)
        return application

    @staticmethod
    async def get_by_id(db: AsyncSession, application_id: int) -> Optional[Application]:
        result = await db.execute(
            select(Application).where(Application.application_id == application_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_with_details(db: AsyncSession, application_id: int) -> Optional[Application]:
        """Get a single application with candidate, job and job poster loaded."""
        result = await db.execute(
            select(Application)
            .options(
                selectinload(Application.user),
                selectinload(Application.job).selectinload(Job.poster)
            )
            .where(Application.application_id == application_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_applications_for_user(db: AsyncSession, user_id: int) -> List[Application]:
        result = await db.execute(
            select(Application)
            .options(selectinload(Application.job))
            .where(Application.user_id == user_id)
            .order_by(Application.applied_at.desc(), Application.application_id.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def get_applications_for_job_owner(db: AsyncSession, owner_id: int) -> List[Application]:
        """Applications to jobs posted by the given HR account."""
        result = await db.execute(
            select(Application)
            .join(Job, Application.job_id == Job.job_id)
            .options(selectinload(Application.user), selectinload(Application.job))
            .where(Job.posted_by == owner_id)
            .order_by(Application.applied_at.desc(), Application.application_id.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def update_status(db: AsyncSession, application_id: int, status: str) -> Optional[Application]:
        application = await ApplicationRepository.get_by_id(db, application_id)
        if not application:
            return None
        application.status = status
        await db.commit()
        await db.refresh(application)
        return application

    @staticmethod
    async def count_by_status_for_job_owner(db: AsyncSession, owner_id: int) -> Dict[str, int]:
        result = await db.execute(
            select(Application.status, func.count(Application.application_id))
            .join(Job, Application.job_id == Job.job_id)
            .where(Job.posted_by == owner_id)
            .group_by(Application.status)
        )
        return {status: count for status, count in result.all()}
